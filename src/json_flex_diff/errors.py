"""Exceptions raised by json-flex-diff."""

from __future__ import annotations

__all__ = ["ParseError"]

# Diagnostic preview length for the transformed text
PREVIEW_LENGTH = 200


class ParseError(ValueError):
    """Raised when text is neither JSON nor a recognisable Python literal.

    Attributes:
        message:        Human-readable description.
        processed_text: The text after every rewrite stage, truncated to
                        ``PREVIEW_LENGTH`` characters (``...`` appended when cut).
        reason:         Message of the underlying JSON decode failure, if any.
    """

    def __init__(self, message: str, processed_text: str = "", reason: str | None = None):
        super().__init__(message)
        self.message = message
        self.processed_text = processed_text
        self.reason = reason

    @classmethod
    def from_processed(cls, processed: str, reason: str) -> ParseError:
        preview = processed[:PREVIEW_LENGTH]
        if len(processed) > PREVIEW_LENGTH:
            preview += "..."
        message = (
            "Unable to parse input as JSON or Python data structure. "
            f'Processed: "{preview}". Error: {reason}'
        )
        return cls(message, processed_text=preview, reason=reason)
