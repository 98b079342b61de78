"""FlexibleParser: strict JSON first, then a fixed pipeline of Python-literal rewrites.

The parser is best-effort.  It accepts what ``repr()`` of everyday Python
data looks like (``{'a': True, 'b': None, 'c': (1, 2)}``) by rewriting the
text into JSON stage by stage and parsing the result.  It never returns a
partial value: either the final text parses or ``ParseError`` is raised.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any, ClassVar

from json_flex_diff.errors import ParseError
from json_flex_diff.parser.rewrites import (
    balance_brackets,
    cleanup,
    convert_single_quotes,
    looks_like_json,
    quote_unquoted_keys,
    replace_python_constants,
    rewrite_collections,
    rewrite_complex_numbers,
    rewrite_datetimes,
    rewrite_decimals,
    rewrite_object_reprs,
    strip_string_prefixes,
)

__all__ = ["FlexibleParser", "parse_flexible"]

logger = logging.getLogger(__name__)

Stage = Callable[[str], str]


class FlexibleParser:
    """Parses JSON or Python literal reprs into JSON-compatible values.

    The parser holds no state; one instance can be shared freely.

    Example::

        parser = FlexibleParser()
        parser.parse("{'a': True, 'b': None, 'c': (1, 2, 3)}")
        # {"a": True, "b": None, "c": [1, 2, 3]}
    """

    STAGES: ClassVar[tuple[tuple[str, Stage], ...]] = (
        ("python_constants", replace_python_constants),
        ("single_quotes", convert_single_quotes),
        ("complex_numbers", rewrite_complex_numbers),
        ("decimals", rewrite_decimals),
        ("string_prefixes", strip_string_prefixes),
        ("object_reprs", rewrite_object_reprs),
        ("datetimes", rewrite_datetimes),
        ("collections", rewrite_collections),
        ("unquoted_keys", quote_unquoted_keys),
        ("cleanup", cleanup),
    )

    def parse(self, text: str) -> Any:
        """Parse ``text`` into a JSON value.

        Raises:
            ParseError: If the text is empty, or neither the strict parse nor
                the rewritten text (with one bracket-repair retry) parses.
        """
        if not text or not text.strip():
            raise ParseError("Unable to parse empty input", processed_text="")

        s = text.strip()

        if looks_like_json(s):
            try:
                return json.loads(s)
            except json.JSONDecodeError as exc:
                logger.debug("strict parse failed (%s), rewriting as Python literal", exc)

        processed = self.transform(s)

        try:
            return json.loads(processed)
        except json.JSONDecodeError as exc:
            error = exc

        repaired = balance_brackets(processed)
        if repaired != processed:
            logger.debug("retrying with balanced brackets")
            try:
                return json.loads(repaired)
            except json.JSONDecodeError as exc:
                logger.debug("bracket repair did not help: %s", exc)

        raise ParseError.from_processed(processed, str(error)) from error

    def transform(self, text: str) -> str:
        """Run every rewrite stage in order and return the rewritten text."""
        s = text
        for name, stage in self.STAGES:
            rewritten = stage(s)
            if rewritten != s:
                logger.debug("stage %s rewrote input (%d -> %d chars)", name, len(s), len(rewritten))
            s = rewritten
        return s


def parse_flexible(text: str) -> Any:
    """Parse JSON or a Python literal repr; raise ``ParseError`` on failure."""
    return FlexibleParser().parse(text)
