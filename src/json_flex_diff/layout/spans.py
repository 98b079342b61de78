"""Layout dataclass: rendered text plus the spans recorded while rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from json_flex_diff.result import LineRange


@dataclass(frozen=True, slots=True)
class Layout:
    """A pretty-printed JSON value and the line spans of its root children.

    Attributes:
        text:  The rendered text, identical to ``json.dumps(value, indent=...)``.
        items: For a root array, the span of each element by index.  Empty
               for any other root.
        keys:  For a root object, the span of each top-level key, from the
               ``"key":`` line to the last line of its value.  Empty for any
               other root.
    """

    text: str
    items: tuple[LineRange, ...] = ()
    keys: dict[str, LineRange] = field(default_factory=dict)

    @property
    def line_count(self) -> int:
        return self.text.count("\n") + 1

    def item_lines(self, index: int | None) -> LineRange | None:
        """Span of array element ``index``, or None when unknown."""
        if index is None or not 0 <= index < len(self.items):
            return None
        return self.items[index]

    def key_lines(self, key: str) -> LineRange | None:
        """Span of top-level key ``key``, or None when absent."""
        return self.keys.get(key)
