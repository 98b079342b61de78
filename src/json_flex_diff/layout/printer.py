"""Pretty-printer that records where each element lands.

``render`` produces exactly the text of
``json.dumps(value, indent=indent, ensure_ascii=False)`` and, while doing
so, records the line span of every root-array element and every root-object
key.  Line numbers are 0-based and inclusive.

Rendering works line-by-line: a nested value is rendered to a list of lines
whose first line is left unindented, so the caller can prefix it with a key
or its own indentation and append a trailing comma to the last line.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from json_flex_diff.layout.spans import Layout
from json_flex_diff.result import LineRange


@dataclass
class LayoutPrinter:
    """Serializes JSON values with fixed indentation and span tracking.

    Example::

        printer = LayoutPrinter(indent=3)
        layout = printer.render([{"id": 1}, {"id": 2}])
        layout.items[1]   # LineRange(start=4, end=6)
    """

    indent: int = 3
    _pad: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._pad = " " * self.indent

    def render(self, value: Any) -> Layout:
        """Render ``value`` and collect root-level spans."""
        items: list[LineRange] = []
        keys: dict[str, LineRange] = {}

        if isinstance(value, list) and value:
            lines = self._render_array(value, 0, items)
        elif isinstance(value, dict) and value:
            lines = self._render_object(value, 0, keys)
        else:
            lines = self._render(value, 0)

        return Layout(text="\n".join(lines), items=tuple(items), keys=keys)

    # ------------------------------------------------------------------
    # Recursive dispatch
    # ------------------------------------------------------------------

    def _render(self, value: Any, depth: int) -> list[str]:
        if isinstance(value, dict) and value:
            return self._render_object(value, depth, None)
        if isinstance(value, (list, tuple)) and value:
            return self._render_array(list(value), depth, None)
        return [self._scalar(value)]

    def _scalar(self, value: Any) -> str:
        # Also covers empty containers: json.dumps renders them as [] / {}
        return json.dumps(value, ensure_ascii=False)

    def _render_array(
        self,
        arr: list[Any],
        depth: int,
        spans: list[LineRange] | None,
    ) -> list[str]:
        inner = self._pad * (depth + 1)
        lines = ["["]
        last = len(arr) - 1

        for idx, item in enumerate(arr):
            child = self._render(item, depth + 1)
            child[0] = inner + child[0]
            if idx < last:
                child[-1] += ","
            start = len(lines)
            lines.extend(child)
            if spans is not None:
                spans.append(LineRange(start=start, end=len(lines) - 1))

        lines.append(self._pad * depth + "]")
        return lines

    def _render_object(
        self,
        obj: dict[str, Any],
        depth: int,
        spans: dict[str, LineRange] | None,
    ) -> list[str]:
        inner = self._pad * (depth + 1)
        lines = ["{"]
        last = len(obj) - 1

        for idx, (key, val) in enumerate(obj.items()):
            child = self._render(val, depth + 1)
            child[0] = f"{inner}{json.dumps(str(key), ensure_ascii=False)}: {child[0]}"
            if idx < last:
                child[-1] += ","
            start = len(lines)
            lines.extend(child)
            if spans is not None:
                spans[key] = LineRange(start=start, end=len(lines) - 1)

        lines.append(self._pad * depth + "}")
        return lines


def render(value: Any, indent: int = 3) -> Layout:
    """Pretty-print ``value`` with ``indent`` spaces and record its spans."""
    return LayoutPrinter(indent=indent).render(value)
