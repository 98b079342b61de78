"""Layout subpackage for position-tracking pretty-printing.

Re-exports the public API for the layout module:
- Layout: rendered text plus root-level line spans
- LayoutPrinter: serializer that records spans while rendering
- render: convenience wrapper around LayoutPrinter
"""

from json_flex_diff.layout.printer import LayoutPrinter, render
from json_flex_diff.layout.spans import Layout

__all__ = ["Layout", "LayoutPrinter", "render"]
