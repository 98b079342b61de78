"""Parser subpackage: tolerant parsing of JSON and Python literal reprs.

- FlexibleParser: the staged rewrite-then-parse pipeline
- parse_flexible: convenience wrapper using a fresh FlexibleParser
- rewrites: the individual pure rewrite stages
"""

from json_flex_diff.parser.flexible import FlexibleParser, parse_flexible

__all__ = ["FlexibleParser", "parse_flexible"]
