"""Textual rewrite stages that turn Python literal reprs into JSON.

Every stage is a pure ``str -> str`` function so it can be tested in
isolation.  The stages are regex-driven and layered, not a grammar: they
handle what ``repr()`` of common Python data produces (dicts, lists, tuples,
sets, ``True``/``False``/``None``, datetimes, ``Decimal``, complex numbers,
prefixed strings, ``<Object #id>`` reprs) and make no attempt at arbitrary
Python.

Stage order matters.  Constants and quotes are normalised first because the
later patterns assume double-quoted strings.
"""

from __future__ import annotations

import re
from collections.abc import Callable

__all__ = [
    "balance_brackets",
    "cleanup",
    "convert_single_quotes",
    "looks_like_json",
    "quote_unquoted_keys",
    "replace_python_constants",
    "rewrite_collections",
    "rewrite_complex_numbers",
    "rewrite_datetimes",
    "rewrite_decimals",
    "rewrite_object_reprs",
    "strip_string_prefixes",
]

_JSON_START = re.compile(r'^[{\["\d\-]')
_JSON_LITERAL = re.compile(r"^(?:true|false|null)$", re.IGNORECASE)

_PY_CONSTANT = re.compile(r"\b(True|False|None)\b")
_PY_CONSTANTS = {"True": "true", "False": "false", "None": "null"}

# (1+2j), (-1.5-0.5j)
_COMPLEX_PAIR = re.compile(r"\(\s*([+-]?\d+(?:\.\d+)?)\s*([+-])\s*(\d+(?:\.\d+)?)j\s*\)")
# 5j, -2.5j (not the "j" in "json", not a digit run inside a word)
_COMPLEX_BARE = re.compile(r"(?<![\w.])([+-]?\d+(?:\.\d+)?)j\b")
_COMPLEX_LITERAL = re.compile(r"^[+-]?\d*\.?\d*[+-]\d*\.?\d*j$")

_DECIMAL = re.compile(r'Decimal\(\s*"([^"]*)"\s*\)')

# b"..", r"..", u"..", f"..", rb"..", br"..", fr"..", rf".."
_STRING_PREFIX = re.compile(r"(?<![\w\"])(?:[rR][bBfF]?|[bBfF][rR]?|[uU])$")

_OBJECT_REPR = re.compile(r"<([A-Za-z0-9_]+)\s*(?:#(\d+))?>")

_DATETIME = re.compile(r"datetime\.datetime\(([^()]*)\)")
_DATE = re.compile(r"datetime\.date\(([^()]*)\)")

_EMPTY_SET = re.compile(r"\bset\(\)")
# Innermost groups only: one nesting level per pass
_BRACE_GROUP = re.compile(r"\{([^{}]*)\}")
_PAREN_GROUP = re.compile(r"\(([^()]*)\)")
MAX_COLLECTION_PASSES = 64

_UNQUOTED_KEY = re.compile(r"([{,]\s*)([A-Za-z0-9_\-]+)\s*:")

_TRAILING_COMMA = re.compile(r",\s*(?=[}\]])")
_COMMA_RUN = re.compile(r",(?:\s*,)+")
_WHITESPACE_RUN = re.compile(r"\s+")

_CLOSERS = {"{": "}", "[": "]"}


# ---------------------------------------------------------------------------
# Quote-aware helpers
# ---------------------------------------------------------------------------


def _string_end(s: str, start: int) -> int:
    """Index just past the string literal opening at ``start``.

    Backslash escapes are skipped.  An unterminated literal runs to the end.
    """
    quote = s[start]
    i = start + 1
    n = len(s)
    while i < n:
        ch = s[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        i += 1
    return n


def _split_quoted(s: str, quotes: str = '"') -> list[tuple[bool, str]]:
    """Split ``s`` into ``(is_quoted, text)`` segments."""
    segments: list[tuple[bool, str]] = []
    seg_start = 0
    i = 0
    n = len(s)
    while i < n:
        if s[i] in quotes:
            if i > seg_start:
                segments.append((False, s[seg_start:i]))
            end = _string_end(s, i)
            segments.append((True, s[i:end]))
            i = seg_start = end
        else:
            i += 1
    if seg_start < n:
        segments.append((False, s[seg_start:]))
    return segments


def _sub_outside(
    pattern: re.Pattern[str],
    repl: str | Callable[[re.Match[str]], str],
    s: str,
    quotes: str = '"',
) -> str:
    """Apply ``pattern.sub`` to the unquoted parts of ``s`` only."""
    return "".join(
        text if quoted else pattern.sub(repl, text)
        for quoted, text in _split_quoted(s, quotes)
    )


def _has_colon_outside_quotes(content: str) -> bool:
    return any(
        ":" in text for quoted, text in _split_quoted(content, "\"'") if not quoted
    )


def _split_elements(content: str) -> list[str]:
    """Split on commas that are outside quotes and brackets; drop empties."""
    elements: list[str] = []
    depth = 0
    current: list[str] = []
    for quoted, text in _split_quoted(content):
        if quoted:
            current.append(text)
            continue
        for ch in text:
            if ch in "{[(":
                depth += 1
            elif ch in "}])":
                depth -= 1
            elif ch == "," and depth == 0:
                elements.append("".join(current))
                current = []
                continue
            current.append(ch)
    elements.append("".join(current))
    return [el.strip() for el in elements if el.strip()]


def _preceded_by_identifier(s: str, pos: int) -> bool:
    """True if the first non-space character before ``pos`` ends an identifier."""
    i = pos - 1
    while i >= 0 and s[i].isspace():
        i -= 1
    return i >= 0 and (s[i].isalnum() or s[i] == "_")


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------


def looks_like_json(text: str) -> bool:
    """True if the trimmed text starts the way a JSON document does."""
    s = text.strip()
    return bool(_JSON_START.match(s) or _JSON_LITERAL.match(s))


def replace_python_constants(s: str) -> str:
    """``True``/``False``/``None`` -> ``true``/``false``/``null`` outside strings."""
    return _sub_outside(_PY_CONSTANT, lambda m: _PY_CONSTANTS[m.group(1)], s, quotes="\"'")


def convert_single_quotes(s: str) -> str:
    """Rewrite single-quoted string literals as double-quoted ones.

    A single left-to-right scan tracking whether we are inside a single- or
    double-quoted literal:

    - inside single quotes, a bare ``"`` is escaped and ``\\'`` becomes ``'``;
    - double-quoted literals are copied through, apostrophes included;
    - an escaped character is never a delimiter;
    - ``\\xHH`` escapes become ``\\u00HH`` since JSON has no ``\\x``.
    """
    out: list[str] = []
    in_single = False
    in_double = False
    i = 0
    n = len(s)

    while i < n:
        ch = s[i]

        if ch == "\\" and (in_single or in_double) and i + 1 < n:
            nxt = s[i + 1]
            if nxt == "'":
                out.append("'")
            elif nxt == "x" and re.fullmatch(r"[0-9a-fA-F]{2}", s[i + 2 : i + 4]):
                out.append("\\u00" + s[i + 2 : i + 4])
                i += 4
                continue
            else:
                out.append(ch + nxt)
            i += 2
            continue

        if in_single:
            if ch == "'":
                out.append('"')
                in_single = False
            elif ch == '"':
                out.append('\\"')
            else:
                out.append(ch)
        elif in_double:
            out.append(ch)
            if ch == '"':
                in_double = False
        elif ch == "'":
            out.append('"')
            in_single = True
        else:
            out.append(ch)
            if ch == '"':
                in_double = True
        i += 1

    return "".join(out)


def rewrite_complex_numbers(s: str) -> str:
    """``(a+bj)`` -> ``{"real": a, "imag": "+b"}``; bare ``5j`` -> real 0.

    The imaginary part stays a string so ``"+b"``/``"-b"`` keep their sign.
    """
    s = _sub_outside(_COMPLEX_PAIR, r'{"real": \1, "imag": "\2\3"}', s)
    return _sub_outside(_COMPLEX_BARE, r'{"real": 0, "imag": "\1"}', s)


def rewrite_decimals(s: str) -> str:
    """``Decimal("1.50")`` -> ``"1.50"``."""
    return _DECIMAL.sub(r'"\1"', s)


def strip_string_prefixes(s: str) -> str:
    """Drop ``b``/``r``/``u``/``f`` prefixes in front of double-quoted literals."""
    segments = _split_quoted(s)
    for idx in range(1, len(segments)):
        quoted, _ = segments[idx]
        prev_quoted, prev_text = segments[idx - 1]
        if quoted and not prev_quoted:
            segments[idx - 1] = (False, _STRING_PREFIX.sub("", prev_text))
    return "".join(text for _, text in segments)


def rewrite_object_reprs(s: str) -> str:
    """``<User #655715>`` -> ``{"type": "User", "id": "655715"}``."""

    def _repl(m: re.Match[str]) -> str:
        return f'{{"type": "{m.group(1)}", "id": "{m.group(2) or ""}"}}'

    return _sub_outside(_OBJECT_REPR, _repl, s)


def _positional_args(args: str) -> list[str]:
    parts = (part.strip() for part in args.split(","))
    return [part for part in parts if part and "=" not in part]


def rewrite_datetimes(s: str) -> str:
    """``datetime.datetime(...)`` and ``datetime.date(...)`` -> ISO strings.

    ``datetime.datetime(2025, 8, 21, 10, 37, 4, 895369)`` becomes
    ``"2025-08-21T10:37:04.895369"``; missing time parts default to zero.
    Keyword arguments such as ``tzinfo=`` are ignored.
    """

    def _datetime(m: re.Match[str]) -> str:
        parts = _positional_args(m.group(1))
        if len(parts) < 3:
            return m.group(0)
        year, month, day = parts[:3]
        hour, minute, second, micro = (parts[3:7] + ["0"] * 4)[:4]
        return (
            f'"{year}-{month.zfill(2)}-{day.zfill(2)}'
            f'T{hour.zfill(2)}:{minute.zfill(2)}:{second.zfill(2)}.{micro.zfill(6)}"'
        )

    def _date(m: re.Match[str]) -> str:
        parts = _positional_args(m.group(1))
        if len(parts) < 3:
            return m.group(0)
        year, month, day = parts[:3]
        return f'"{year}-{month.zfill(2)}-{day.zfill(2)}"'

    s = _DATETIME.sub(_datetime, s)
    return _DATE.sub(_date, s)


def _brace_group(m: re.Match[str]) -> str:
    content = m.group(1).strip()
    if not content or _has_colon_outside_quotes(content):
        return m.group(0)
    # No colon: a set literal
    return "[" + ", ".join(_split_elements(content)) + "]"


def _paren_group(m: re.Match[str]) -> str:
    if _preceded_by_identifier(m.string, m.start()):
        return m.group(0)
    content = m.group(1).strip()
    if not content:
        return "[]"
    if _COMPLEX_LITERAL.match(content.replace(" ", "")):
        return m.group(0)
    if "," in content or not _has_colon_outside_quotes(content):
        return "[" + ", ".join(_split_elements(content)) + "]"
    return m.group(0)


def rewrite_collections(s: str) -> str:
    """Rewrite sets and tuples as JSON arrays.

    A brace group is a dict when it holds a colon outside quotes, otherwise
    a set.  A paren group is a tuple unless it follows an identifier (a
    function call) or is complex-number syntax.  Each pass only rewrites
    innermost groups, so passes repeat until the text is stable.
    """
    s = _EMPTY_SET.sub("[]", s)
    for _ in range(MAX_COLLECTION_PASSES):
        rewritten = _PAREN_GROUP.sub(_paren_group, _BRACE_GROUP.sub(_brace_group, s))
        if rewritten == s:
            break
        s = rewritten
    return s


def quote_unquoted_keys(s: str) -> str:
    """``{name: 1}`` -> ``{"name": 1}``; purely numeric keys are left alone."""

    def _repl(m: re.Match[str]) -> str:
        prefix, key = m.group(1), m.group(2)
        if key.isdigit():
            return m.group(0)
        return f'{prefix}"{key}":'

    return _sub_outside(_UNQUOTED_KEY, _repl, s)


def cleanup(s: str) -> str:
    """Drop trailing commas, collapse comma runs and whitespace runs."""

    def _clean(text: str) -> str:
        text = _TRAILING_COMMA.sub("", text)
        text = _COMMA_RUN.sub(",", text)
        return _WHITESPACE_RUN.sub(" ", text)

    return "".join(text if quoted else _clean(text) for quoted, text in _split_quoted(s))


def balance_brackets(s: str) -> str:
    """Repair bracket structure: drop stray closers, append missing ones."""
    stack: list[str] = []
    out: list[str] = []
    for quoted, text in _split_quoted(s):
        if quoted:
            out.append(text)
            continue
        for ch in text:
            if ch in _CLOSERS:
                stack.append(_CLOSERS[ch])
            elif ch in "}]":
                if not stack or stack[-1] != ch:
                    continue
                stack.pop()
            out.append(ch)
    out.extend(reversed(stack))
    return "".join(out)
