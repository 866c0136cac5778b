"""Primitive coercers for the dehydrated settings string.

Every ``hydrate_*`` function in this module is total: malformed, truncated or
non-string input produces a fallback value (``False``, ``[]`` or the raw
string), never an exception.

Escaping
--------
Scalar values may contain delimiter characters. The characters that are split
on *every* occurrence somewhere in the format (``\\ ; | , /``) are prefixed
with a backslash when dehydrated. ``:`` and ``~`` are only ever split once, so
they are stored as-is.

A string that would read back as another type (``"12"``, ``"y"``, ``"null"``,
``""``...) is prefixed with :data:`STRING_MARKER`.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, List

ESCAPE_CHAR = "\\"
STRING_MARKER = "'"

SECTION_DELIMITER = ";"
PAIR_DELIMITER = ":"
FIELD_DELIMITER = "|"
SUB_DELIMITER = "~"
ARRAY_DELIMITER = ","
PER_SIDE_DELIMITER = "/"

RESERVED_CHARS = frozenset(
    {
        ESCAPE_CHAR,
        SECTION_DELIMITER,
        FIELD_DELIMITER,
        ARRAY_DELIMITER,
        PER_SIDE_DELIMITER,
    }
)

TRUE_TOKEN = "y"
FALSE_TOKEN = "n"
NULL_TOKEN = "null"

_TRUE_LITERALS = frozenset({TRUE_TOKEN, "true"})
_FALSE_LITERALS = frozenset({FALSE_TOKEN, "false"})
_NULL_LITERALS = frozenset({NULL_TOKEN, "undefined"})
_SPECIAL_FLOATS = frozenset({"inf", "-inf", "nan"})

_INT_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(r"-?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)(?:[eE][-+]?[0-9]+)?")


# Escaping --------------------------------------------------------------------
def escape_value(text: str) -> str:
    return "".join(ESCAPE_CHAR + ch if ch in RESERVED_CHARS else ch for ch in text)


def unescape_value(text: str) -> str:
    """Drop escape prefixes. A dangling trailing backslash is kept as-is."""
    if ESCAPE_CHAR not in text:
        return text

    out: List[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == ESCAPE_CHAR and i + 1 < len(text):
            out.append(text[i + 1])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def split_unescaped(text: str, delimiter: str) -> List[str]:
    """Split ``text`` on every ``delimiter`` not preceded by an escape.

    Escape sequences are left untouched in the returned parts so that inner
    tiers can still split on their own (escaped) delimiters.
    """

    if not text:
        return [""]
    if not delimiter:
        return [text]

    parts: List[str] = []
    start = 0
    i = 0
    while i < len(text):
        if text[i] == ESCAPE_CHAR:
            i += 2
            continue
        if text.startswith(delimiter, i):
            parts.append(text[start:i])
            i += len(delimiter)
            start = i
            continue
        i += 1
    parts.append(text[start:])
    return parts


def contains_unescaped(text: str, delimiter: str) -> bool:
    return len(split_unescaped(text, delimiter)) > 1


# Booleans --------------------------------------------------------------------
def is_boolean_token(token: Any) -> bool:
    return token in (TRUE_TOKEN, FALSE_TOKEN)


def hydrate_boolean(token: Any) -> bool:
    """``"y"`` -> True; anything else (``"n"`` included) -> False."""
    return token == TRUE_TOKEN


def dehydrate_boolean(value: Any) -> str:
    return TRUE_TOKEN if value else FALSE_TOKEN


# Scalars ---------------------------------------------------------------------
def _parse_number(token: str) -> Any:
    # int() refuses very long digit strings on recent interpreters
    try:
        if _INT_RE.fullmatch(token):
            return int(token)
        if _FLOAT_RE.fullmatch(token) or token in _SPECIAL_FLOATS:
            return float(token)
    except ValueError:
        return None
    return None


def hydrate_value(token: Any) -> Any:
    """Hydrate a scalar token.

    Order of attempts:
      1. string marker (``'abc`` -> ``"abc"``)
      2. numbers (``"12"`` -> 12, ``"1.5"`` -> 1.5)
      3. literals (``y``/``true``, ``n``/``false``, ``null``/``undefined``)
      4. the unescaped raw string
    """

    if not isinstance(token, str):
        return token

    if token.startswith(STRING_MARKER):
        return unescape_value(token[len(STRING_MARKER):])

    number = _parse_number(token)
    if number is not None:
        return number

    if token in _TRUE_LITERALS:
        return True
    if token in _FALSE_LITERALS:
        return False
    if token in _NULL_LITERALS:
        return None

    return unescape_value(token)


def dehydrate_value(value: Any) -> str:
    if value is None:
        return NULL_TOKEN
    if isinstance(value, bool):
        return dehydrate_boolean(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)

    text = str(value)
    if not text:
        return STRING_MARKER

    escaped = escape_value(text)
    probe = hydrate_value(escaped)
    if not isinstance(probe, str) or probe != text:
        return STRING_MARKER + escaped
    return escaped


# Arrays ----------------------------------------------------------------------
def hydrate_array(token: Any, delimiter: str = ARRAY_DELIMITER) -> List[Any]:
    """Split ``token`` into hydrated scalars.

    One trailing delimiter acts as a terminator (``"y,"`` -> ``[True]``,
    ``","`` -> ``[]``), which is how single-item arrays are told apart from
    plain scalars inside per-side records.
    """

    if not isinstance(token, str) or not token:
        return []

    items = split_unescaped(token, delimiter)
    if len(items) > 1 and items[-1] == "":
        items.pop()
    if items == [""]:
        return []
    return [hydrate_value(item) for item in items]


def dehydrate_array(values: Iterable[Any], delimiter: str = ARRAY_DELIMITER, terminate: bool = False) -> str:
    items = [dehydrate_value(v) for v in (values or ())]
    joined = delimiter.join(items)
    if terminate and len(items) < 2:
        joined += delimiter
    return joined
