"""Typed conversions of a single local variable.

parse_bool   "true" / "false", case-insensitive
parse_int    base-10 signed integer
split_multi  "a, b ,c" → ["a", "b", "c"]
read_lines   value is a path; returns the file's lines

Parse failures raise VariableParseError naming the variable.  read_lines
lets the OSError from open() propagate untouched.
"""
from __future__ import annotations

import re

from input_settings.core.constants import (
    BOOL_FALSE, BOOL_TRUE, DEFAULT_SEPARATOR, FILE_ENCODING,
)
from input_settings.core.errors import VariableParseError
from input_settings.core.local_variable import LocalVariable

# ASCII digits only; int() alone would also take "1_000" and "٤٢"
INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int_text(name: str, text: str | None, kind: str = "malformed integer") -> int:
    """Parse ``text`` as a base-10 integer, blaming variable ``name`` on failure."""
    stripped = (text or "").strip()
    if not INT_RE.fullmatch(stripped):
        raise VariableParseError(name, text, kind)
    return int(stripped)


def parse_bool(variable: LocalVariable) -> bool:
    low = variable.text.strip().lower()
    if low == BOOL_TRUE:
        return True
    if low == BOOL_FALSE:
        return False
    raise VariableParseError(variable.name, variable.value, "malformed boolean")


def parse_int(variable: LocalVariable) -> int:
    return parse_int_text(variable.name, variable.value)


def split_multi(variable: LocalVariable, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    """Split a multi-select value on ``separator`` and strip every part.

    Empty parts and duplicates are kept in order.  A value without the
    separator yields a one-element list.
    """
    if not separator:
        raise ValueError("separator must not be empty")
    value = variable.text
    if separator in value:
        return [part.strip() for part in value.split(separator)]
    return [value.strip()]


def read_lines(variable: LocalVariable, encoding: str = FILE_ENCODING) -> list[str]:
    """Return the lines of the file named by the variable's value.

    ``\\n``, ``\\r\\n`` and ``\\r`` all end a line; terminators are dropped.
    Bytes that do not decode become U+FFFD instead of raising.
    """
    with open(variable.text, encoding=encoding, errors="replace") as f:
        return [line.rstrip("\n") for line in f]
