"""Exceptions raised by the typed accessors and validators.

Two families are kept apart:

VariableParseError      — the text does not match the grammar of a typed
                          conversion (bool, int, random spec).
VariableValidationError — a precondition on the value or on the file /
                          directory it names does not hold.

Errors from reading files are left as the built-in OSError family.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from input_settings.core.local_variable import LocalVariable


class VariableParseError(ValueError):
    """Raised when a variable's text cannot be converted to the wanted type."""

    def __init__(self, name: str, value: str | None, kind: str, detail: str = "") -> None:
        self.name  = name
        self.value = value
        self.kind  = kind
        message = f'Variable "{name}": {kind} {value!r}'
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class VariableValidationError(Exception):
    """Raised by the require_* checks when a precondition is violated."""

    def __init__(self, message: str, variable: "LocalVariable | None" = None) -> None:
        super().__init__(message)
        self.variable = variable
