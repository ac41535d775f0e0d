"""Chainable validators for local variables.

Each check takes a LocalVariable and returns a Validation:

    Valid(variable)             the precondition holds
    Invalid(variable, message)  it does not; ``message`` says why

Checks compose with validate(), which stops at the first failure:

    result = validate(var, check_non_empty, partial(check_file, require_non_empty=False))
    if not result:
        print(result.message)

The require_* functions are the raising form.  They return the same
variable on success, so calls nest:

    path = require_file(require_non_empty(var)).value
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Union

from input_settings.core.constants import (
    MSG_DIR_EMPTY, MSG_DIR_MISSING, MSG_FILE_EMPTY, MSG_FILE_MISSING, MSG_NO_DATA,
)
from input_settings.core.errors import VariableValidationError
from input_settings.core.local_variable import LocalVariable


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Valid:
    variable: LocalVariable

    def __bool__(self) -> bool:
        return True

    def unwrap(self) -> LocalVariable:
        return self.variable


@dataclass(frozen=True)
class Invalid:
    variable: LocalVariable
    message:  str

    def __bool__(self) -> bool:
        return False

    def unwrap(self) -> LocalVariable:
        raise VariableValidationError(self.message, self.variable)


Validation = Union[Valid, Invalid]
Check = Callable[[LocalVariable], Validation]


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------

def check_non_empty(variable: LocalVariable, message: str | None = None) -> Validation:
    """Fail when the value is absent, empty or whitespace only."""
    if not variable.text.strip():
        if message is None:
            message = MSG_NO_DATA.format(name=variable.name)
        return Invalid(variable, message)
    return Valid(variable)


def check_file(variable: LocalVariable, require_non_empty: bool = True) -> Validation:
    """Fail unless the value names an existing regular file (non-empty by default)."""
    path = variable.text
    # Path("") is ".", so an empty value never names a path
    if not path or not Path(path).is_file():
        return Invalid(variable, MSG_FILE_MISSING.format(path=path))
    if require_non_empty and Path(path).stat().st_size == 0:
        return Invalid(variable, MSG_FILE_EMPTY.format(path=path))
    return Valid(variable)


def check_directory(variable: LocalVariable, require_non_empty: bool = True) -> Validation:
    """Fail unless the value names an existing directory (with entries by default)."""
    path = variable.text
    if not path or not Path(path).is_dir():
        return Invalid(variable, MSG_DIR_MISSING.format(path=path))
    if require_non_empty and not any(Path(path).iterdir()):
        return Invalid(variable, MSG_DIR_EMPTY.format(path=path))
    return Valid(variable)


def validate(variable: LocalVariable, *checks: Check) -> Validation:
    """Run ``checks`` in order; return the first Invalid or Valid(variable)."""
    for check in checks:
        result = check(variable)
        if not result:
            return result
    return Valid(variable)


# ---------------------------------------------------------------------------
# Raising form
# ---------------------------------------------------------------------------

def require_non_empty(variable: LocalVariable, message: str | None = None) -> LocalVariable:
    return check_non_empty(variable, message).unwrap()


def require_file(variable: LocalVariable, require_non_empty: bool = True) -> LocalVariable:
    return check_file(variable, require_non_empty).unwrap()


def require_directory(variable: LocalVariable, require_non_empty: bool = True) -> LocalVariable:
    return check_directory(variable, require_non_empty).unwrap()
