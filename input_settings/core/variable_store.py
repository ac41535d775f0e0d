"""Variable store for one host session.

The store is the host-side source of ``LocalVariable`` records handed to
the accessors.  All access is single-threaded.

Unknown names resolve to a variable whose value is ``None`` so validators
can report "has no data" with the requested name.
"""
from __future__ import annotations

from typing import Iterator, Mapping

from input_settings.core.local_variable import LocalVariable


class VariableStore:
    """Maps 'varname' → LocalVariable."""

    def __init__(self, values: Mapping[str, str | None] | None = None) -> None:
        self._vars: dict[str, LocalVariable] = {}
        for name, value in (values or {}).items():
            self.set(name, value)

    # ------------------------------------------------------------------
    def get(self, name: str) -> LocalVariable:
        return self._vars.get(name, LocalVariable(name, None))

    def set(self, name: str, value: str | None) -> LocalVariable:
        var = LocalVariable(name, value)
        self._vars[name] = var
        return var

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __iter__(self) -> Iterator[LocalVariable]:
        return iter(list(self._vars.values()))

    def __len__(self) -> int:
        return len(self._vars)

    def as_dict(self) -> dict[str, str | None]:
        return {name: var.value for name, var in self._vars.items()}

    def __repr__(self) -> str:
        return f"VariableStore({self.as_dict()!r})"
