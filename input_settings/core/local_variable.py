"""Host-supplied local variable record.

The automation host owns these; this package only reads ``name`` and
``value``.  ``value`` is ``None`` when the host has no data at all.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LocalVariable:
    """One named, string-valued project variable."""
    name:  str
    value: str | None = ""

    @property
    def text(self) -> str:
        """``value`` with ``None`` read as an empty string."""
        return self.value if self.value is not None else ""
