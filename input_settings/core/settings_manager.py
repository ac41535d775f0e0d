"""Settings manager — reads settings.ini via configparser.

    [ACCESSOR]
    separator = ;        # multi-select separator (default ",")
    encoding  = utf-8    # read_lines() encoding (default utf-8-sig)
    seed      = 42       # optional; makes random draws reproducible

    [VARIABLES]
    Accounts = accounts.txt
    Threads  = 1-5

The file is only read, never written.
"""
from __future__ import annotations

from configparser import ConfigParser
from pathlib import Path

from input_settings.core.constants import (
    ACCESSOR_SECTION, COMMENT_PREFIX, DEFAULT_SEPARATOR, FILE_ENCODING,
    VARIABLES_SECTION,
)
from input_settings.core.variable_store import VariableStore


class SettingsManager:
    def __init__(self, ini_path: Path) -> None:
        self.ini_path = ini_path
        self.config = ConfigParser(
            comment_prefixes=(COMMENT_PREFIX, ";"),
            inline_comment_prefixes=(COMMENT_PREFIX,),
            interpolation=None,
        )
        # Variable names are case-sensitive on the host side
        self.config.optionxform = str  # type: ignore[assignment]
        if ini_path.exists():
            self.config.read(ini_path, encoding="utf-8")

    # ------------------------------------------------------------------
    # Generic getters
    # ------------------------------------------------------------------
    def get(self, section: str, key: str, fallback: str = "") -> str:
        return self.config.get(section, key, fallback=fallback)

    def getint(self, section: str, key: str, fallback: int | None = None) -> int | None:
        return self.config.getint(section, key, fallback=fallback)

    # ------------------------------------------------------------------
    # Convenience properties
    # ------------------------------------------------------------------
    @property
    def separator(self) -> str:
        """Multi-select separator.

        configparser strips values, so a blank or whitespace-only setting
        cannot be represented and is rejected rather than replaced.
        """
        value = self.get(ACCESSOR_SECTION, "separator", DEFAULT_SEPARATOR)
        if not value:
            raise ValueError(f"[{ACCESSOR_SECTION}] separator must not be empty")
        return value

    @property
    def encoding(self) -> str:
        return self.get(ACCESSOR_SECTION, "encoding", FILE_ENCODING) or FILE_ENCODING

    @property
    def seed(self) -> int | None:
        return self.getint(ACCESSOR_SECTION, "seed", None)

    @property
    def variables(self) -> VariableStore:
        """Return the [VARIABLES] section as a VariableStore."""
        if not self.config.has_section(VARIABLES_SECTION):
            return VariableStore()
        return VariableStore(dict(self.config.items(VARIABLES_SECTION)))
