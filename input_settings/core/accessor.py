"""Typed Variable Accessor — one object bundling conversions and checks.

Usage
-----
    acc = VariableAccessor(log=panel.append)
    threads = acc.random_int(store.get("Threads"))
    lines   = acc.to_list(acc.require_file(store.get("Accounts")))

Collaborators are injected:
  - rng      : random.Random shared by random_int() and spintax()
               (default: the process-wide SHARED_RANDOM)
  - spinner  : spin(text, rng) → str
  - log      : callback(level, message); a WARNING is logged before every
               parse / validation error is raised
"""
from __future__ import annotations

import random
from typing import Callable

from input_settings.core import conversions, validators
from input_settings.core.constants import DEFAULT_SEPARATOR, FILE_ENCODING
from input_settings.core.errors import VariableParseError, VariableValidationError
from input_settings.core.local_variable import LocalVariable
from input_settings.core.random_source import make_random
from input_settings.core.random_spec import parse_random_spec
from input_settings.core.settings_manager import SettingsManager
from input_settings.core.spintax import spin

LogFn     = Callable[[str, str], None]   # (level, message)
SpinnerFn = Callable[[str, random.Random], str]


class VariableAccessor:
    """Typed conversions and chainable validators over LocalVariable."""

    def __init__(
        self,
        rng:       random.Random | None = None,
        spinner:   SpinnerFn = spin,
        log:       LogFn | None = None,
        separator: str = DEFAULT_SEPARATOR,
        encoding:  str = FILE_ENCODING,
    ) -> None:
        self._rng       = rng if rng is not None else make_random()
        self._spinner   = spinner
        self._log       = log or (lambda level, msg: None)
        self.separator  = separator
        self.encoding   = encoding

    @classmethod
    def from_settings(cls, settings: SettingsManager, log: LogFn | None = None) -> "VariableAccessor":
        return cls(
            rng=make_random(settings.seed),
            log=log,
            separator=settings.separator,
            encoding=settings.encoding,
        )

    @property
    def rng(self) -> random.Random:
        return self._rng

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_bool(self, variable: LocalVariable) -> bool:
        return self._parse(conversions.parse_bool, variable)

    def to_int(self, variable: LocalVariable) -> int:
        return self._parse(conversions.parse_int, variable)

    def multi_select(self, variable: LocalVariable, separator: str | None = None) -> list[str]:
        return conversions.split_multi(variable, separator or self.separator)

    def to_list(self, variable: LocalVariable) -> list[str]:
        """Lines of the file named by the variable.  OSError propagates."""
        return conversions.read_lines(variable, self.encoding)

    def random_int(self, variable: LocalVariable) -> int:
        spec = self._parse(parse_random_spec, variable)
        value = spec.draw(self._rng)
        self._log("DEBUG", f"{variable.name}: {spec} → {value}")
        return value

    def spintax(self, variable: LocalVariable) -> str:
        return self._spinner(variable.text, self._rng)

    # ------------------------------------------------------------------
    # Validators (raising form; return the same variable)
    # ------------------------------------------------------------------

    def require_non_empty(self, variable: LocalVariable, message: str | None = None) -> LocalVariable:
        return self._require(validators.check_non_empty(variable, message))

    def require_file(self, variable: LocalVariable, require_non_empty: bool = True) -> LocalVariable:
        return self._require(validators.check_file(variable, require_non_empty))

    def require_directory(self, variable: LocalVariable, require_non_empty: bool = True) -> LocalVariable:
        return self._require(validators.check_directory(variable, require_non_empty))

    def validate(self, variable: LocalVariable, *checks: validators.Check) -> validators.Validation:
        """Result form: run ``checks`` in order, first failure wins."""
        result = validators.validate(variable, *checks)
        if not result:
            self._log("WARNING", result.message)
        return result

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _parse(self, convert, variable: LocalVariable):
        try:
            return convert(variable)
        except VariableParseError as exc:
            self._log("WARNING", str(exc))
            raise

    def _require(self, result: validators.Validation) -> LocalVariable:
        try:
            return result.unwrap()
        except VariableValidationError as exc:
            self._log("WARNING", str(exc))
            raise
