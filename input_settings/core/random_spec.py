"""Random integer specs: "<min>-<max>" or a plain upper bound.

The grammar is decided once, up front, by parse_random_spec():

    "10"       → BoundSpec(10)      draw from [0, 10)
    "3-7"      → RangeSpec(3, 7)    draw from [3, 7]
    "-10--5"   → RangeSpec(-10, -5)
    "0"        → BoundSpec(0)       always 0
    "-5"       → BoundSpec(-5)      rejected: negative bound
    "7-3"      → rejected: inverted range
    "1-2-3"    → rejected: malformed range
    "abc"      → rejected: malformed integer

The two grammars deliberately differ at the upper end (inclusive range,
exclusive bound).
"""
from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Union

from input_settings.core.constants import RANGE_SEPARATOR
from input_settings.core.conversions import INT_RE
from input_settings.core.errors import VariableParseError
from input_settings.core.local_variable import LocalVariable

_RANGE_RE = re.compile(
    r"\s*([+-]?[0-9]+)\s*" + re.escape(RANGE_SEPARATOR) + r"\s*([+-]?[0-9]+)\s*"
)


@dataclass(frozen=True)
class RangeSpec:
    """Inclusive range [low, high]."""
    low:  int
    high: int

    def draw(self, rng: random.Random) -> int:
        return rng.randint(self.low, self.high)


@dataclass(frozen=True)
class BoundSpec:
    """Half-open range [0, bound); a bound of 0 always draws 0."""
    bound: int

    def draw(self, rng: random.Random) -> int:
        return rng.randrange(self.bound) if self.bound else 0


RandomSpec = Union[RangeSpec, BoundSpec]


def parse_random_spec(variable: LocalVariable) -> RandomSpec:
    """Classify and validate the variable's text as a RandomSpec."""
    name, text = variable.name, variable.text

    if INT_RE.fullmatch(text.strip()):
        bound = int(text.strip())
        if bound < 0:
            raise VariableParseError(name, variable.value, "negative bound")
        return BoundSpec(bound)

    m = _RANGE_RE.fullmatch(text)
    if m:
        low, high = int(m.group(1)), int(m.group(2))
        if low > high:
            raise VariableParseError(
                name, variable.value, "inverted range", f"{low} > {high}",
            )
        return RangeSpec(low, high)

    if RANGE_SEPARATOR in text:
        raise VariableParseError(name, variable.value, "malformed range")

    raise VariableParseError(name, variable.value, "malformed integer")


def random_in_range(variable: LocalVariable, rng: random.Random) -> int:
    return parse_random_spec(variable).draw(rng)
