"""Spintax expansion: ``{a|b|c}`` → one of a, b, c.

Groups are resolved innermost first, so ``{x{1|2}|y}`` works.  Each group
is replaced by a uniformly chosen alternative; an empty alternative
(``{a|}``) is allowed.  Braces that never close are left as text.
"""
from __future__ import annotations

import random
import re

from input_settings.core.constants import (
    SPIN_ALT, SPIN_CLOSE, SPIN_OPEN,
)
from input_settings.core.random_source import SHARED_RANDOM

# A group with no nested braces inside
_GROUP_RE = re.compile(
    re.escape(SPIN_OPEN) + r"([^" + re.escape(SPIN_OPEN + SPIN_CLOSE) + r"]*)" + re.escape(SPIN_CLOSE)
)


def spin(text: str, rng: random.Random | None = None) -> str:
    """Resolve every spintax group in ``text``."""
    rng = rng or SHARED_RANDOM

    def choose(m: re.Match) -> str:
        return rng.choice(m.group(1).split(SPIN_ALT))

    # every pass removes at least one brace pair
    count = 1
    while count:
        text, count = _GROUP_RE.subn(choose, text)
    return text
