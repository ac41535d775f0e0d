"""Shared test fixtures."""
import random
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `input_settings.*` imports work
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def rng():
    return random.Random(1234)
