# File: sarnadesign/tests/conftest.py
# Version: v0.1.0
"""
Test bootstrap: ensure project root is on sys.path so 'sarnadesign.*' imports work.

This avoids requiring editable installs or extra plugins. It keeps tests hermetic
to the repo layout (works in CI and locally).
"""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]  # repo root (../.. from this file)
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# 19 nt, passes every filter, rank 40 (G/C at 1st and 2nd, T at 18th, A at 19th)
VIABLE_TARGET = "GCGCATGCATGCATGTATA"


@pytest.fixture
def viable_target() -> str:
    return VIABLE_TARGET


@pytest.fixture
def periodic_sequence() -> str:
    # Windows at offsets 3/7/11 rank 17, at 2/6/10 rank 15, all others are filtered
    return "GCAT" * 8
