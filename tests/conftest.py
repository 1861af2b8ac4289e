"""
Pytest configuration and shared fixtures for shielded-transfer tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")
_prover = importlib.import_module("fixtures.prover_fixtures")

make_tree = _common.make_tree
make_notes = _common.make_notes
labelled = _common.labelled
DeterministicRandomness = _common.DeterministicRandomness

FakeProverBackend = _prover.FakeProverBackend
FakeInnerProver = _prover.FakeInnerProver


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def randomness():
    """Provide a fresh deterministic randomness source."""
    return DeterministicRandomness()


@pytest.fixture
def four_leaf_tree():
    """Provide the levels of a 4-leaf tree."""
    return make_tree(4)


@pytest.fixture
def prover_backend():
    """Provide a prover backend double whose proofs verify."""
    return FakeProverBackend(valid=True)


@pytest.fixture
def inner_prover():
    """Provide an inner prover double."""
    return FakeInnerProver()


@pytest.fixture
def sender_notes():
    """Provide spendable notes totalling 1000."""
    return make_notes(700, 300)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep SHIELD_* variables from the developer shell out of tests."""
    import os
    for key in list(os.environ):
        if key.startswith("SHIELD_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
