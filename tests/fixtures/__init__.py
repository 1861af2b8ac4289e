"""
Test fixtures package for shielded-transfer tests.

Organized into layers:
- common.py: Byte values, trees, notes, deterministic randomness
- prover_fixtures.py: Prover, inner prover and HTTP client doubles

Usage:
    from fixtures import make_tree, FakeProverBackend

    def test_something():
        levels = make_tree(4)
        backend = FakeProverBackend(valid=False)
"""

from .common import (
    ONE32,
    ZERO32,
    DeterministicRandomness,
    FixedRandomness,
    filled,
    labelled,
    make_leaves,
    make_notes,
    make_tree,
)

from .prover_fixtures import (
    FailingProverBackend,
    FakeHttpClient,
    FakeInnerProver,
    FakeProverBackend,
    connection_error,
    make_response,
)

__all__ = [
    # Common
    "ZERO32",
    "ONE32",
    "filled",
    "labelled",
    "make_leaves",
    "make_tree",
    "make_notes",
    "DeterministicRandomness",
    "FixedRandomness",
    # Prover doubles
    "FakeProverBackend",
    "FailingProverBackend",
    "FakeInnerProver",
    "FakeHttpClient",
    "make_response",
    "connection_error",
]
