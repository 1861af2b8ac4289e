"""
Common test fixtures shared by all modules.

Provides factory functions for core data:
- 32-byte values (zero, repeated byte, labelled hashes)
- Leaves and materialized trees
- Spendable notes and a deterministic randomness source

These are the foundational building blocks used by higher-level fixtures.
"""

from typing import Optional

from core.crypto.hashing import keccak256
from core.merkle.merkle_path import build_tree_levels
from core.schemas.transfer import SpendableNote


ZERO32 = b"\x00" * 32
ONE32 = b"\x01" * 32


def filled(byte: int) -> bytes:
    """32 bytes all equal to `byte`."""
    return bytes([byte]) * 32


def labelled(label: str) -> bytes:
    """A distinct 32-byte value derived from a label."""
    return keccak256(label.encode("utf-8"))


def make_leaves(count: int, prefix: str = "leaf") -> list[bytes]:
    """Distinct leaf commitments leaf0..leaf{count-1}."""
    return [labelled(f"{prefix}{i}") for i in range(count)]


def make_tree(count: int, prefix: str = "leaf") -> list[list[bytes]]:
    """Materialized levels over make_leaves(count)."""
    return build_tree_levels(make_leaves(count, prefix))


def make_notes(*amounts: int) -> list[SpendableNote]:
    """Spendable notes with the given amounts."""
    return [SpendableNote(amount=amount) for amount in amounts]


class DeterministicRandomness:
    """
    RandomnessSource drawing keccak256(seed || counter).

    Every call advances the counter; `calls` records which method
    produced each value.
    """

    def __init__(self, seed: bytes = b"test-seed") -> None:
        self.seed = seed
        self.counter = 0
        self.calls: list[str] = []

    def _next(self, kind: str) -> bytes:
        self.calls.append(kind)
        value = keccak256(self.seed + self.counter.to_bytes(8, "big"))
        self.counter += 1
        return value

    def generate_secret(self) -> bytes:
        return self._next("secret")

    def generate_nullifier(self) -> bytes:
        return self._next("nullifier")

    def generate_handle(self) -> bytes:
        return self._next("handle")


class FixedRandomness(DeterministicRandomness):
    """RandomnessSource returning the same value on every call."""

    def __init__(self, value: Optional[bytes] = None) -> None:
        super().__init__()
        self.value = value or ZERO32

    def _next(self, kind: str) -> bytes:
        self.calls.append(kind)
        return self.value
