"""
Module 01 - Randomness Source
Cryptographically secure 32-byte secrets, nullifiers and handles.

Owner: Protocol/Crypto Engineer
Module ID: M01

Components that need randomness receive a RandomnessSource explicitly,
so tests can substitute a deterministic one for fixed-vector checks.
SecureRandomness keeps no state; every call reads the operating system
CSPRNG, which makes it safe to share across threads.
"""
from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable

from core.crypto.hashing import BYTES32


@runtime_checkable
class RandomnessSource(Protocol):
    """Capability to draw independent, uniformly random 32-byte values."""

    def generate_secret(self) -> bytes: ...

    def generate_nullifier(self) -> bytes: ...

    def generate_handle(self) -> bytes: ...


class SecureRandomness:
    """RandomnessSource backed by the operating system CSPRNG."""

    def generate_secret(self) -> bytes:
        return secrets.token_bytes(BYTES32)

    def generate_nullifier(self) -> bytes:
        return secrets.token_bytes(BYTES32)

    def generate_handle(self) -> bytes:
        """Handle passed to the inner direct-transfer prover."""
        return secrets.token_bytes(BYTES32)


_default_source = SecureRandomness()


def generate_secret() -> bytes:
    """Draw a secret from the default secure source."""
    return _default_source.generate_secret()


def generate_nullifier() -> bytes:
    """Draw a nullifier from the default secure source."""
    return _default_source.generate_nullifier()


__all__ = [
    "RandomnessSource",
    "SecureRandomness",
    "generate_secret",
    "generate_nullifier",
]
