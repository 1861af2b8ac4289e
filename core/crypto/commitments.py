"""
Module 01 - Commitment Scheme
Derivation of note commitments and nullifier hashes.

Owner: Protocol/Crypto Engineer
Module ID: M01

Canonical Commitment Rules (Hard Contracts):
1. Commitment input: nullifier occupies bytes [0, 32), secret bytes [32, 64)
2. commitment = keccak256(nullifier + secret)
3. nullifier_hash = keccak256(nullifier)
4. Both inputs must be exactly 32 bytes

The commitment is published when a note is deposited; the nullifier hash
is published when it is spent. The nullifier and secret themselves stay
with the note owner.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from core.crypto.hashing import keccak256, require_bytes32

if TYPE_CHECKING:
    from core.crypto.randomness import RandomnessSource


def derive_commitment(nullifier: bytes, secret: bytes) -> tuple[bytes, bytes]:
    """
    Derive the (commitment, nullifier_hash) pair for a note.

    Args:
        nullifier: 32-byte nullifier
        secret: 32-byte secret

    Returns:
        Tuple of (commitment, nullifier_hash), 32 bytes each

    Raises:
        InvalidInputLength: If either input is not exactly 32 bytes
    """
    nullifier = require_bytes32(nullifier, "nullifier")
    secret = require_bytes32(secret, "secret")

    commitment_input = bytearray(64)
    commitment_input[0:32] = nullifier
    commitment_input[32:64] = secret

    commitment = keccak256(bytes(commitment_input))
    nullifier_hash = keccak256(nullifier)

    return commitment, nullifier_hash


def create_user_commitment(nullifier: bytes, secret: bytes) -> bytes:
    """Return only the commitment half of derive_commitment."""
    return derive_commitment(nullifier, secret)[0]


@dataclass(frozen=True)
class NoteSecrets:
    """
    The private (nullifier, secret) pair behind one shielded note.

    repr is suppressed so the values never end up in logs or tracebacks.
    """
    nullifier: bytes
    secret: bytes

    def __post_init__(self) -> None:
        require_bytes32(self.nullifier, "nullifier")
        require_bytes32(self.secret, "secret")

    def __repr__(self) -> str:
        return "NoteSecrets(<redacted>)"

    @classmethod
    def generate(cls, randomness: "RandomnessSource") -> "NoteSecrets":
        """Draw a fresh nullifier and secret from the given source."""
        return cls(
            nullifier=randomness.generate_nullifier(),
            secret=randomness.generate_secret(),
        )

    @property
    def commitment(self) -> bytes:
        return derive_commitment(self.nullifier, self.secret)[0]

    @property
    def nullifier_hash(self) -> bytes:
        return derive_commitment(self.nullifier, self.secret)[1]


__all__ = [
    "derive_commitment",
    "create_user_commitment",
    "NoteSecrets",
]
