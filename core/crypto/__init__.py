"""
Module 01 - Crypto Primitives

Hashing, note commitments and secure randomness.

Usage:
    from core.crypto import SecureRandomness, NoteSecrets, derive_commitment

    note = NoteSecrets.generate(SecureRandomness())
    commitment, nullifier_hash = derive_commitment(note.nullifier, note.secret)
"""
from .hashing import (
    BYTES32,
    bytes32_to_int,
    from_hex,
    hash_concat,
    int_to_bytes32,
    keccak256,
    require_bytes32,
    to_hex,
)

from .commitments import (
    NoteSecrets,
    create_user_commitment,
    derive_commitment,
)

from .randomness import (
    RandomnessSource,
    SecureRandomness,
    generate_nullifier,
    generate_secret,
)


__all__ = [
    # Hashing
    "BYTES32",
    "keccak256",
    "hash_concat",
    "to_hex",
    "from_hex",
    "require_bytes32",
    "int_to_bytes32",
    "bytes32_to_int",
    # Commitments
    "derive_commitment",
    "create_user_commitment",
    "NoteSecrets",
    # Randomness
    "RandomnessSource",
    "SecureRandomness",
    "generate_secret",
    "generate_nullifier",
]
