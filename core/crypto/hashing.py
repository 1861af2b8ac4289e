"""
Module 01 - Hashing Utilities
Keccak-256 hashing and byte/hex conversion helpers for the shielded pool.

Owner: Protocol/Crypto Engineer
Module ID: M01

This module provides:
- Keccak-256 hashing for raw bytes (Ethereum padding, not NIST SHA3)
- Parent hashing for Merkle nodes
- Hex encoding/decoding with 0x prefix
- 32-byte precondition checks and big-endian integer encoding

Security/Determinism Notes:
- Always hash raw bytes exactly as given
- Raw byte buffers are the canonical internal representation;
  hex is only used at the boundary
"""
from __future__ import annotations

from typing import Iterable

from Crypto.Hash import keccak

from core.schemas.errors import InvalidAmount, InvalidInputLength


# Width of every hash, commitment, nullifier and layout field
BYTES32: int = 32

_U256_LIMIT: int = 1 << 256


def keccak256(data: bytes) -> bytes:
    """
    Compute Keccak-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte Keccak-256 digest

    Example:
        >>> keccak256(b"").hex()
        'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'
    """
    k = keccak.new(digest_bits=256)
    k.update(bytes(data))
    return k.digest()


def hash_concat(left: bytes, right: bytes) -> bytes:
    """
    Hash the concatenation of two byte sequences.

    This is the Merkle parent function: parent = keccak256(left + right)

    Args:
        left: Left child (32 bytes)
        right: Right child (32 bytes)

    Returns:
        32-byte Keccak-256 digest of concatenation
    """
    return keccak256(bytes(left) + bytes(right))


def to_hex(data: bytes) -> str:
    """
    Convert bytes to lowercase hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + bytes(data).hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string (with 0x prefix) to bytes.

    Args:
        hex_string: Hex string with 0x prefix

    Returns:
        Decoded bytes

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters
    """
    if not hex_string.startswith("0x"):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


def require_bytes32(value: bytes | bytearray | Iterable[int], field: str) -> bytes:
    """
    Coerce a value to bytes and check it is exactly 32 bytes long.

    Accepts bytes, bytearray or a sequence of byte-valued ints (the
    array form circuits use for byte fields).

    Raises:
        InvalidInputLength: If the value is not exactly 32 bytes
    """
    if isinstance(value, (int, str)):
        raise InvalidInputLength(
            f"{field} must be a byte sequence, got {type(value).__name__}", field=field
        )
    try:
        raw = bytes(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputLength(
            f"{field} is not a byte sequence: {e}", field=field
        ) from e
    if len(raw) != BYTES32:
        raise InvalidInputLength(
            f"{field} must be exactly {BYTES32} bytes, got {len(raw)}",
            field=field,
            expected=BYTES32,
            actual=len(raw),
        )
    return raw


def int_to_bytes32(value: int) -> bytes:
    """
    Encode an unsigned integer as 32-byte big-endian.

    Raises:
        InvalidAmount: If value is negative or does not fit in 256 bits
    """
    if value < 0 or value >= _U256_LIMIT:
        raise InvalidAmount(
            "Value must be an unsigned 256-bit integer",
            details={"value": str(value)},
        )
    return value.to_bytes(BYTES32, "big")


def bytes32_to_int(value: bytes) -> int:
    """Decode a 32-byte big-endian unsigned integer."""
    return int.from_bytes(require_bytes32(value, "value"), "big")


__all__ = [
    "BYTES32",
    "keccak256",
    "hash_concat",
    "to_hex",
    "from_hex",
    "require_bytes32",
    "int_to_bytes32",
    "bytes32_to_int",
]
