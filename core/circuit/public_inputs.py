"""
Module 03 - Public Input Layout
Fixed byte layout of balances and owner commitments in the outer
circuit's public-input vector.

Owner: Protocol/Crypto Engineer
Module ID: M03

Layout (Hard Contract, byte offsets, one element per byte):
    [  0,  32)  sender balance (big-endian)
    [ 32,  64)  receiver balance (big-endian)
    [ 64,  96)  sender owner commitment
    [ 96, 128)  receiver owner commitment
    [128, 162)  reserved, zero-filled

The circuit expects exactly PUBLIC_INPUT_WIDTH elements.
"""
from __future__ import annotations

from typing import Sequence, Union

from core.crypto.hashing import BYTES32, int_to_bytes32, require_bytes32
from core.schemas.errors import InvalidInputLength
from core.schemas.transfer import Balance


FIELD_SIZE: int = BYTES32
PUBLIC_INPUT_WIDTH: int = 162

SENDER_BALANCE_OFFSET: int = 0
RECEIVER_BALANCE_OFFSET: int = 32
SENDER_COMMITMENT_OFFSET: int = 64
RECEIVER_COMMITMENT_OFFSET: int = 96
RESERVED_OFFSET: int = 128

# Prover output may be raw bytes, byte-valued ints or hex field strings
PublicInputVector = Union[bytes, bytearray, Sequence[int], Sequence[str]]


def _balance_bytes(value: Union[int, bytes], name: str) -> bytes:
    if isinstance(value, int):
        return int_to_bytes32(value)
    return require_bytes32(value, name)


def encode_public_inputs(
    sender_balance: Union[int, bytes],
    receiver_balance: Union[int, bytes],
    sender_commitment: bytes,
    receiver_commitment: bytes,
) -> bytes:
    """
    Lay out balances and commitments as the circuit's public-input vector.

    Balances may be given as non-negative integers or as 32-byte
    big-endian values.

    Returns:
        PUBLIC_INPUT_WIDTH bytes

    Raises:
        InvalidInputLength: If a byte field is not exactly 32 bytes
        InvalidAmount: If an integer balance is outside the u256 range
    """
    vector = bytearray(PUBLIC_INPUT_WIDTH)
    vector[SENDER_BALANCE_OFFSET:RECEIVER_BALANCE_OFFSET] = _balance_bytes(
        sender_balance, "sender_balance"
    )
    vector[RECEIVER_BALANCE_OFFSET:SENDER_COMMITMENT_OFFSET] = _balance_bytes(
        receiver_balance, "receiver_balance"
    )
    vector[SENDER_COMMITMENT_OFFSET:RECEIVER_COMMITMENT_OFFSET] = require_bytes32(
        sender_commitment, "sender_commitment"
    )
    vector[RECEIVER_COMMITMENT_OFFSET:RESERVED_OFFSET] = require_bytes32(
        receiver_commitment, "receiver_commitment"
    )
    return bytes(vector)


def _element_to_byte(element: Union[int, str], position: int) -> int:
    value = int(element, 16) if isinstance(element, str) else int(element)
    if not 0 <= value <= 0xFF:
        raise InvalidInputLength(
            f"Public input element {position} does not fit in a byte: {element!r}",
            field="public_inputs",
        )
    return value


def normalize_public_inputs(public_inputs: PublicInputVector) -> bytes:
    """Convert any supported public-input representation to raw bytes."""
    if isinstance(public_inputs, (bytes, bytearray, memoryview)):
        return bytes(public_inputs)
    return bytes(
        _element_to_byte(element, position)
        for position, element in enumerate(public_inputs)
    )


def decode_public_inputs(public_inputs: PublicInputVector) -> tuple[Balance, Balance]:
    """
    Extract (sender, receiver) balances from a public-input vector.

    Exact inverse of the slices written by encode_public_inputs. The
    reserved tail is ignored.

    Raises:
        InvalidInputLength: If fewer than 128 elements are present
    """
    raw = normalize_public_inputs(public_inputs)
    if len(raw) < RESERVED_OFFSET:
        raise InvalidInputLength(
            f"Public inputs must hold at least {RESERVED_OFFSET} elements, got {len(raw)}",
            field="public_inputs",
            expected=RESERVED_OFFSET,
            actual=len(raw),
        )

    sender = Balance(
        balance=raw[SENDER_BALANCE_OFFSET:RECEIVER_BALANCE_OFFSET],
        owner_commitment=raw[SENDER_COMMITMENT_OFFSET:RECEIVER_COMMITMENT_OFFSET],
    )
    receiver = Balance(
        balance=raw[RECEIVER_BALANCE_OFFSET:SENDER_COMMITMENT_OFFSET],
        owner_commitment=raw[RECEIVER_COMMITMENT_OFFSET:RESERVED_OFFSET],
    )
    return sender, receiver


__all__ = [
    "FIELD_SIZE",
    "PUBLIC_INPUT_WIDTH",
    "SENDER_BALANCE_OFFSET",
    "RECEIVER_BALANCE_OFFSET",
    "SENDER_COMMITMENT_OFFSET",
    "RECEIVER_COMMITMENT_OFFSET",
    "RESERVED_OFFSET",
    "encode_public_inputs",
    "normalize_public_inputs",
    "decode_public_inputs",
]
