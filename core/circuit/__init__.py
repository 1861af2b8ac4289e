"""
Modules 03-04 - Circuit Boundary

Public-input layout of the recursive circuit and the contracts of the
external prover it is handed to.

Usage:
    from core.circuit import encode_public_inputs, decode_public_inputs

    vector = encode_public_inputs(1000, 0, sender_commitment, receiver_commitment)
    sender, receiver = decode_public_inputs(vector)
"""
from .public_inputs import (
    FIELD_SIZE,
    PUBLIC_INPUT_WIDTH,
    RECEIVER_BALANCE_OFFSET,
    RECEIVER_COMMITMENT_OFFSET,
    RESERVED_OFFSET,
    SENDER_BALANCE_OFFSET,
    SENDER_COMMITMENT_OFFSET,
    decode_public_inputs,
    encode_public_inputs,
    normalize_public_inputs,
)

from .prover import (
    CircuitArtifact,
    InnerProver,
    ProverBackend,
    RawProof,
    WitnessResult,
)

from .http_prover import HttpProverService


__all__ = [
    # Layout
    "FIELD_SIZE",
    "PUBLIC_INPUT_WIDTH",
    "SENDER_BALANCE_OFFSET",
    "RECEIVER_BALANCE_OFFSET",
    "SENDER_COMMITMENT_OFFSET",
    "RECEIVER_COMMITMENT_OFFSET",
    "RESERVED_OFFSET",
    "encode_public_inputs",
    "decode_public_inputs",
    "normalize_public_inputs",
    # Prover contracts
    "CircuitArtifact",
    "WitnessResult",
    "RawProof",
    "ProverBackend",
    "InnerProver",
    "HttpProverService",
]
