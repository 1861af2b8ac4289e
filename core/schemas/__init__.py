"""
Module 00 - Schemas
File: __init__.py

Purpose: Export the error taxonomy and transfer value types.
"""

from .errors import (
    CircuitLoadError,
    ErrorCodes,
    InclusionMismatch,
    InvalidAmount,
    InvalidInputLength,
    ProofGenerationInvalid,
    ProverServiceError,
    ShieldError,
    ShieldException,
)

from .transfer import (
    Balance,
    InnerProof,
    ProofArtifact,
    RecursiveProofInputs,
    SpendableNote,
)

__all__ = [
    # Errors
    "ErrorCodes",
    "ShieldError",
    "ShieldException",
    "InvalidInputLength",
    "InvalidAmount",
    "InclusionMismatch",
    "ProofGenerationInvalid",
    "ProverServiceError",
    "CircuitLoadError",
    # Transfer types
    "Balance",
    "SpendableNote",
    "InnerProof",
    "ProofArtifact",
    "RecursiveProofInputs",
]
