"""
Module 00 - Schemas
File: errors.py

Purpose: Standard error taxonomy for the shielded-transfer client.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the client."""

    # Precondition Errors
    INVALID_INPUT_LENGTH = "INVALID_INPUT_LENGTH"
    INVALID_AMOUNT = "INVALID_AMOUNT"

    # Merkle & Commitment Errors
    MERKLE_PROOF_INVALID = "MERKLE_PROOF_INVALID"

    # Prover Errors
    PROOF_GENERATION_INVALID = "PROOF_GENERATION_INVALID"
    PROVER_SERVICE_ERROR = "PROVER_SERVICE_ERROR"
    CIRCUIT_LOAD_ERROR = "CIRCUIT_LOAD_ERROR"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class ShieldError(BaseModel):
    """
    Base error model for structured error communication.

    Used when errors cross a process boundary (CLI JSON output,
    prover service responses) instead of being raised.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_INPUT_LENGTH],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "ShieldException":
        """Convert this error model to a raised exception."""
        return ShieldException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class ShieldException(Exception):
    """
    Base exception for all shielded-transfer errors.

    Carries structured error information and can be converted
    to/from ShieldError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "SHIELD_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> ShieldError:
        """Convert this exception to a ShieldError model."""
        return ShieldError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidInputLength(ShieldException):
    """A fixed-width field received a buffer of the wrong length."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        expected: int | None = None,
        actual: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field:
            full_details["field"] = field
        if expected is not None:
            full_details["expected"] = expected
        if actual is not None:
            full_details["actual"] = actual
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_INPUT_LENGTH,
            details=full_details,
            retryable=False,
        )


class InvalidAmount(ShieldException):
    """An amount or balance does not fit in an unsigned 256-bit field."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_AMOUNT,
            details=details,
            retryable=False,
        )


class InclusionMismatch(ShieldException):
    """Raised by require_inclusion when a path does not reach the root."""

    def __init__(
        self,
        message: str,
        leaf_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if leaf_index is not None:
            full_details["leaf_index"] = leaf_index
        super().__init__(
            message=message,
            code=ErrorCodes.MERKLE_PROOF_INVALID,
            details=full_details,
            retryable=False,
        )


class ProofGenerationInvalid(ShieldException):
    """The prover returned a proof that fails its own verification."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.PROOF_GENERATION_INVALID,
            details=details,
            retryable=False,
        )


class ProverServiceError(ShieldException):
    """The external prover/verifier service could not be reached or failed."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        full_details = details or {}
        if operation:
            full_details["operation"] = operation
        if status_code is not None:
            full_details["status_code"] = status_code
        super().__init__(
            message=message,
            code=ErrorCodes.PROVER_SERVICE_ERROR,
            details=full_details,
            retryable=retryable,
        )


class CircuitLoadError(ShieldException):
    """A compiled circuit description could not be loaded."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if path:
            full_details["path"] = path
        super().__init__(
            message=message,
            code=ErrorCodes.CIRCUIT_LOAD_ERROR,
            details=full_details,
            retryable=False,
        )
