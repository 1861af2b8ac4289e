"""
Module 00 - Schemas
File: transfer.py

Purpose: Value types flowing between the commitment, Merkle, layout and
prover layers. Byte fields are raw bytes internally; hex appears only
when a value is handed to or received from an external collaborator.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_bytes(value: Any) -> Any:
    """Accept bytearray, list-of-int byte arrays and 0x hex as bytes."""
    if isinstance(value, str) and value.startswith("0x"):
        return bytes.fromhex(value[2:])
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, (list, tuple)) and all(isinstance(v, int) for v in value):
        return bytes(value)
    return value


def _check_width(value: bytes, name: str) -> bytes:
    if len(value) != 32:
        raise ValueError(f"{name} must be exactly 32 bytes, got {len(value)}")
    return value


class Balance(BaseModel):
    """
    A party's post-transfer shielded balance and its binding commitment.

    Both fields are 32 bytes; the balance is a big-endian unsigned integer.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    balance: bytes = Field(..., description="32-byte big-endian balance")
    owner_commitment: bytes = Field(..., description="32-byte owner commitment")

    @field_validator("balance", "owner_commitment", mode="before")
    @classmethod
    def _bytes_like(cls, v: Any) -> Any:
        return _coerce_bytes(v)

    @field_validator("balance", "owner_commitment")
    @classmethod
    def _width(cls, v: bytes, info) -> bytes:
        return _check_width(v, info.field_name)

    @property
    def amount(self) -> int:
        """Integer view of the balance field."""
        return int.from_bytes(self.balance, "big")


class SpendableNote(BaseModel):
    """A note the sender can spend; only the amount feeds the balance sum."""

    model_config = ConfigDict(extra="forbid")

    amount: int = Field(..., ge=0)
    commitment: Optional[bytes] = Field(default=None)
    leaf_index: Optional[int] = Field(default=None, ge=0)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("commitment", mode="before")
    @classmethod
    def _bytes_like(cls, v: Any) -> Any:
        return _coerce_bytes(v)


class InnerProof(BaseModel):
    """Opaque output of the direct-transfer proving step."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    proof: bytes = Field(..., description="Opaque proof bytes")
    public_inputs: list[str] = Field(
        default_factory=list,
        description="Public inputs as returned by the prover (hex field strings)",
    )

    @field_validator("proof", mode="before")
    @classmethod
    def _bytes_like(cls, v: Any) -> Any:
        return _coerce_bytes(v)


class ProofArtifact(BaseModel):
    """
    A proof as handed back to the caller.

    The proof is a 0x-prefixed lowercase hex string; the public inputs
    are kept exactly as the prover produced them.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    proof: str = Field(..., pattern=r"^0x[0-9a-f]*$")
    public_inputs: list[str] = Field(default_factory=list)

    @property
    def proof_bytes(self) -> bytes:
        return bytes.fromhex(self.proof[2:])


class RecursiveProofInputs(BaseModel):
    """
    Full private-input bundle for the outer recursive circuit.

    Field declaration order is the order the circuit ABI expects and
    must not change. Built fresh for every proof request.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    verification_key: Any = Field(default=None)
    public_inputs: bytes
    key_hash: str
    proof: bytes
    path: list[bytes]
    path_indices: list[int]
    secret: bytes
    root: bytes
    nullifier: bytes
    nullifier_hash: bytes
    counterparty_commitment: bytes
    amount: bytes

    @field_validator("public_inputs", "proof", mode="before")
    @classmethod
    def _bytes_like(cls, v: Any) -> Any:
        return _coerce_bytes(v)

    @field_validator(
        "secret", "root", "nullifier", "nullifier_hash",
        "counterparty_commitment", "amount",
    )
    @classmethod
    def _width(cls, v: bytes, info) -> bytes:
        return _check_width(v, info.field_name)

    @field_validator("path_indices")
    @classmethod
    def _bits(cls, v: list[int]) -> list[int]:
        if any(bit not in (0, 1) for bit in v):
            raise ValueError("path_indices must contain only 0 or 1")
        return v

    def to_prover_inputs(self) -> dict[str, Any]:
        """
        Serialize to the circuit's input map.

        Byte fields become lists of ints, the opaque inner proof becomes
        a 0x hex string. Key order follows the field declaration order.
        """
        return {
            "verification_key": self.verification_key,
            "public_inputs": list(self.public_inputs),
            "key_hash": self.key_hash,
            "proof": "0x" + self.proof.hex(),
            "path": [list(node) for node in self.path],
            "path_indices": list(self.path_indices),
            "secret": list(self.secret),
            "root": list(self.root),
            "nullifier": list(self.nullifier),
            "nullifier_hash": list(self.nullifier_hash),
            "counterparty_commitment": list(self.counterparty_commitment),
            "amount": list(self.amount),
        }
