"""
Module 04 - Prover Boundary
Contracts for the external prover/verifier and the inner transfer prover.

Owner: Protocol/Crypto Engineer
Module ID: M04

The core never interprets circuits, witnesses, proofs or verification
keys: they are opaque values owned by the external backend. This module
only fixes the shape of what crosses the boundary.

- ProverBackend: witness execution, proof generation, self-verification
- InnerProver: the first-stage "direct transfer" proving step
- CircuitArtifact: compiled circuit description loaded from JSON
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Protocol, Sequence, runtime_checkable

from core.schemas.errors import CircuitLoadError
from core.schemas.transfer import InnerProof, SpendableNote


@dataclass(frozen=True)
class CircuitArtifact:
    """Compiled circuit description handed to the backend unchanged."""
    bytecode: str
    abi: dict[str, Any] = field(default_factory=dict)
    name: str = "recursive_transfer_circuit"

    @classmethod
    def from_dict(cls, data: dict[str, Any], name: Optional[str] = None) -> "CircuitArtifact":
        if not isinstance(data.get("bytecode"), str):
            raise CircuitLoadError("Circuit description has no bytecode string")
        return cls(
            bytecode=data["bytecode"],
            abi=data.get("abi", {}),
            name=name or data.get("name", "recursive_transfer_circuit"),
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "CircuitArtifact":
        """Load a compiled circuit JSON file (must contain `bytecode`)."""
        path = Path(path)
        if not path.exists():
            raise CircuitLoadError(f"Circuit file not found: {path}", path=str(path))
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as e:
            raise CircuitLoadError(
                f"Circuit file is not valid JSON: {e}", path=str(path)
            ) from e
        return cls.from_dict(data, name=path.stem)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "bytecode": self.bytecode, "abi": self.abi}


@dataclass(frozen=True)
class WitnessResult:
    """Output of witness execution."""
    witness: bytes
    return_value: Any = None


@dataclass(frozen=True)
class RawProof:
    """Proof bytes plus the public inputs the backend extracted."""
    proof: bytes
    public_inputs: list[str] = field(default_factory=list)


@runtime_checkable
class ProverBackend(Protocol):
    """External witness executor, prover and verifier for one circuit."""

    def execute(self, inputs: dict[str, Any]) -> WitnessResult: ...

    def generate_proof(self, witness: bytes, *, keccak: bool) -> RawProof: ...

    def verify_proof(self, proof: RawProof, *, keccak: bool) -> bool: ...


@runtime_checkable
class InnerProver(Protocol):
    """External first-stage prover for a direct transfer."""

    def prove_direct_transfer(
        self,
        notes: Sequence[SpendableNote],
        amount: int,
        send_handle: bytes,
        change_handle: bytes,
    ) -> InnerProof: ...


__all__ = [
    "CircuitArtifact",
    "WitnessResult",
    "RawProof",
    "ProverBackend",
    "InnerProver",
]
