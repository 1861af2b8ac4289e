"""
Module 04 - HTTP Prover Service Adapter
ProverBackend and InnerProver over a JSON HTTP API.

Owner: Protocol/Crypto Engineer
Module ID: M04

Endpoints (relative to the configured base URL):
    POST /execute          {circuit, inputs}                    -> {witness, return_value}
    POST /prove            {circuit, witness, keccak}           -> {proof, public_inputs}
    POST /verify           {circuit, proof, public_inputs, keccak} -> {valid}
    POST /direct-transfer  {notes, amount, send_handle, change_handle} -> {proof, public_inputs}

Binary values travel as 0x-prefixed lowercase hex. Failures raise
ProverServiceError and are never retried here.
"""
from __future__ import annotations

import logging
from typing import Any, Sequence

from core.circuit.prover import CircuitArtifact, RawProof, WitnessResult
from core.crypto.hashing import from_hex, to_hex
from core.http.client import HttpClient, HttpError
from core.schemas.errors import ProverServiceError
from core.schemas.transfer import InnerProof, SpendableNote


logger = logging.getLogger(__name__)


class HttpProverService:
    """
    Prover service client implementing both ProverBackend and InnerProver.

    Usage:
        service = HttpProverService(
            client=HttpClient(timeout=600),
            endpoint="http://localhost:8080",
            circuit=CircuitArtifact.from_file("recursive_transfer_circuit.json"),
        )
        witness = service.execute(inputs)
    """

    def __init__(
        self,
        client: HttpClient,
        endpoint: str,
        circuit: CircuitArtifact | None = None,
    ) -> None:
        self.client = client
        self.endpoint = endpoint.rstrip("/")
        self.circuit = circuit

    def _call(self, operation: str, payload: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.endpoint}/{operation}"
        try:
            response = self.client.post(url, json=payload)
        except HttpError as e:
            raise ProverServiceError(
                f"Prover service unreachable for {operation}: {e}",
                operation=operation,
                retryable=True,
            ) from e

        if not response.ok:
            raise ProverServiceError(
                f"Prover service returned HTTP {response.status_code} for {operation}",
                operation=operation,
                status_code=response.status_code,
                details={"body": response.text[:500]},
                retryable=response.status_code >= 500,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProverServiceError(
                f"Prover service returned invalid JSON for {operation}",
                operation=operation,
            ) from e
        if not isinstance(data, dict):
            raise ProverServiceError(
                f"Prover service returned a non-object body for {operation}",
                operation=operation,
            )
        return data

    def _circuit_payload(self) -> dict[str, Any]:
        if self.circuit is None:
            raise ProverServiceError("No circuit configured for the prover service")
        return self.circuit.to_dict()

    @staticmethod
    def _field(data: dict[str, Any], key: str, operation: str) -> Any:
        if key not in data:
            raise ProverServiceError(
                f"Prover service response for {operation} is missing '{key}'",
                operation=operation,
            )
        return data[key]

    # ------------------------------------------------------------------
    # ProverBackend
    # ------------------------------------------------------------------

    def execute(self, inputs: dict[str, Any]) -> WitnessResult:
        data = self._call("execute", {"circuit": self._circuit_payload(), "inputs": inputs})
        witness = from_hex(self._field(data, "witness", "execute"))
        return WitnessResult(witness=witness, return_value=data.get("return_value"))

    def generate_proof(self, witness: bytes, *, keccak: bool) -> RawProof:
        data = self._call(
            "prove",
            {"circuit": self._circuit_payload(), "witness": to_hex(witness), "keccak": keccak},
        )
        proof = from_hex(self._field(data, "proof", "prove"))
        logger.info("Prover returned a %d-byte proof", len(proof))
        return RawProof(proof=proof, public_inputs=list(data.get("public_inputs", [])))

    def verify_proof(self, proof: RawProof, *, keccak: bool) -> bool:
        data = self._call(
            "verify",
            {
                "circuit": self._circuit_payload(),
                "proof": to_hex(proof.proof),
                "public_inputs": proof.public_inputs,
                "keccak": keccak,
            },
        )
        return self._field(data, "valid", "verify") is True

    # ------------------------------------------------------------------
    # InnerProver
    # ------------------------------------------------------------------

    def prove_direct_transfer(
        self,
        notes: Sequence[SpendableNote],
        amount: int,
        send_handle: bytes,
        change_handle: bytes,
    ) -> InnerProof:
        payload = {
            "notes": [
                {
                    "amount": str(note.amount),
                    "commitment": to_hex(note.commitment) if note.commitment else None,
                    "leaf_index": note.leaf_index,
                    **note.metadata,
                }
                for note in notes
            ],
            "amount": str(amount),
            "send_handle": to_hex(send_handle),
            "change_handle": to_hex(change_handle),
        }
        data = self._call("direct-transfer", payload)
        return InnerProof(
            proof=from_hex(self._field(data, "proof", "direct-transfer")),
            public_inputs=list(data.get("public_inputs", [])),
        )


__all__ = ["HttpProverService"]
