"""
Module 06 - Transfer Orchestrator

End-to-end sequencing of a shielded transfer:

1. Inner "direct transfer" proof from the external InnerProver
2. Sender aggregate balance (sum of spendable notes), receiver balance 0
3. Sender commitment from (nullifier, secret)
4. Public-input layout, padded to the circuit width
5. Recursive proof through the RecursiveProofComposer

No cryptography happens here beyond calling the layers below.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from core.circuit.http_prover import HttpProverService
from core.circuit.prover import CircuitArtifact, InnerProver
from core.circuit.public_inputs import encode_public_inputs
from core.config.runtime import RuntimeConfig
from core.crypto.commitments import create_user_commitment
from core.crypto.hashing import to_hex
from core.crypto.randomness import RandomnessSource, SecureRandomness
from core.http.client import HttpClient
from core.schemas.transfer import ProofArtifact, SpendableNote

from orchestrator.composer import RecursiveProofComposer


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransferProofs:
    """Inner and recursive proof artifacts of one transfer."""
    inner: ProofArtifact
    recursive: ProofArtifact

    def to_dict(self) -> dict[str, Any]:
        return {
            "inner_proof": self.inner.model_dump(),
            "recursive_proof": self.recursive.model_dump(),
        }


class TransferOrchestrator:
    """
    Runs the full transfer flow.

    The inner verification key and key hash are configuration points:
    leaving the key unset binds no verification key in the outer proof,
    which is logged as a warning on every transfer.
    """

    def __init__(
        self,
        inner_prover: InnerProver,
        composer: RecursiveProofComposer,
        randomness: Optional[RandomnessSource] = None,
        *,
        inner_verification_key: Any = None,
        inner_key_hash: str = "0x0",
    ) -> None:
        self.inner_prover = inner_prover
        self.composer = composer
        self.randomness = randomness or SecureRandomness()
        self.inner_verification_key = inner_verification_key
        self.inner_key_hash = inner_key_hash

    def create_complete_transfer(
        self,
        sender_notes: Sequence[SpendableNote],
        transfer_amount: int,
        receiver_commitment: bytes,
        merkle_root: Union[str, bytes],
        merkle_tree: Sequence[Sequence[bytes]],
        sender_leaf_index: int,
        sender_secret: bytes,
        sender_nullifier: bytes,
    ) -> TransferProofs:
        """
        Produce the inner and recursive proofs for one transfer.

        Every call draws fresh handles for the inner prover and builds
        fresh recursive inputs.
        """
        send_handle = self.randomness.generate_handle()
        change_handle = self.randomness.generate_handle()

        inner = self.inner_prover.prove_direct_transfer(
            sender_notes, transfer_amount, send_handle, change_handle
        )
        logger.info("Inner direct-transfer proof: %d bytes", len(inner.proof))

        if self.inner_verification_key is None:
            logger.warning(
                "No inner verification key configured; key hash %s is used as-is",
                self.inner_key_hash,
            )

        sender_balance = sum(note.amount for note in sender_notes)
        receiver_balance = 0
        sender_commitment = create_user_commitment(sender_nullifier, sender_secret)

        structured_public_inputs = encode_public_inputs(
            sender_balance,
            receiver_balance,
            sender_commitment,
            receiver_commitment,
        )

        recursive = self.composer.compose(
            self.inner_verification_key,
            inner.proof,
            structured_public_inputs,
            self.inner_key_hash,
            merkle_root,
            merkle_tree,
            sender_leaf_index,
            sender_secret,
            sender_nullifier,
            receiver_commitment,
            transfer_amount,
        )

        return TransferProofs(
            inner=ProofArtifact(
                proof=to_hex(inner.proof),
                public_inputs=list(inner.public_inputs),
            ),
            recursive=recursive,
        )


def create_transfer_orchestrator(
    config: RuntimeConfig,
    client: Optional[HttpClient] = None,
) -> TransferOrchestrator:
    """
    Wire an orchestrator to the configured prover service.

    The same service acts as inner prover and recursive backend.
    """
    client = client or HttpClient(timeout=config.http.timeout, proxy=config.http.proxy)
    circuit = (
        CircuitArtifact.from_file(config.prover.circuit_path)
        if config.prover.circuit_path
        else None
    )
    service = HttpProverService(client, config.prover.endpoint, circuit)
    composer = RecursiveProofComposer(service, keccak=config.prover.keccak)
    return TransferOrchestrator(
        inner_prover=service,
        composer=composer,
        inner_verification_key=config.transfer.load_inner_verification_key(),
        inner_key_hash=config.transfer.inner_key_hash,
    )


__all__ = [
    "TransferProofs",
    "TransferOrchestrator",
    "create_transfer_orchestrator",
]
