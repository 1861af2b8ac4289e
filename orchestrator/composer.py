"""
Module 05 - Recursive Proof Composer

Binds an inner transfer proof to the spender's Merkle inclusion and
hands the resulting private inputs to the external prover.

Steps per request:
1. Derive commitment / nullifier hash from (nullifier, secret)
2. Build the depth-20 Merkle path for that commitment
3. Assemble RecursiveProofInputs (amount as u256 big-endian, root from hex)
4. Execute the circuit to obtain a witness
5. Generate the proof with the configured transcript hash (keccak by default)
6. Self-verify; an unverifiable proof raises ProofGenerationInvalid

No state is kept between requests and nothing is retried here.
"""
from __future__ import annotations

import logging
from typing import Any, Sequence, Union

from core.circuit.prover import ProverBackend
from core.circuit.public_inputs import PublicInputVector, normalize_public_inputs
from core.crypto.commitments import derive_commitment
from core.crypto.hashing import from_hex, int_to_bytes32, require_bytes32, to_hex
from core.merkle.merkle_path import MERKLE_DEPTH, build_merkle_path
from core.merkle.merkle_proofs import require_inclusion
from core.schemas.errors import ProofGenerationInvalid
from core.schemas.transfer import ProofArtifact, RecursiveProofInputs


logger = logging.getLogger(__name__)


def _root_bytes(merkle_root: Union[str, bytes]) -> bytes:
    if isinstance(merkle_root, str):
        return require_bytes32(from_hex(merkle_root), "merkle_root")
    return require_bytes32(merkle_root, "merkle_root")


class RecursiveProofComposer:
    """
    Produces the outer recursive proof through a ProverBackend.

    Args:
        backend: External witness executor / prover / verifier
        keccak: Use the keccak transcript (needed for on-chain verifiers)
        strict_inclusion: Fold the built path against the root locally
            (the depth-20 root) and raise InclusionMismatch before
            calling the prover
        depth: Merkle path depth the circuit was compiled for
    """

    def __init__(
        self,
        backend: ProverBackend,
        *,
        keccak: bool = True,
        strict_inclusion: bool = False,
        depth: int = MERKLE_DEPTH,
    ) -> None:
        self.backend = backend
        self.keccak = keccak
        self.strict_inclusion = strict_inclusion
        self.depth = depth

    def build_inputs(
        self,
        inner_verification_key: Any,
        inner_proof: bytes,
        inner_public_inputs: PublicInputVector,
        inner_key_hash: str,
        merkle_root: Union[str, bytes],
        merkle_tree: Sequence[Sequence[bytes]],
        leaf_index: int,
        secret: bytes,
        nullifier: bytes,
        counterparty_commitment: bytes,
        amount: int,
    ) -> RecursiveProofInputs:
        """Assemble a fresh private-input bundle (steps 1-3)."""
        commitment, nullifier_hash = derive_commitment(nullifier, secret)
        path = build_merkle_path(commitment, merkle_tree, leaf_index, depth=self.depth)
        root = _root_bytes(merkle_root)

        if self.strict_inclusion:
            require_inclusion(commitment, root, path)

        return RecursiveProofInputs(
            verification_key=inner_verification_key,
            public_inputs=normalize_public_inputs(inner_public_inputs),
            key_hash=inner_key_hash,
            proof=bytes(inner_proof),
            path=path.siblings,
            path_indices=path.indices,
            secret=bytes(secret),
            root=root,
            nullifier=bytes(nullifier),
            nullifier_hash=nullifier_hash,
            counterparty_commitment=require_bytes32(
                counterparty_commitment, "counterparty_commitment"
            ),
            amount=int_to_bytes32(amount),
        )

    def compose(
        self,
        inner_verification_key: Any,
        inner_proof: bytes,
        inner_public_inputs: PublicInputVector,
        inner_key_hash: str,
        merkle_root: Union[str, bytes],
        merkle_tree: Sequence[Sequence[bytes]],
        leaf_index: int,
        secret: bytes,
        nullifier: bytes,
        counterparty_commitment: bytes,
        amount: int,
    ) -> ProofArtifact:
        """
        Produce and self-verify the recursive proof.

        Returns:
            ProofArtifact with hex proof and the prover's public inputs

        Raises:
            InvalidInputLength / InvalidAmount: On malformed inputs
            ProofGenerationInvalid: If the proof fails self-verification
            Any error raised by the backend, unchanged
        """
        inputs = self.build_inputs(
            inner_verification_key,
            inner_proof,
            inner_public_inputs,
            inner_key_hash,
            merkle_root,
            merkle_tree,
            leaf_index,
            secret,
            nullifier,
            counterparty_commitment,
            amount,
        )
        logger.info(
            "Composing recursive proof for leaf %d under root %s",
            leaf_index, to_hex(inputs.root),
        )

        execution = self.backend.execute(inputs.to_prover_inputs())
        logger.debug("Circuit returned %r", execution.return_value)

        raw_proof = self.backend.generate_proof(execution.witness, keccak=self.keccak)

        if not self.backend.verify_proof(raw_proof, keccak=self.keccak):
            logger.error("Generated recursive proof failed self-verification")
            raise ProofGenerationInvalid(
                "Generated proof is invalid",
                details={"leaf_index": leaf_index, "keccak": self.keccak},
            )

        return ProofArtifact(
            proof=to_hex(raw_proof.proof),
            public_inputs=list(raw_proof.public_inputs),
        )


__all__ = ["RecursiveProofComposer"]
