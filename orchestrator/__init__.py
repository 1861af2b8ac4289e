"""
Modules 05-06 - Proof Orchestration

Public API:
- RecursiveProofComposer: Builds recursive inputs and drives the prover
- TransferOrchestrator: Inner proof, balance layout, then recursive proof
- TransferProofs: Inner and recursive proof artifacts of one transfer
- create_transfer_orchestrator: Wire an orchestrator from RuntimeConfig
"""

from orchestrator.composer import RecursiveProofComposer
from orchestrator.transfer import (
    TransferOrchestrator,
    TransferProofs,
    create_transfer_orchestrator,
)

__all__ = [
    "RecursiveProofComposer",
    "TransferOrchestrator",
    "TransferProofs",
    "create_transfer_orchestrator",
]
