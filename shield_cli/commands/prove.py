"""
CLI Prove Command

Run the full transfer flow against the configured prover service.

Usage:
    shield prove --request transfer.json [--out proofs.json] [--strict-inclusion]

Request file:
    {
      "notes": [{"amount": 700}, {"amount": 300}],
      "amount": 250,
      "receiver_commitment": "0x..",
      "merkle_root": "0x..",
      "tree": {"leaves": ["0x..", ...]},
      "leaf_index": 2,
      "secret": "0x..",
      "nullifier": "0x.."
    }
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path

from core.crypto.hashing import from_hex
from core.schemas.errors import ProofGenerationInvalid, ShieldException
from core.schemas.transfer import SpendableNote
from orchestrator.transfer import create_transfer_orchestrator

from shield_cli.commands.merkle import parse_tree


logger = logging.getLogger(__name__)


EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def prove_cmd(args: Namespace) -> int:
    """Produce inner and recursive proofs for a transfer request."""
    with open(args.request, "r") as f:
        request = json.load(f)

    orchestrator = create_transfer_orchestrator(args.runtime_config)
    if args.strict_inclusion:
        orchestrator.composer.strict_inclusion = True

    notes = [SpendableNote(**note) for note in request["notes"]]

    try:
        proofs = orchestrator.create_complete_transfer(
            sender_notes=notes,
            transfer_amount=int(request["amount"]),
            receiver_commitment=from_hex(request["receiver_commitment"]),
            merkle_root=request["merkle_root"],
            merkle_tree=parse_tree(request["tree"]),
            sender_leaf_index=int(request["leaf_index"]),
            sender_secret=from_hex(request["secret"]),
            sender_nullifier=from_hex(request["nullifier"]),
        )
    except ProofGenerationInvalid as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_VERIFICATION_FAILED
    except ShieldException as e:
        print(json.dumps(e.to_error_model().model_dump(), indent=2), file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    output = json.dumps(proofs.to_dict(), indent=2)
    if args.out:
        Path(args.out).write_text(output)
        print(f"Proofs written to {args.out}")
    else:
        print(output)
    return EXIT_SUCCESS
