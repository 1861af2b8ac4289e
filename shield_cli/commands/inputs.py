"""
CLI Public Input Commands

Usage:
    shield inputs decode --file public_inputs.json [--json]

The file holds either a 0x hex string or a JSON list of elements
(byte-valued ints or 0x field strings), as returned by the prover.
"""

from __future__ import annotations

import json
from argparse import Namespace

from core.circuit.public_inputs import decode_public_inputs
from core.crypto.hashing import from_hex, to_hex


EXIT_SUCCESS = 0


def inputs_decode_cmd(args: Namespace) -> int:
    """Print sender/receiver balances encoded in a public-input vector."""
    with open(args.file, "r") as f:
        document = json.load(f)

    if isinstance(document, dict):
        document = document["public_inputs"]
    vector = from_hex(document) if isinstance(document, str) else document

    sender, receiver = decode_public_inputs(vector)
    decoded = {
        "sender": {
            "balance": sender.amount,
            "owner_commitment": to_hex(sender.owner_commitment),
        },
        "receiver": {
            "balance": receiver.amount,
            "owner_commitment": to_hex(receiver.owner_commitment),
        },
    }

    if args.json:
        print(json.dumps(decoded, indent=2))
    else:
        for party, values in decoded.items():
            print(f"{party}_balance: {values['balance']}")
            print(f"{party}_commitment: {values['owner_commitment']}")
    return EXIT_SUCCESS
