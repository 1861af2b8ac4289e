"""
CLI Note Commands

Create fresh notes and derive commitments.

Usage:
    shield note new [--json]
    shield note commit --nullifier 0x.. --secret 0x.. [--json]
"""

from __future__ import annotations

import json
from argparse import Namespace

from core.crypto.commitments import NoteSecrets, derive_commitment
from core.crypto.hashing import from_hex, to_hex
from core.crypto.randomness import SecureRandomness


EXIT_SUCCESS = 0


def _print_note(data: dict[str, str], as_json: bool) -> None:
    if as_json:
        print(json.dumps(data, indent=2))
        return
    for key, value in data.items():
        print(f"{key}: {value}")


def note_new_cmd(args: Namespace) -> int:
    """Draw a fresh nullifier/secret pair and show its commitment."""
    note = NoteSecrets.generate(SecureRandomness())
    _print_note(
        {
            "nullifier": to_hex(note.nullifier),
            "secret": to_hex(note.secret),
            "commitment": to_hex(note.commitment),
            "nullifier_hash": to_hex(note.nullifier_hash),
        },
        args.json,
    )
    return EXIT_SUCCESS


def note_commit_cmd(args: Namespace) -> int:
    """Derive commitment and nullifier hash from existing values."""
    commitment, nullifier_hash = derive_commitment(
        from_hex(args.nullifier), from_hex(args.secret)
    )
    _print_note(
        {
            "commitment": to_hex(commitment),
            "nullifier_hash": to_hex(nullifier_hash),
        },
        args.json,
    )
    return EXIT_SUCCESS
