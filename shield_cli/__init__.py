"""
Shield CLI

Command-line interface for shielded-transfer notes, Merkle paths and proofs.

Usage:
    python -m shield_cli note new
    python -m shield_cli merkle path --tree tree.json --index 2
    python -m shield_cli merkle verify --commitment 0x.. --root 0x.. --path path.json
    python -m shield_cli inputs decode --file public_inputs.json
    python -m shield_cli prove --request transfer.json --out proofs.json
"""

__version__ = "0.1.0"
