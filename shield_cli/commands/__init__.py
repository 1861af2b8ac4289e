"""
CLI command modules.
"""

from shield_cli.commands import inputs, merkle, note, prove

__all__ = ["inputs", "merkle", "note", "prove"]
