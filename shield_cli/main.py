"""
Shield CLI - Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m shield_cli note new [--json]
    python -m shield_cli note commit --nullifier 0x.. --secret 0x..
    python -m shield_cli merkle path --tree tree.json --index N [--leaf 0x..] [--out FILE]
    python -m shield_cli merkle verify --commitment 0x.. --root 0x.. --path FILE [--levels H]
    python -m shield_cli inputs decode --file FILE [--json]
    python -m shield_cli prove --request FILE [--out FILE] [--strict-inclusion]
    python -m shield_cli config --show

Environment Variables:
    SHIELD_PROVER_ENDPOINT      Prover service base URL
    SHIELD_CIRCUIT_PATH         Compiled recursive circuit JSON
    SHIELD_KECCAK               Keccak transcript (default: true)
    SHIELD_INNER_KEY_HASH       Inner verification key hash (default: 0x0)
    SHIELD_LOG_LEVEL            Log level (default: INFO)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from core.config.runtime import load_config
from shield_cli.commands import inputs, merkle, note, prove


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="shield",
        description="Shielded transfer CLI - notes, Merkle paths and recursive proofs.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: ./shield.yaml or ~/.config/shield/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- note command ---
    note_parser = subparsers.add_parser("note", help="Create notes and derive commitments")
    note_subparsers = note_parser.add_subparsers(dest="note_command")

    note_new = note_subparsers.add_parser("new", help="Draw a fresh nullifier and secret")
    note_new.add_argument("--json", action="store_true", help="JSON output")
    note_new.set_defaults(func=note.note_new_cmd)

    note_commit = note_subparsers.add_parser("commit", help="Derive commitment and nullifier hash")
    note_commit.add_argument("--nullifier", type=str, required=True, help="0x-prefixed 32-byte nullifier")
    note_commit.add_argument("--secret", type=str, required=True, help="0x-prefixed 32-byte secret")
    note_commit.add_argument("--json", action="store_true", help="JSON output")
    note_commit.set_defaults(func=note.note_commit_cmd)

    note_parser.set_defaults(func=lambda args: note_parser.print_help() or EXIT_SUCCESS)

    # --- merkle command ---
    merkle_parser = subparsers.add_parser("merkle", help="Build and verify inclusion paths")
    merkle_subparsers = merkle_parser.add_subparsers(dest="merkle_command")

    merkle_path = merkle_subparsers.add_parser("path", help="Build the depth-20 path for a leaf")
    merkle_path.add_argument("--tree", type=str, required=True, help="Tree JSON file")
    merkle_path.add_argument("--index", type=int, required=True, help="Leaf index")
    merkle_path.add_argument("--leaf", type=str, help="Leaf value (default: tree[0][index])")
    merkle_path.add_argument("--out", "-o", type=str, help="Output file")
    merkle_path.set_defaults(func=merkle.merkle_path_cmd)

    merkle_verify = merkle_subparsers.add_parser("verify", help="Verify a path file")
    merkle_verify.add_argument("--commitment", type=str, required=True, help="Leaf commitment")
    merkle_verify.add_argument("--root", type=str, required=True, help="Expected root")
    merkle_verify.add_argument("--path", type=str, required=True, help="Path JSON file")
    merkle_verify.add_argument(
        "--levels",
        type=int,
        default=None,
        help="Height of the tree the root belongs to (default: fold the whole path)",
    )
    merkle_verify.set_defaults(func=merkle.merkle_verify_cmd)

    merkle_parser.set_defaults(func=lambda args: merkle_parser.print_help() or EXIT_SUCCESS)

    # --- inputs command ---
    inputs_parser = subparsers.add_parser("inputs", help="Inspect public-input vectors")
    inputs_subparsers = inputs_parser.add_subparsers(dest="inputs_command")

    inputs_decode = inputs_subparsers.add_parser("decode", help="Decode balances and commitments")
    inputs_decode.add_argument("--file", type=str, required=True, help="Public inputs JSON file")
    inputs_decode.add_argument("--json", action="store_true", help="JSON output")
    inputs_decode.set_defaults(func=inputs.inputs_decode_cmd)

    inputs_parser.set_defaults(func=lambda args: inputs_parser.print_help() or EXIT_SUCCESS)

    # --- prove command ---
    prove_parser = subparsers.add_parser(
        "prove",
        help="Produce inner and recursive transfer proofs",
        description="Run the full transfer flow against the configured prover service.",
    )
    prove_parser.add_argument("--request", type=str, required=True, help="Transfer request JSON file")
    prove_parser.add_argument("--out", "-o", type=str, help="Output file for proofs")
    prove_parser.add_argument(
        "--strict-inclusion",
        action="store_true",
        default=False,
        help="Check the Merkle path locally before calling the prover",
    )
    prove_parser.add_argument("--debug", action="store_true", help="Print tracebacks")
    prove_parser.set_defaults(func=prove.prove_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser("config", help="Show effective configuration")
    config_parser.add_argument("--show", action="store_true", default=False, help="Show current configuration")
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    print(json.dumps(args.runtime_config.to_dict(), indent=2))
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.runtime_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
