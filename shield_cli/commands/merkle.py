"""
CLI Merkle Commands

Build inclusion paths from a tree file and verify them offline.

Tree files are JSON: either a list of levels (each a list of 0x hex
nodes, leaves first) or {"leaves": [...]} which is materialized here.

Usage:
    shield merkle path --tree tree.json --index 2 [--leaf 0x..] [--out path.json]
    shield merkle verify --commitment 0x.. --root 0x.. --path path.json [--levels H]

"root" in a path file is the depth-20 root a full fold reaches; "top" is
the materialized tree's top node, which verifies with --levels set to
"height".
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any

from core.crypto.hashing import from_hex, to_hex
from core.merkle.merkle_path import (
    build_merkle_path,
    build_tree_levels,
    padded_root,
    tree_height,
    tree_root,
)
from core.merkle.merkle_proofs import verify_inclusion


logger = logging.getLogger(__name__)


EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def parse_tree(data: Any) -> list[list[bytes]]:
    """Turn a decoded tree document into raw levels."""
    if isinstance(data, dict):
        if "levels" in data:
            data = data["levels"]
        elif "leaves" in data:
            return build_tree_levels([from_hex(leaf) for leaf in data["leaves"]])
        else:
            raise ValueError("Tree document needs 'levels' or 'leaves'")
    if not isinstance(data, list):
        raise ValueError("Tree document must be a list of levels")
    return [[from_hex(node) for node in level] for level in data]


def load_tree(path: str | Path) -> list[list[bytes]]:
    """Read and parse a tree JSON file."""
    with open(path, "r") as f:
        return parse_tree(json.load(f))


def merkle_path_cmd(args: Namespace) -> int:
    """Build the depth-20 path for a leaf index."""
    levels = load_tree(args.tree)

    if args.leaf:
        leaf = from_hex(args.leaf)
    elif levels and args.index < len(levels[0]):
        leaf = levels[0][args.index]
    else:
        print(f"Error: no leaf at index {args.index}; pass --leaf", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    path = build_merkle_path(leaf, levels, args.index)
    document: dict[str, Any] = {
        "leaf": to_hex(leaf),
        "leaf_index": args.index,
        "path": [to_hex(node) for node in path.siblings],
        "indices": path.indices,
    }
    try:
        document["root"] = to_hex(padded_root(levels))
        document["top"] = to_hex(tree_root(levels))
        document["height"] = tree_height(levels)
    except ValueError:
        logger.info("Tree top level is not a single node; root omitted")

    output = json.dumps(document, indent=2)
    if args.out:
        Path(args.out).write_text(output)
        print(f"Path written to {args.out}")
    else:
        print(output)
    return EXIT_SUCCESS


def merkle_verify_cmd(args: Namespace) -> int:
    """Verify a path file against a commitment and root."""
    with open(args.path, "r") as f:
        document = json.load(f)

    siblings = [from_hex(node) for node in document["path"]]
    indices = [int(bit) for bit in document["indices"]]

    ok = verify_inclusion(
        from_hex(args.commitment), from_hex(args.root), siblings, indices, args.levels
    )
    print(f"included: {str(ok).lower()}")
    return EXIT_SUCCESS if ok else EXIT_VERIFICATION_FAILED
