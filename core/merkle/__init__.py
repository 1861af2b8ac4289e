"""
Module 02 - Merkle Paths and Inclusion
Fixed-depth path extraction and inclusion verification for the shielded pool.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- MerklePath: sibling values plus indicator bits
- build_merkle_path: extract the depth-20 path for a leaf
- build_tree_levels / tree_root / padded_root: materialize a tree from its leaves
- verify_inclusion: recompute and compare a root

Canonical Rules:
1. Parent hashing: keccak256(left + right)
2. Absent sibling: ZERO_NODE with indicator 0
3. Depth: always MERKLE_DEPTH (20)
4. Verification folds the whole path unless a tree height is declared

Usage:
    from core.merkle import build_tree_levels, build_merkle_path, padded_root, verify_inclusion

    levels = build_tree_levels(commitments)
    path = build_merkle_path(commitments[2], levels, 2)
    assert verify_inclusion(commitments[2], padded_root(levels), path.siblings, path.indices)
"""
from .merkle_path import (
    MERKLE_DEPTH,
    ZERO_NODE,
    MerklePath,
    SiblingAbsent,
    SiblingPresent,
    build_merkle_path,
    build_tree_levels,
    lookup_sibling,
    resolve_sibling,
    padded_root,
    tree_height,
    tree_root,
)

from .merkle_proofs import (
    MerkleInclusionVerifier,
    require_inclusion,
    verify_inclusion,
)


__all__ = [
    # Constants
    "MERKLE_DEPTH",
    "ZERO_NODE",
    # Path construction
    "MerklePath",
    "SiblingPresent",
    "SiblingAbsent",
    "lookup_sibling",
    "resolve_sibling",
    "build_merkle_path",
    "build_tree_levels",
    "tree_root",
    "tree_height",
    "padded_root",
    # Verification
    "verify_inclusion",
    "require_inclusion",
    "MerkleInclusionVerifier",
]
