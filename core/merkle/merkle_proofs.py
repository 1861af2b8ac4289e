"""
Module 02 - Merkle Inclusion Verification
Recompute a root from a leaf, its sibling path and indicator bits.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- verify_inclusion: boolean check, never raises for a non-matching path
- require_inclusion: raising variant for callers that must not proceed
- MerkleInclusionVerifier: class-based wrapper

Verification is independent of the path builder: it only folds hashes.
Indicator 0 means the current node is the left operand
(parent = keccak256(current + sibling)); 1 means it is the right operand
(parent = keccak256(sibling + current)).

Comparison Rules:
1. Default: every path entry is folded, then the result is compared
   with the root once (the depth-20 root, see padded_root)
2. With `levels=h` (1 <= h <= len(path)): the first h entries are folded
   and compared with the root of a height-h tree; every entry after h
   must be an absent-sibling pad (ZERO_NODE, indicator 0)
3. No other position is ever compared
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from core.crypto.hashing import BYTES32, hash_concat
from core.merkle.merkle_path import ZERO_NODE, MerklePath
from core.schemas.errors import InclusionMismatch


logger = logging.getLogger(__name__)


def _is_padding(sibling: bytes, indicator: int) -> bool:
    return indicator == 0 and bytes(sibling) == ZERO_NODE


def verify_inclusion(
    commitment: bytes,
    root: bytes,
    path: Sequence[bytes],
    indices: Sequence[int],
    levels: Optional[int] = None,
) -> bool:
    """
    Verify that `commitment` is included under `root`.

    Args:
        commitment: Leaf value (32 bytes)
        root: Expected root (32 bytes)
        path: Sibling values, bottom-up
        indices: Indicator bits parallel to `path`
        levels: Height of the tree `root` belongs to. None folds the
                whole path; otherwise the fold stops after `levels`
                entries and the remainder must be padding.

    Returns:
        True if the recomputed root matches, False otherwise.
        Mismatched lengths, malformed entries or an out-of-range
        `levels` also return False.
    """
    if len(path) != len(indices):
        return False
    if any(len(sibling) != BYTES32 for sibling in path):
        return False
    if any(bit not in (0, 1) for bit in indices):
        return False

    if levels is None:
        levels = len(path)
    elif not 1 <= levels <= len(path):
        return False
    elif not all(_is_padding(s, b) for s, b in zip(path[levels:], indices[levels:])):
        return False

    current = bytes(commitment)
    for sibling, bit in zip(path[:levels], indices[:levels]):
        if bit == 0:
            current = hash_concat(current, sibling)
        else:
            current = hash_concat(sibling, current)

    return current == bytes(root)


def require_inclusion(
    commitment: bytes,
    root: bytes,
    path: MerklePath,
    levels: Optional[int] = None,
) -> None:
    """
    Raise unless `path` proves `commitment` under `root`.

    Raises:
        InclusionMismatch: If verification fails
    """
    if not verify_inclusion(commitment, root, path.siblings, path.indices, levels):
        logger.warning(
            "Inclusion check failed for leaf index %s against root 0x%s",
            path.leaf_index, bytes(root).hex(),
        )
        raise InclusionMismatch(
            "Commitment is not included under the given root",
            leaf_index=path.leaf_index,
            details={"root": "0x" + bytes(root).hex()},
        )


class MerkleInclusionVerifier:
    """
    Convenience class for verifying inclusion paths.

    Example:
        >>> path = build_merkle_path(leaf, levels, index)
        >>> MerkleInclusionVerifier.verify_path(leaf, padded_root(levels), path)
        True
    """

    @staticmethod
    def verify(
        commitment: bytes,
        root: bytes,
        path: Sequence[bytes],
        indices: Sequence[int],
        levels: Optional[int] = None,
    ) -> bool:
        """Verify from raw path components."""
        return verify_inclusion(commitment, root, path, indices, levels)

    @staticmethod
    def verify_path(
        commitment: bytes,
        root: bytes,
        path: MerklePath,
        levels: Optional[int] = None,
    ) -> bool:
        """Verify from a MerklePath produced by the builder."""
        return verify_inclusion(commitment, root, path.siblings, path.indices, levels)


__all__ = [
    "verify_inclusion",
    "require_inclusion",
    "MerkleInclusionVerifier",
]
