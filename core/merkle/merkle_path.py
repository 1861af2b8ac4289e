"""
Module 02 - Merkle Path Construction
Fixed-depth sibling paths over a materialized shielded-pool tree.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- SiblingPresent / SiblingAbsent: explicit sibling lookup result
- MerklePath: sibling values plus left/right indicator bits
- build_merkle_path: extract a depth-20 path for a leaf index
- build_tree_levels: materialize levels from leaves (zero-paired odd nodes)

Canonical Path Rules (Hard Contracts):
1. Depth is always MERKLE_DEPTH (20), regardless of tree occupancy
2. Sibling index at each level is index XOR 1
3. Present sibling: record its value, indicator = index % 2
4. Absent sibling: record ZERO_NODE, indicator = 0
5. index = index // 2 after every level
6. Levels beyond the materialized tree reuse the last level's bounds

Determinism Notes:
- The tree is only read, never mutated
- Leaf ordering is defined upstream; nothing here sorts
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from core.crypto.hashing import BYTES32, hash_concat


# Fixed depth the recursive circuit is compiled for
MERKLE_DEPTH: int = 20

# Value recorded for an absent sibling
ZERO_NODE: bytes = b"\x00" * BYTES32


@dataclass(frozen=True)
class SiblingPresent:
    """Sibling exists in the level; its value is used as-is."""
    value: bytes


@dataclass(frozen=True)
class SiblingAbsent:
    """Sibling lies past the end of the level."""


SiblingLookup = Union[SiblingPresent, SiblingAbsent]


def lookup_sibling(level: Sequence[bytes], index: int) -> SiblingLookup:
    """Find the sibling of `index` within a single level."""
    sibling_index = index ^ 1
    if sibling_index < len(level):
        return SiblingPresent(bytes(level[sibling_index]))
    return SiblingAbsent()


def resolve_sibling(lookup: SiblingLookup, index: int) -> tuple[bytes, int]:
    """
    Resolve a sibling lookup to a concrete (sibling, indicator) pair.

    Absent siblings become ZERO_NODE with indicator 0.
    """
    if isinstance(lookup, SiblingPresent):
        return lookup.value, index % 2
    return ZERO_NODE, 0


@dataclass(frozen=True)
class MerklePath:
    """
    Sibling path from a leaf towards the root.

    Attributes:
        siblings: Sibling node values, bottom-up (32 bytes each)
        indices: Indicator bits; 0 = current node is the left operand,
                 1 = current node is the right operand
        leaf: The leaf the path was built for, if known
        leaf_index: The leaf's index in level 0, if known
    """
    siblings: list[bytes]
    indices: list[int]
    leaf: Optional[bytes] = None
    leaf_index: Optional[int] = None

    def __post_init__(self) -> None:
        if len(self.siblings) != len(self.indices):
            raise ValueError(
                f"Path has {len(self.siblings)} siblings but "
                f"{len(self.indices)} indicator bits"
            )

    @property
    def depth(self) -> int:
        return len(self.siblings)

    def to_prover_inputs(self) -> tuple[list[list[int]], list[int]]:
        """Return (path, path_indices) in the circuit's array form."""
        return [list(node) for node in self.siblings], list(self.indices)


def build_merkle_path(
    leaf: bytes,
    tree: Sequence[Sequence[bytes]],
    leaf_index: int,
    depth: int = MERKLE_DEPTH,
) -> MerklePath:
    """
    Build the fixed-depth sibling path for the leaf at `leaf_index`.

    Membership is not checked here: a leaf that is not actually at
    `leaf_index` simply yields a path that fails verification.

    Args:
        leaf: The leaf value (the note commitment)
        tree: Ordered levels; tree[0] holds the leaves
        leaf_index: 0-based index of the leaf in tree[0]
        depth: Number of path entries to produce

    Returns:
        MerklePath with exactly `depth` siblings and indicator bits

    Raises:
        ValueError: If leaf_index is negative

    Example:
        >>> levels = build_tree_levels([a, b, c, d])
        >>> path = build_merkle_path(c, levels, 2)
        >>> path.siblings[:2] == [d, hash_concat(a, b)]
        True
    """
    if leaf_index < 0:
        raise ValueError(f"Leaf index must be non-negative, got {leaf_index}")

    siblings: list[bytes] = []
    indices: list[int] = []

    current_index = leaf_index
    current_level: Sequence[bytes] = tree[0] if len(tree) > 0 else []

    for level in range(depth):
        sibling, indicator = resolve_sibling(
            lookup_sibling(current_level, current_index), current_index
        )
        siblings.append(sibling)
        indices.append(indicator)

        current_index = current_index // 2
        if level + 1 < len(tree):
            current_level = tree[level + 1]

    return MerklePath(
        siblings=siblings,
        indices=indices,
        leaf=bytes(leaf),
        leaf_index=leaf_index,
    )


def build_tree_levels(leaves: Sequence[bytes]) -> list[list[bytes]]:
    """
    Materialize all levels of a tree from its leaves.

    Each level pairs adjacent nodes with hash_concat; an odd trailing
    node is paired with ZERO_NODE, matching the absent-sibling rule.
    Building stops once a level holds a single node.

    Args:
        leaves: Ordered leaf commitments

    Returns:
        List of levels, leaves first, single root last.
        An empty input returns [[]].
    """
    levels: list[list[bytes]] = [[bytes(leaf) for leaf in leaves]]

    while len(levels[-1]) > 1:
        current = levels[-1]
        next_level: list[bytes] = []
        for i in range(0, len(current), 2):
            right = current[i + 1] if i + 1 < len(current) else ZERO_NODE
            next_level.append(hash_concat(current[i], right))
        levels.append(next_level)

    return levels


def tree_root(levels: Sequence[Sequence[bytes]]) -> bytes:
    """
    Return the top node of a materialized tree.

    Raises:
        ValueError: If the top level does not hold exactly one node
    """
    if not levels or len(levels[-1]) != 1:
        raise ValueError("Tree top level must contain exactly one node")
    return bytes(levels[-1][0])


def tree_height(levels: Sequence[Sequence[bytes]]) -> int:
    """Number of hashing levels between the leaves and the top node."""
    return max(len(levels) - 1, 0)


def padded_root(levels: Sequence[Sequence[bytes]], depth: int = MERKLE_DEPTH) -> bytes:
    """
    Root of the fixed-depth tree a short materialized tree sits in.

    The top node is hashed with ZERO_NODE once per level between the
    tree's height and `depth`, which is what a full fold of a built
    path reaches.

    Raises:
        ValueError: If the tree is taller than `depth` or has no single top node
    """
    height = tree_height(levels)
    if height > depth:
        raise ValueError(f"Tree height {height} exceeds depth {depth}")

    node = tree_root(levels)
    for _ in range(depth - height):
        node = hash_concat(node, ZERO_NODE)
    return node


__all__ = [
    "MERKLE_DEPTH",
    "ZERO_NODE",
    "SiblingPresent",
    "SiblingAbsent",
    "lookup_sibling",
    "resolve_sibling",
    "MerklePath",
    "build_merkle_path",
    "build_tree_levels",
    "tree_root",
    "tree_height",
    "padded_root",
]
