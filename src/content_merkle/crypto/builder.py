"""
Content Merkle - Tree Builder

Turns an ordered sequence of content items into a binary tree of
MerkleNodes, bottom-up. Any level with an odd number of nodes (above a
single node) is padded by duplicating its last node before pairing.
"""

from collections.abc import Sequence
from typing import Any

import structlog

from content_merkle.core.errors import EmptyInputError, LeafHashError
from content_merkle.crypto.node import MerkleNode
from content_merkle.crypto.strategies import DEFAULT_HASH_STRATEGY, combine_hashes

logger = structlog.get_logger(__name__)


def build_leaves(contents: Sequence[Any]) -> list[MerkleNode]:
    """
    Create one leaf per content item, in order.

    Raises:
        EmptyInputError: If contents is empty
        LeafHashError: If a content item fails to hash
    """
    if not contents:
        raise EmptyInputError()

    leaves = []
    for i, item in enumerate(contents):
        try:
            leaf_hash = item.calculate_hash()
        except Exception as e:
            raise LeafHashError(i, item) from e
        leaves.append(MerkleNode(hash=leaf_hash, content=item))

    return leaves


def pad_level(level: list[MerkleNode]) -> list[MerkleNode]:
    """Append a duplicate of the last node when the level is odd."""
    if len(level) > 1 and len(level) % 2 == 1:
        level.append(level[-1].duplicate())
    return level


def build_levels(leaves: list[MerkleNode], strategy: str) -> MerkleNode:
    """
    Pair nodes level by level until a single root remains.

    Sets each child's parent link and returns the root.
    """
    current_level = leaves

    while len(current_level) > 1:
        pad_level(current_level)
        next_level = []

        for i in range(0, len(current_level), 2):
            left = current_level[i]
            right = current_level[i + 1]
            parent = MerkleNode(
                hash=combine_hashes(left.hash, right.hash, strategy),
                left=left,
                right=right,
            )
            left.parent = parent
            right.parent = parent
            next_level.append(parent)

        current_level = next_level

    return current_level[0]


def build_tree(
    contents: Sequence[Any],
    strategy: str = DEFAULT_HASH_STRATEGY,
) -> tuple[MerkleNode, list[MerkleNode]]:
    """
    Build a Merkle tree from content items.

    Args:
        contents: Ordered content items
        strategy: Registered hash strategy used to combine children

    Returns:
        Tuple of (root, leaves); leaves keep input order with the
        duplicate leaf, if any, last

    Raises:
        EmptyInputError: If contents is empty
        LeafHashError: If a content item fails to hash
    """
    leaves = build_leaves(contents)
    pad_level(leaves)
    root = build_levels(list(leaves), strategy)

    logger.debug(
        "Built Merkle tree",
        leaf_count=len(contents),
        padded=len(leaves) != len(contents),
        hash_strategy=strategy,
        root=root.hash.hex(),
    )

    return root, leaves
