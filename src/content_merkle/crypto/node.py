"""
Content Merkle - Tree Node

Children are owned through plain references; the parent link is a weak
reference so the node graph holds no strong cycles.
"""

import weakref
from dataclasses import dataclass, field
from typing import Any

from content_merkle.crypto.strategies import combine_hashes


@dataclass(eq=False)
class MerkleNode:
    """
    Represents a node in the Merkle tree.

    Attributes:
        hash: Digest of the node
        left: Left child node (None for leaves)
        right: Right child node (None for leaves)
        content: Content item (only for leaf nodes)
        is_duplicate: True for a synthetic node padding an odd level
    """

    hash: bytes
    left: "MerkleNode | None" = field(default=None, repr=False)
    right: "MerkleNode | None" = field(default=None, repr=False)
    content: Any = None
    is_duplicate: bool = False
    _parent: "weakref.ref[MerkleNode] | None" = field(
        default=None, init=False, repr=False
    )

    @property
    def is_leaf(self) -> bool:
        """Check if this node is a leaf."""
        return self.left is None and self.right is None

    @property
    def parent(self) -> "MerkleNode | None":
        """Parent node, or None for the root."""
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: "MerkleNode | None") -> None:
        self._parent = None if node is None else weakref.ref(node)

    def sibling(self) -> "MerkleNode | None":
        """The other child of this node's parent."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def duplicate(self) -> "MerkleNode":
        """Synthetic copy used to pad an odd-length level."""
        return MerkleNode(
            hash=self.hash,
            left=self.left,
            right=self.right,
            content=self.content,
            is_duplicate=True,
        )

    def calculate_node_hash(self, strategy: str) -> bytes:
        """
        Recompute this node's hash.

        Leaves hash their content; internal nodes combine the children's
        stored hashes.
        """
        if self.is_leaf:
            return self.content.calculate_hash()
        return combine_hashes(self.left.hash, self.right.hash, strategy)

    def __str__(self) -> str:
        kind = "leaf" if self.is_leaf else "node"
        marker = " dup" if self.is_duplicate else ""
        text = f"{kind}{marker} {self.hash.hex()}"
        if self.is_leaf:
            text += f" {self.content!r}"
        return text
