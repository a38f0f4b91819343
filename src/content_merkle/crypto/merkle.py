"""
Content Merkle - Merkle Tree

Binary hash tree over caller-defined content items. Leaves hash their own
content; internal nodes combine their children's hashes with a registered
hash strategy (SHA-256 unless configured otherwise).

For odd-length levels the last node is duplicated, so a three-item tree
hashes as [a, b, c, c].
"""

import time
from collections.abc import Iterable
from typing import Any

import structlog

from content_merkle.core.config import settings
from content_merkle.core.errors import BuildError, CompareError, ContentHashError
from content_merkle.crypto.builder import build_tree
from content_merkle.crypto.node import MerkleNode
from content_merkle.crypto.proof import MerkleProof, ProofDirection, ProofElement
from content_merkle.crypto.strategies import combine_hashes, get_strategy_factory
from content_merkle.metrics.tree_metrics import TreeMetrics, get_tree_metrics

logger = structlog.get_logger(__name__)


def _metrics() -> TreeMetrics | None:
    if not settings.METRICS_ENABLED:
        return None
    return get_tree_metrics()


class MerkleTree:
    """
    Merkle tree over content items.

    Features:
    - Deterministic, order-sensitive construction
    - Pluggable node hash strategy
    - In-place rebuild from the same or new contents
    - Whole-tree and per-content verification
    - Inclusion proof generation

    Example:
        >>> tree = MerkleTree([TextContent("a"), TextContent("b")])
        >>> proof = tree.get_merkle_path(TextContent("a"))
        >>> verify_proof(proof)
        True
    """

    def __init__(self, contents: Iterable[Any], hash_strategy: str | None = None) -> None:
        """
        Build a tree from content items.

        Args:
            contents: Ordered content items implementing calculate_hash()
                and equals()
            hash_strategy: Registered strategy name for combining nodes;
                defaults to settings.DEFAULT_HASH_STRATEGY

        Raises:
            EmptyInputError: If contents is empty
            LeafHashError: If a content item fails to hash
            UnknownStrategyError: If hash_strategy is not registered
        """
        if hash_strategy is None:
            hash_strategy = settings.DEFAULT_HASH_STRATEGY
        get_strategy_factory(hash_strategy)

        self._hash_strategy = hash_strategy
        self._root, self._leaves = self._build(contents)
        self.merkle_root: bytes = self._root.hash

    @classmethod
    def from_contents(
        cls,
        contents: Iterable[Any],
        hash_strategy: str | None = None,
    ) -> "MerkleTree":
        """Construct a Merkle tree from content items."""
        return cls(contents, hash_strategy)

    def _build(self, contents: Iterable[Any]) -> tuple[MerkleNode, list[MerkleNode]]:
        contents = list(contents)
        start = time.perf_counter()
        root, leaves = build_tree(contents, self._hash_strategy)

        metrics = _metrics()
        if metrics is not None:
            metrics.record_build(time.perf_counter() - start, len(contents))

        return root, leaves

    @property
    def root(self) -> MerkleNode:
        """Get the root node."""
        return self._root

    @property
    def root_hash(self) -> bytes:
        """Get the cached Merkle root."""
        return self.merkle_root

    @property
    def hex_root(self) -> str:
        return self.merkle_root.hex()

    @property
    def hash_strategy(self) -> str:
        return self._hash_strategy

    @property
    def leaves(self) -> list[MerkleNode]:
        """Get all leaf nodes, including a trailing duplicate leaf."""
        return self._leaves

    @property
    def contents(self) -> list[Any]:
        """Get the content items in input order."""
        return [leaf.content for leaf in self._leaves if not leaf.is_duplicate]

    @property
    def leaf_count(self) -> int:
        """Get the number of content items."""
        return sum(1 for leaf in self._leaves if not leaf.is_duplicate)

    @property
    def height(self) -> int:
        """Number of levels above the leaves."""
        height = 0
        node = self._leaves[0].parent
        while node is not None:
            height += 1
            node = node.parent
        return height

    def get_leaf_hash(self, index: int) -> bytes:
        """
        Get the stored hash of a leaf by index.

        Raises:
            IndexError: If index out of bounds
        """
        if index < 0 or index >= self.leaf_count:
            raise IndexError(f"Leaf index {index} out of bounds")
        return self._leaves[index].hash

    def rebuild(self) -> None:
        """
        Recompute the whole tree from the current contents.

        Restores a consistent tree after stored hashes were altered.

        Raises:
            BuildError: If a content item fails to hash; the tree is
                left unchanged
        """
        self.rebuild_with(self.contents)

    def rebuild_with(self, contents: Iterable[Any]) -> None:
        """
        Replace the tree's contents and recompute everything.

        Raises:
            BuildError: If the new contents are empty or fail to hash;
                the tree is left unchanged
        """
        metrics = _metrics()
        try:
            root, leaves = self._build(contents)
        except BuildError as e:
            logger.warning(
                "Merkle tree rebuild failed",
                error=str(e),
                hash_strategy=self._hash_strategy,
            )
            if metrics is not None:
                metrics.record_rebuild(False)
            raise

        self._root = root
        self._leaves = leaves
        self.merkle_root = root.hash

        if metrics is not None:
            metrics.record_rebuild(True)

    def verify_tree(self) -> bool:
        """
        Check every stored hash against a fresh computation.

        Leaves are rehashed from their content, internal nodes from their
        children's stored hashes, and the root must equal merkle_root.

        Returns:
            True if no node has been altered

        Raises:
            ContentHashError: If a content item fails to hash
        """
        valid = self._verify_nodes()

        metrics = _metrics()
        if metrics is not None:
            metrics.record_verification("tree", valid)
        if not valid:
            logger.warning("Merkle tree verification failed", root=self.hex_root)

        return valid

    def _verify_nodes(self) -> bool:
        for i, leaf in enumerate(self._leaves):
            if leaf.hash != self._content_hash(i, leaf):
                return False

        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                continue
            if node.hash != node.calculate_node_hash(self._hash_strategy):
                return False
            # A duplicate shares its children with the node it copies.
            if not node.is_duplicate:
                stack.append(node.left)
                stack.append(node.right)

        return self._root.hash == self.merkle_root

    def verify_content(self, item: Any) -> bool:
        """
        Check that an item is in the tree and its path reproduces the root.

        The matching leaf's hash is recomputed from its content and combined
        with the stored sibling hashes up to the root. Each stored ancestor
        hash on the way must equal the recomputed value.

        Returns:
            False if the item is not in the tree or the path does not
            reproduce merkle_root

        Raises:
            CompareError: If a content comparison fails
            ContentHashError: If the matched content fails to hash
        """
        match = self._find_leaf(item)
        if match is None:
            return False

        index, leaf = match
        current_hash = self._content_hash(index, leaf)
        valid = self._root.hash == self.merkle_root
        node = leaf

        while valid and node.parent is not None:
            parent = node.parent
            sibling = node.sibling()
            if parent.left is node:
                current_hash = combine_hashes(current_hash, sibling.hash, self._hash_strategy)
            else:
                current_hash = combine_hashes(sibling.hash, current_hash, self._hash_strategy)
            # Every stored ancestor must agree with the recomputed path.
            valid = parent.hash == current_hash
            node = parent

        valid = valid and current_hash == self.merkle_root

        metrics = _metrics()
        if metrics is not None:
            metrics.record_verification("content", valid)
        if not valid:
            logger.warning("Content verification failed", leaf_index=index)

        return valid

    def get_merkle_path(self, item: Any) -> MerkleProof | None:
        """
        Generate an inclusion proof for a content item.

        Returns:
            MerkleProof for the first leaf matching item, or None if no
            leaf matches

        Raises:
            CompareError: If a content comparison fails
            ContentHashError: If the matched content fails to hash
        """
        match = self._find_leaf(item)
        if match is None:
            return None
        return self._proof_for(*match)

    def get_proof(self, leaf_index: int) -> MerkleProof:
        """
        Generate an inclusion proof for the leaf at an index.

        Raises:
            IndexError: If leaf_index out of bounds
        """
        if leaf_index < 0 or leaf_index >= self.leaf_count:
            raise IndexError(f"Leaf index {leaf_index} out of bounds")
        return self._proof_for(leaf_index, self._leaves[leaf_index])

    def _proof_for(self, index: int, leaf: MerkleNode) -> MerkleProof:
        start = time.perf_counter()
        proof_path = []
        node = leaf

        while node.parent is not None:
            sibling = node.sibling()
            if node.parent.left is node:
                proof_path.append(ProofElement(hash=sibling.hash, direction=ProofDirection.RIGHT))
            else:
                proof_path.append(ProofElement(hash=sibling.hash, direction=ProofDirection.LEFT))
            node = node.parent

        proof = MerkleProof(
            leaf_hash=self._content_hash(index, leaf),
            leaf_index=index,
            proof_path=proof_path,
            root_hash=self.merkle_root,
            hash_strategy=self._hash_strategy,
        )

        metrics = _metrics()
        if metrics is not None:
            metrics.record_proof(time.perf_counter() - start)

        return proof

    def _find_leaf(self, item: Any) -> tuple[int, MerkleNode] | None:
        for i, leaf in enumerate(self._leaves):
            if leaf.is_duplicate:
                continue
            try:
                matched = leaf.content.equals(item)
            except Exception as e:
                raise CompareError(i, item) from e
            if matched:
                return i, leaf
        return None

    def _content_hash(self, index: int, leaf: MerkleNode) -> bytes:
        try:
            return leaf.calculate_node_hash(self._hash_strategy)
        except Exception as e:
            raise ContentHashError(index, leaf.content) from e

    def __len__(self) -> int:
        return self.leaf_count

    def __repr__(self) -> str:
        return (
            f"MerkleTree(leaf_count={self.leaf_count}, "
            f"hash_strategy={self._hash_strategy!r}, root={self.hex_root})"
        )

    def __str__(self) -> str:
        lines = [repr(self)]
        stack = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            lines.append("  " * depth + str(node))
            if not node.is_leaf and not node.is_duplicate:
                stack.append((node.right, depth + 1))
                stack.append((node.left, depth + 1))
        return "\n".join(lines)
