"""
Content Merkle - Exceptions

Construction failures derive from BuildError, verification failures from
VerifyError. A verification that simply does not match is not an error;
those operations return False (or None for a missing proof).
"""

from typing import Any


class MerkleTreeError(Exception):
    """Base exception for Merkle tree errors."""

    pass


class HashError(MerkleTreeError):
    """Content item could not compute its own hash."""

    pass


class BuildError(MerkleTreeError):
    """Tree construction or rebuild failed."""

    pass


class EmptyInputError(BuildError):
    """Tree requested from zero content items."""

    def __init__(self) -> None:
        super().__init__("Cannot create Merkle tree from empty contents")


class LeafHashError(BuildError):
    """A content item failed to hash while building leaves."""

    def __init__(self, index: int, item: Any) -> None:
        self.index = index
        self.item = item
        super().__init__(f"Failed to hash content at index {index}: {item!r}")


class UnknownStrategyError(BuildError, LookupError):
    """Hash strategy name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown hash strategy: {name!r}")


class VerifyError(MerkleTreeError):
    """Verification could not be computed."""

    pass


class ContentHashError(VerifyError):
    """A leaf's content failed to hash during verification."""

    def __init__(self, index: int, item: Any) -> None:
        self.index = index
        self.item = item
        super().__init__(f"Failed to hash content of leaf {index}: {item!r}")


class CompareError(VerifyError):
    """A leaf's content failed to compare against a queried item."""

    def __init__(self, index: int, item: Any) -> None:
        self.index = index
        self.item = item
        super().__init__(f"Failed to compare leaf {index} against {item!r}")
