"""
Content Merkle - Content Capability

Anything stored in a MerkleTree supplies its own hash and equality check.
BytesContent and TextContent cover the common case of hashing a payload
with one of the registered strategies.
"""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from content_merkle.crypto.strategies import DEFAULT_HASH_STRATEGY, resolve_strategy


@runtime_checkable
class Content(Protocol):
    """
    Contract for tree content.

    calculate_hash() may raise HashError (or any exception) and equals()
    may raise CompareError; the tree reports both with the leaf index.
    """

    def calculate_hash(self) -> bytes: ...

    def equals(self, other: Any) -> bool: ...


@dataclass(frozen=True)
class BytesContent:
    """Raw bytes payload hashed with a registered strategy."""

    data: bytes
    hash_strategy: str = DEFAULT_HASH_STRATEGY

    def calculate_hash(self) -> bytes:
        hasher = resolve_strategy(self.hash_strategy)
        hasher.update(self.data)
        return hasher.digest()

    def equals(self, other: Any) -> bool:
        if not isinstance(other, BytesContent):
            return False
        return self.data == other.data


@dataclass(frozen=True)
class TextContent:
    """Text payload, UTF-8 encoded before hashing."""

    text: str
    hash_strategy: str = DEFAULT_HASH_STRATEGY

    def calculate_hash(self) -> bytes:
        hasher = resolve_strategy(self.hash_strategy)
        hasher.update(self.text.encode("utf-8"))
        return hasher.digest()

    def equals(self, other: Any) -> bool:
        if not isinstance(other, TextContent):
            return False
        return self.text == other.text
