"""
Content Merkle - Hash Strategy Registry

Maps strategy names to hashlib-style constructors. Every resolution yields
a fresh hash object, so trees sharing a strategy never share hasher state.
"""

import hashlib
from collections.abc import Callable
from typing import Protocol

from content_merkle.core.errors import UnknownStrategyError


class HashObject(Protocol):
    """Streaming hash: feed bytes incrementally, then read the digest."""

    def update(self, data: bytes, /) -> None: ...

    def digest(self) -> bytes: ...


HashFactory = Callable[[], HashObject]

DEFAULT_HASH_STRATEGY = "sha256"

_STRATEGIES: dict[str, HashFactory] = {
    "sha256": hashlib.sha256,
    "sha224": hashlib.sha224,
    "sha384": hashlib.sha384,
    "sha512": hashlib.sha512,
    "sha3_256": hashlib.sha3_256,
    "sha3_512": hashlib.sha3_512,
    "blake2b": hashlib.blake2b,
    "blake2s": hashlib.blake2s,
}


def register_strategy(name: str, factory: HashFactory) -> None:
    """
    Register a hash strategy under a name.

    Args:
        name: Strategy name used by MerkleTree(hash_strategy=...)
        factory: Zero-argument callable returning a new hash object

    Raises:
        ValueError: If the name is empty or already registered
    """
    if not name:
        raise ValueError("Hash strategy name must not be empty")
    if name in _STRATEGIES:
        raise ValueError(f"Hash strategy {name!r} is already registered")
    _STRATEGIES[name] = factory


def available_strategies() -> list[str]:
    """List registered strategy names."""
    return sorted(_STRATEGIES)


def get_strategy_factory(name: str) -> HashFactory:
    """
    Look up the constructor registered for a strategy name.

    Raises:
        UnknownStrategyError: If nothing is registered under the name
    """
    try:
        return _STRATEGIES[name]
    except KeyError:
        raise UnknownStrategyError(name) from None


def resolve_strategy(name: str = DEFAULT_HASH_STRATEGY) -> HashObject:
    """Return a new, empty hash object for the named strategy."""
    return get_strategy_factory(name)()


def combine_hashes(left: bytes, right: bytes, strategy: str = DEFAULT_HASH_STRATEGY) -> bytes:
    """
    Compute the hash of an internal node.

    Left bytes are written first, then right bytes, into a single hash
    computation with no separator.

    Args:
        left: Hash of the left child
        right: Hash of the right child
        strategy: Registered hash strategy name

    Returns:
        Raw digest bytes
    """
    hasher = resolve_strategy(strategy)
    hasher.update(left)
    hasher.update(right)
    return hasher.digest()
