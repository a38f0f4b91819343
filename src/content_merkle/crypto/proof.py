"""
Content Merkle - Inclusion Proofs

A proof is the ordered list of sibling hashes from a leaf up to just
below the root, each tagged with the side the sibling sits on. Anyone
holding the leaf's content hash, the proof and the hash strategy can
recompute the root without the rest of the tree.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from content_merkle.crypto.strategies import DEFAULT_HASH_STRATEGY, combine_hashes


class ProofDirection(str, Enum):
    """Direction indicator for proof path elements."""

    LEFT = "L"
    RIGHT = "R"


@dataclass
class ProofElement:
    """
    Single element in a Merkle proof path.

    Attributes:
        hash: The sibling hash at this level
        direction: RIGHT means append the sibling after the running hash,
            LEFT means prepend it
    """

    hash: bytes
    direction: ProofDirection

    def to_dict(self) -> dict[str, str]:
        """Serialize to dictionary."""
        return {"hash": self.hash.hex(), "direction": self.direction.value}

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> "ProofElement":
        """Deserialize from dictionary."""
        return cls(
            hash=bytes.fromhex(data["hash"]),
            direction=ProofDirection(data["direction"]),
        )


@dataclass
class MerkleProof:
    """
    Merkle inclusion proof for a content item.

    Attributes:
        leaf_hash: Content hash of the leaf being proven
        leaf_index: Position of the leaf in the tree's input order
        proof_path: Sibling hashes with directions, leaf level first
        root_hash: Merkle root the path should reproduce
        hash_strategy: Strategy used to combine nodes
    """

    leaf_hash: bytes
    leaf_index: int
    proof_path: list[ProofElement] = field(default_factory=list)
    root_hash: bytes = b""
    hash_strategy: str = DEFAULT_HASH_STRATEGY

    @property
    def sibling_hashes(self) -> list[bytes]:
        return [e.hash for e in self.proof_path]

    @property
    def directions(self) -> list[ProofDirection]:
        return [e.direction for e in self.proof_path]

    def to_dict(self) -> dict[str, Any]:
        """Serialize proof to dictionary with hex-encoded hashes."""
        return {
            "leaf_hash": self.leaf_hash.hex(),
            "leaf_index": self.leaf_index,
            "proof_path": [e.to_dict() for e in self.proof_path],
            "root_hash": self.root_hash.hex(),
            "hash_strategy": self.hash_strategy,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MerkleProof":
        """Deserialize proof from dictionary."""
        return cls(
            leaf_hash=bytes.fromhex(data["leaf_hash"]),
            leaf_index=data["leaf_index"],
            proof_path=[ProofElement.from_dict(e) for e in data["proof_path"]],
            root_hash=bytes.fromhex(data["root_hash"]),
            hash_strategy=data.get("hash_strategy", DEFAULT_HASH_STRATEGY),
        )


def compute_root_from_proof(
    leaf_hash: bytes,
    proof_path: list[ProofElement],
    hash_strategy: str = DEFAULT_HASH_STRATEGY,
) -> bytes:
    """
    Compute the root hash from a leaf and proof path.

    Args:
        leaf_hash: Content hash of the leaf
        proof_path: List of proof elements, leaf level first
        hash_strategy: Registered hash strategy name

    Returns:
        Computed root hash
    """
    current_hash = leaf_hash

    for element in proof_path:
        if element.direction == ProofDirection.LEFT:
            current_hash = combine_hashes(element.hash, current_hash, hash_strategy)
        else:
            current_hash = combine_hashes(current_hash, element.hash, hash_strategy)

    return current_hash


def verify_proof_against_root(
    leaf_hash: bytes,
    proof_path: list[ProofElement],
    expected_root: bytes,
    hash_strategy: str = DEFAULT_HASH_STRATEGY,
) -> bool:
    """Verify a proof path reconstructs a specific root hash."""
    return compute_root_from_proof(leaf_hash, proof_path, hash_strategy) == expected_root


def verify_proof(proof: MerkleProof) -> bool:
    """
    Verify a Merkle inclusion proof.

    Reconstructs the root hash from the leaf hash and proof path,
    then compares with the root recorded in the proof.
    """
    return verify_proof_against_root(
        proof.leaf_hash,
        proof.proof_path,
        proof.root_hash,
        proof.hash_strategy,
    )
