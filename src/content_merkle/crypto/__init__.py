"""
Content Merkle - Cryptographic Utilities

Provides Merkle tree construction, verification and inclusion proofs.
"""

from content_merkle.crypto.builder import build_tree
from content_merkle.crypto.content import BytesContent, Content, TextContent
from content_merkle.crypto.merkle import MerkleTree
from content_merkle.crypto.node import MerkleNode
from content_merkle.crypto.proof import (
    MerkleProof,
    ProofDirection,
    ProofElement,
    compute_root_from_proof,
    verify_proof,
    verify_proof_against_root,
)
from content_merkle.crypto.strategies import (
    DEFAULT_HASH_STRATEGY,
    available_strategies,
    combine_hashes,
    register_strategy,
    resolve_strategy,
)

__all__ = [
    "MerkleTree",
    "MerkleNode",
    "MerkleProof",
    "ProofDirection",
    "ProofElement",
    "Content",
    "BytesContent",
    "TextContent",
    "DEFAULT_HASH_STRATEGY",
    "available_strategies",
    "build_tree",
    "combine_hashes",
    "compute_root_from_proof",
    "register_strategy",
    "resolve_strategy",
    "verify_proof",
    "verify_proof_against_root",
]
