"""
Content Merkle

Merkle trees over caller-defined content items.
"""

from content_merkle.core.errors import (
    BuildError,
    CompareError,
    ContentHashError,
    EmptyInputError,
    HashError,
    LeafHashError,
    MerkleTreeError,
    UnknownStrategyError,
    VerifyError,
)
from content_merkle.crypto import (
    BytesContent,
    Content,
    MerkleNode,
    MerkleProof,
    MerkleTree,
    ProofDirection,
    ProofElement,
    TextContent,
    available_strategies,
    compute_root_from_proof,
    register_strategy,
    resolve_strategy,
    verify_proof,
    verify_proof_against_root,
)

__version__ = "1.0.0"

__all__ = [
    "MerkleTree",
    "MerkleNode",
    "MerkleProof",
    "ProofDirection",
    "ProofElement",
    "Content",
    "BytesContent",
    "TextContent",
    "available_strategies",
    "compute_root_from_proof",
    "register_strategy",
    "resolve_strategy",
    "verify_proof",
    "verify_proof_against_root",
    "MerkleTreeError",
    "HashError",
    "BuildError",
    "EmptyInputError",
    "LeafHashError",
    "UnknownStrategyError",
    "VerifyError",
    "ContentHashError",
    "CompareError",
]
