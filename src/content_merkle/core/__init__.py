"""
Content Merkle - Core

Configuration, logging setup and exceptions.
"""

from content_merkle.core.config import Settings, get_settings, settings
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
from content_merkle.core.logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "setup_logging",
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
