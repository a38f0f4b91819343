"""
Content Merkle - Metrics Module

Prometheus metrics for Merkle tree builds, verification and proofs.
"""

from content_merkle.metrics.tree_metrics import (
    TreeMetrics,
    get_tree_metrics,
)

__all__ = [
    "TreeMetrics",
    "get_tree_metrics",
]
