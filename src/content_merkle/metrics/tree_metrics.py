"""
Content Merkle - Tree Metrics

Prometheus metrics for Merkle tree operations:
- Tree builds and rebuilds
- Whole-tree and content verification outcomes
- Inclusion proof generation
"""

import structlog
from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram

logger = structlog.get_logger(__name__)


class TreeMetrics:
    """Centralized metrics for Merkle tree operations."""

    def __init__(self, registry: CollectorRegistry = REGISTRY) -> None:
        """Initialize all tree metrics."""
        self._registry = registry
        self._init_build_metrics()
        self._init_verification_metrics()
        self._init_proof_metrics()

    def _init_build_metrics(self) -> None:
        """Initialize build metrics."""
        self.build_duration = Histogram(
            "content_merkle_build_duration_seconds",
            "Merkle tree build time",
            buckets=[0.0001, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
            registry=self._registry,
        )

        self.tree_size = Histogram(
            "content_merkle_tree_size",
            "Number of content items in a built Merkle tree",
            buckets=[1, 10, 50, 100, 500, 1000, 5000, 10000, 50000],
            registry=self._registry,
        )

        self.rebuilds = Counter(
            "content_merkle_rebuilds_total",
            "Merkle tree rebuilds",
            ["result"],
            registry=self._registry,
        )

    def _init_verification_metrics(self) -> None:
        """Initialize verification metrics."""
        self.verifications = Counter(
            "content_merkle_verifications_total",
            "Merkle tree verifications",
            ["kind", "result"],
            registry=self._registry,
        )

    def _init_proof_metrics(self) -> None:
        """Initialize proof generation metrics."""
        self.proof_generation = Histogram(
            "content_merkle_proof_duration_seconds",
            "Merkle path generation time",
            buckets=[0.00001, 0.0001, 0.0005, 0.001, 0.005, 0.01],
            registry=self._registry,
        )

    # Convenience methods

    def record_build(self, duration: float, tree_size: int) -> None:
        """Record Merkle tree build."""
        self.build_duration.observe(duration)
        self.tree_size.observe(tree_size)

    def record_rebuild(self, success: bool) -> None:
        """Record Merkle tree rebuild outcome."""
        result = "success" if success else "failed"
        self.rebuilds.labels(result=result).inc()

    def record_verification(self, kind: str, valid: bool) -> None:
        """Record a verify_tree or verify_content outcome."""
        result = "valid" if valid else "invalid"
        self.verifications.labels(kind=kind, result=result).inc()

    def record_proof(self, duration: float) -> None:
        """Record Merkle path generation."""
        self.proof_generation.observe(duration)


# Singleton instance
_tree_metrics: TreeMetrics | None = None


def get_tree_metrics() -> TreeMetrics:
    """Get global tree metrics instance."""
    global _tree_metrics
    if _tree_metrics is None:
        _tree_metrics = TreeMetrics()
        logger.debug("Tree metrics initialized")
    return _tree_metrics
