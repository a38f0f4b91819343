"""
Unit tests for settings and logging setup.
"""

import logging

import pytest
import structlog
from pydantic import ValidationError
from structlog.testing import capture_logs

from content_merkle.core.config import Settings
from content_merkle.core.errors import EmptyInputError
from content_merkle.core.logging import LIBRARY_LOGGER, setup_logging
from content_merkle.crypto.content import TextContent
from content_merkle.crypto.merkle import MerkleTree


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("CONTENT_MERKLE_DEFAULT_HASH_STRATEGY", raising=False)
        monkeypatch.delenv("CONTENT_MERKLE_METRICS_ENABLED", raising=False)
        monkeypatch.delenv("CONTENT_MERKLE_ENV", raising=False)
        config = Settings(_env_file=None)

        assert config.DEFAULT_HASH_STRATEGY == "sha256"
        assert config.METRICS_ENABLED is True
        assert config.ENV == "development"

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("CONTENT_MERKLE_DEFAULT_HASH_STRATEGY", "sha512")
        monkeypatch.setenv("CONTENT_MERKLE_METRICS_ENABLED", "false")

        config = Settings(_env_file=None)

        assert config.DEFAULT_HASH_STRATEGY == "sha512"
        assert config.METRICS_ENABLED is False

    def test_log_level_normalized(self) -> None:
        assert Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError, match="LOG_LEVEL"):
            Settings(_env_file=None, LOG_LEVEL="verbose")


class TestLogging:
    def test_setup_logging(self, monkeypatch) -> None:
        from content_merkle.core.config import settings

        monkeypatch.setattr(settings, "ENV", "production")
        try:
            setup_logging()
            assert structlog.is_configured()
        finally:
            structlog.reset_defaults()

    def test_setup_logging_level_override(self) -> None:
        library_logger = logging.getLogger(LIBRARY_LOGGER)
        previous = library_logger.level
        try:
            setup_logging("warning")
            assert library_logger.level == logging.WARNING
        finally:
            structlog.reset_defaults()
            library_logger.setLevel(previous)

    def test_setup_logging_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="verbose"):
            setup_logging("verbose")

    def test_library_logger_has_null_handler(self) -> None:
        handlers = logging.getLogger(LIBRARY_LOGGER).handlers

        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_failed_rebuild_logged(self) -> None:
        tree = MerkleTree([TextContent("a")])

        with capture_logs() as logs:
            try:
                tree.rebuild_with([])
            except EmptyInputError:
                pass

        events = [entry for entry in logs if entry["event"] == "Merkle tree rebuild failed"]
        assert len(events) == 1
        assert events[0]["log_level"] == "warning"

    def test_build_logged(self) -> None:
        with capture_logs() as logs:
            tree = MerkleTree([TextContent("a"), TextContent("b")])

        built = [entry for entry in logs if entry["event"] == "Built Merkle tree"]
        assert built[-1]["root"] == tree.hex_root
        assert built[-1]["leaf_count"] == 2
