"""
Pytest configuration and shared fixtures for Merkle tree tests.
"""

import hashlib
from typing import Any

import pytest

from content_merkle.core.errors import CompareError, HashError
from content_merkle.crypto.content import TextContent


class FlakyContent:
    """Content whose hashing or comparison can be switched to fail."""

    def __init__(self, value: str) -> None:
        self.value = value
        self.fail_hash = False
        self.fail_equals = False

    def calculate_hash(self) -> bytes:
        if self.fail_hash:
            raise HashError(f"cannot hash {self.value}")
        return hashlib.sha256(self.value.encode("utf-8")).digest()

    def equals(self, other: Any) -> bool:
        if self.fail_equals:
            raise CompareError(0, other)
        return isinstance(other, FlakyContent) and other.value == self.value

    def __repr__(self) -> str:
        return f"FlakyContent({self.value!r})"


@pytest.fixture
def greetings() -> list[TextContent]:
    """The four-item greeting sequence."""
    return [TextContent(v) for v in ("Hello", "Hi", "Hey", "Hola")]


@pytest.fixture
def odd_greetings() -> list[TextContent]:
    """Three items, forcing a duplicate leaf."""
    return [TextContent(v) for v in ("Hello", "Hi", "Hey")]


@pytest.fixture
def flaky_contents() -> list[FlakyContent]:
    return [FlakyContent(v) for v in ("a", "b", "c", "d")]
