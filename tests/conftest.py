"""Test configuration for hmac_entropy package."""

import pytest

from hmac_entropy.config import ALGORITHM_ENV_VAR


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep a developer's HMAC_ENTROPY_ALGORITHM from leaking into tests."""
    monkeypatch.delenv(ALGORITHM_ENV_VAR, raising=False)


@pytest.fixture
def zero_secret() -> bytes:
    """Provide a 64-byte all-zero secret."""
    return bytes(64)


@pytest.fixture
def salt() -> bytes:
    """Provide a sample salt."""
    return b"Hello World"


@pytest.fixture
def stream(zero_secret, salt):
    """Provide a fresh default stream."""
    from hmac_entropy.crypto import Entropy
    return Entropy(zero_secret, salt)
