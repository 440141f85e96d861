"""Unit tests for hmac_entropy.config module."""

import logging

import pytest

from hmac_entropy.config import ALGORITHM_ENV_VAR, DEFAULT_ALGORITHM, StreamConfig
from hmac_entropy.crypto import UnsupportedAlgorithmError
from hmac_entropy.logging_config import setup_logging


class TestStreamConfig:
    """Test StreamConfig dataclass."""

    def test_default_config(self):
        """Test default stream configuration."""
        config = StreamConfig()
        assert config.algorithm == DEFAULT_ALGORITHM == "sha256"
        assert config.block_size == 32
        assert config.validate() == []

    def test_custom_config(self):
        """Test custom algorithm."""
        config = StreamConfig(algorithm="sha512")
        assert config.block_size == 64
        assert config.validate() == []

    def test_frozen(self):
        """Test configs are immutable."""
        config = StreamConfig()
        with pytest.raises(AttributeError):
            config.algorithm = "sha512"

    def test_validate_unknown_algorithm(self):
        """Test validation reports unknown algorithms."""
        errors = StreamConfig(algorithm="md5").validate()
        assert len(errors) == 1
        assert "sha256" in errors[0]

    def test_validate_empty_algorithm(self):
        """Test validation reports an empty algorithm."""
        assert StreamConfig(algorithm="").validate() == ["algorithm must not be empty"]

    def test_validate_non_string_algorithm(self):
        """Test validation reports a non-string algorithm instead of raising."""
        assert StreamConfig(algorithm=123).validate() == ["algorithm must be a string"]

    def test_block_size_unknown_algorithm(self):
        """Test block_size raises for unknown algorithms."""
        with pytest.raises(UnsupportedAlgorithmError):
            StreamConfig(algorithm="md5").block_size


class TestFromEnvironment:
    """Test environment-driven configuration."""

    def test_unset(self):
        """Test the default is used when the variable is unset."""
        assert StreamConfig.from_environment() == StreamConfig()

    def test_set(self, monkeypatch):
        """Test the variable overrides the algorithm."""
        monkeypatch.setenv(ALGORITHM_ENV_VAR, " sha384 ")
        assert StreamConfig.from_environment().algorithm == "sha384"

    def test_blank(self, monkeypatch):
        """Test a blank variable falls back to the default."""
        monkeypatch.setenv(ALGORITHM_ENV_VAR, "  ")
        assert StreamConfig.from_environment().algorithm == DEFAULT_ALGORITHM

    def test_custom_variable(self, monkeypatch):
        """Test reading a caller-chosen variable."""
        monkeypatch.setenv("MY_STREAM_ALG", "sha512")
        assert StreamConfig.from_environment("MY_STREAM_ALG").block_size == 64


class TestLogging:
    """Test logging setup and stream log records."""

    def test_setup_logging(self, monkeypatch):
        """Test setup_logging configures the root logger."""
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
        setup_logging(logging.DEBUG)
        assert calls["level"] == logging.DEBUG
        assert "%(name)s" in calls["format"]

    def test_stream_logs_counts_not_bytes(self, caplog):
        """Test produce logs lengths and never the output."""
        from hmac_entropy import Entropy

        with caplog.at_level(logging.DEBUG, logger="hmac_entropy.crypto.entropy"):
            out = Entropy(b"secret", b"salt").get_bytes(40)

        text = caplog.text
        assert "produced 40 bytes from 2 blocks (total computed 64)" in text
        assert out.hex() not in text
