"""
Tests for settings loading and logging configuration.
"""

import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from ketab_protocol.config import KetabSettings, configure_logging, load_settings
from ketab_protocol.exceptions import ValidationError
from ketab_protocol.kinds import PROTOCOL_VERSION


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("KETAB_NSEC", "KETAB_LOG_LEVEL", "KETAB_PROTOCOL_VERSION"):
        monkeypatch.delenv(name, raising=False)


class TestKetabSettings:
    """Tests for KetabSettings."""

    def test_defaults(self):
        """Test default settings."""
        settings = KetabSettings()
        assert settings.nsec is None
        assert settings.log_level == "INFO"
        assert settings.protocol_version == PROTOCOL_VERSION

    def test_log_level_normalized(self):
        """Test log level is uppercased."""
        assert KetabSettings(log_level=" debug ").log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(PydanticValidationError):
            KetabSettings(log_level="chatty")

    def test_empty_protocol_version(self):
        """Test protocol version cannot be blank."""
        with pytest.raises(PydanticValidationError):
            KetabSettings(protocol_version="  ")

    def test_secret_key_missing(self):
        """Test asking for a key that is not configured."""
        with pytest.raises(ValidationError) as exc_info:
            KetabSettings().secret_key()
        assert exc_info.value.field == "nsec"

    def test_secret_key_from_hex(self, author_secret_key):
        """Test a hex key is returned as bytes."""
        settings = KetabSettings(nsec=author_secret_key.hex())
        assert settings.secret_key() == author_secret_key


class TestLoadSettings:
    """Tests for load_settings."""

    def test_reads_environment(self, monkeypatch, librarian_secret_key):
        """Test KETAB_* variables are picked up."""
        monkeypatch.setenv("KETAB_NSEC", librarian_secret_key.hex())
        monkeypatch.setenv("KETAB_LOG_LEVEL", "warning")
        monkeypatch.setenv("KETAB_PROTOCOL_VERSION", "0.2.0")

        settings = load_settings()

        assert settings.secret_key() == librarian_secret_key
        assert settings.log_level == "WARNING"
        assert settings.protocol_version == "0.2.0"

    def test_empty_variables_ignored(self, monkeypatch):
        """Test empty variables fall back to defaults."""
        monkeypatch.setenv("KETAB_LOG_LEVEL", "")
        assert load_settings().log_level == "INFO"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_package_logger_level(self):
        """Test the ketab-protocol logger follows the configured level."""
        logger = logging.getLogger("ketab-protocol")
        previous = logger.level
        try:
            configure_logging(KetabSettings(log_level="DEBUG"))
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)
