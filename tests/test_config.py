"""Tests for settings and logging setup."""

import json
import logging

import pytest
import structlog

from py_worldgen.config import Settings
from py_worldgen.core.random_source import RandomSource
from py_worldgen.utils.log import configure_logging


class TestSettings:
    """Test configuration defaults and overrides."""

    def test_defaults(self, monkeypatch):
        """Test the built in defaults."""
        for name in ("LOG_LEVEL", "PLANET_MAP_RESOLUTION", "CLOUD_FACE_SIZE", "DEFAULT_SEED"):
            monkeypatch.delenv(f"WORLDGEN_{name}", raising=False)
        config = Settings(_env_file=None)
        assert config.log_level == "INFO"
        assert config.log_format == "console"
        assert config.default_seed is None
        assert config.planet_map_resolution == 2048
        assert config.default_face_size == 24
        assert config.cloud_face_size == 48

    def test_environment_override(self, monkeypatch):
        """Test that prefixed environment variables override defaults."""
        monkeypatch.setenv("WORLDGEN_PLANET_MAP_RESOLUTION", "512")
        monkeypatch.setenv("WORLDGEN_LOG_LEVEL", "DEBUG")
        config = Settings(_env_file=None)
        assert config.planet_map_resolution == 512
        assert config.log_level == "DEBUG"

    def test_env_file(self, tmp_path, monkeypatch):
        """Test reading settings from a dotenv file."""
        monkeypatch.delenv("WORLDGEN_CLOUD_FACE_SIZE", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("WORLDGEN_CLOUD_FACE_SIZE=12\n")
        config = Settings(_env_file=env_file)
        assert config.cloud_face_size == 12

    def test_default_seed(self, monkeypatch):
        """Test that a configured seed makes unseeded sources repeatable."""
        from py_worldgen.config import settings

        monkeypatch.setattr(settings, "default_seed", "fixed")
        a = RandomSource()
        b = RandomSource()
        assert [a.d100() for _ in range(20)] == [b.d100() for _ in range(20)]


class TestLogging:
    """Test structured logging configuration."""

    @pytest.fixture(autouse=True)
    def reset_structlog(self):
        root = logging.getLogger()
        level = root.level
        yield
        structlog.reset_defaults()
        root.setLevel(level)

    def test_json_output(self, caplog):
        """Test that JSON logs carry the event and its fields."""
        configure_logging(level="INFO", fmt="json")
        structlog.get_logger("worldgen.test").info("Generated body", name="Terra", radius=6400)

        record = json.loads(caplog.records[-1].getMessage())
        assert record["event"] == "Generated body"
        assert record["name"] == "Terra"
        assert record["radius"] == 6400
        assert record["level"] == "info"

    def test_level_filtering(self, caplog):
        """Test that messages below the configured level are dropped."""
        configure_logging(level="WARNING", fmt="json")
        logger = structlog.get_logger("worldgen.test")
        logger.info("Hidden")
        logger.warning("Shown")

        assert "Hidden" not in caplog.text
        assert "Shown" in caplog.text
        assert logging.getLogger().level == logging.WARNING
