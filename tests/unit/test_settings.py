"""Tests for config.settings and the settings -> config bridge."""

import pytest

from config.settings import Settings
from src.sf_config.models import DEFAULT_EPOCH_START_MS, SnowflakeConfig
from src.sf_generator.factory import config_from_settings


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings(_env_file=None)
        assert s.SNOWFLAKE_EPOCH_START_MS == DEFAULT_EPOCH_START_MS
        assert s.SNOWFLAKE_EPOCH_OFFSET_MS == 0
        assert s.SNOWFLAKE_MACHINE_ID_BITS == 10
        assert s.SNOWFLAKE_SEQUENCE_BITS == 12
        assert s.SNOWFLAKE_MACHINE_ID == 0

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SNOWFLAKE_MACHINE_ID", "7")
        monkeypatch.setenv("SNOWFLAKE_SEQUENCE_BITS", "8")
        s = Settings(_env_file=None)
        assert s.SNOWFLAKE_MACHINE_ID == 7
        assert s.SNOWFLAKE_SEQUENCE_BITS == 8


class TestConfigFromSettings:
    def test_maps_all_fields(self) -> None:
        s = Settings(
            _env_file=None,
            SNOWFLAKE_EPOCH_START_MS=10,
            SNOWFLAKE_EPOCH_OFFSET_MS=20,
            SNOWFLAKE_MACHINE_ID_BITS=5,
            SNOWFLAKE_SEQUENCE_BITS=6,
        )
        assert config_from_settings(s) == SnowflakeConfig(
            epoch_start=10, epoch_offset=20, machine_id_bits=5, sequence_bits=6
        )
