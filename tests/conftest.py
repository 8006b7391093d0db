"""Shared test fixtures."""

from collections.abc import Iterator

import pytest

from src.sf_common.clock import ManualClock
from src.sf_config.models import DEFAULT_EPOCH_START_MS, SnowflakeConfig
from src.sf_generator.factory import reset_default_generator


@pytest.fixture
def clock() -> ManualClock:
    """Clock frozen one second after the default epoch."""
    return ManualClock(DEFAULT_EPOCH_START_MS + 1_000)


@pytest.fixture
def config() -> SnowflakeConfig:
    """Default layout: 10 machine bits, 12 sequence bits, 2025-01-01 epoch."""
    return SnowflakeConfig()


@pytest.fixture(autouse=True)
def _fresh_default_generator() -> Iterator[None]:
    reset_default_generator()
    yield
    reset_default_generator()
