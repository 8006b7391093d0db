"""Generator construction helpers and the process-wide default generator.

The default generator is built lazily from config.settings on first use.
Everything else in this package can be constructed independently.
"""

import logging
import threading

from config.settings import Settings, settings
from src.sf_common.clock import Clock, current_millis
from src.sf_config.models import SnowflakeConfig, SnowflakeConfigProtocol
from src.sf_generator.base import IdGenerator
from src.sf_generator.sequential import SequentialGenerator
from src.sf_generator.threadsafe import ConcurrentGenerator

logger = logging.getLogger(__name__)

_default_generator: IdGenerator | None = None
_default_lock = threading.Lock()


def config_from_settings(source: Settings) -> SnowflakeConfig:
    return SnowflakeConfig(
        epoch_start=source.SNOWFLAKE_EPOCH_START_MS,
        epoch_offset=source.SNOWFLAKE_EPOCH_OFFSET_MS,
        machine_id_bits=source.SNOWFLAKE_MACHINE_ID_BITS,
        sequence_bits=source.SNOWFLAKE_SEQUENCE_BITS,
    )


def create_generator(
    config: SnowflakeConfigProtocol,
    machine_id: int,
    *,
    thread_safe: bool = True,
    clock: Clock = current_millis,
) -> IdGenerator:
    """Pick the variant matching the caller's threading model."""
    if thread_safe:
        return ConcurrentGenerator(config, machine_id, clock=clock)
    return SequentialGenerator(config, machine_id, clock=clock)


def get_default_generator() -> IdGenerator:
    """Get or create the thread-safe generator configured by settings."""
    global _default_generator  # noqa: PLW0603
    with _default_lock:
        if _default_generator is None:
            logger.debug("Building default generator from settings")
            _default_generator = create_generator(
                config_from_settings(settings), settings.SNOWFLAKE_MACHINE_ID
            )
        return _default_generator


def reset_default_generator() -> None:
    """Drop the default generator; the next call rebuilds it from settings."""
    global _default_generator  # noqa: PLW0603
    with _default_lock:
        _default_generator = None


def generate_id() -> int:
    """Generate a unique Snowflake ID using the default generator."""
    return get_default_generator().next_id()
