"""Configuration record for the ID layout: a pure dataclass, validation lives in validator.py."""

from dataclasses import dataclass
from typing import Protocol

DEFAULT_EPOCH_START_MS = 1_735_689_600_000  # 2025-01-01T00:00:00.000Z


class SnowflakeConfigProtocol(Protocol):
    """Shape of any host-supplied configuration object."""

    @property
    def epoch_start(self) -> int: ...

    @property
    def epoch_offset(self) -> int: ...

    @property
    def machine_id_bits(self) -> int: ...

    @property
    def sequence_bits(self) -> int: ...


@dataclass(frozen=True)
class SnowflakeConfig:
    epoch_start: int = DEFAULT_EPOCH_START_MS  # ms
    epoch_offset: int = 0  # ms, added to epoch_start by the thread-safe generator
    machine_id_bits: int = 10  # max machine id 1023
    sequence_bits: int = 12  # max 4096 ids per ms
