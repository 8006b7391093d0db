"""Decode Snowflake IDs back into their fields."""

import logging
from dataclasses import dataclass

from src.sf_codec.layout import UINT64_MASK, BitLayout
from src.sf_config.models import SnowflakeConfigProtocol
from src.sf_config.validator import validate_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedId:
    machine_id: int
    sequence: int
    timestamp: int  # absolute ms since the Unix epoch
    timestamp_delta: int  # raw field: ms since the generator's epoch


class IdParser:
    """Stateless inverse of the generators' bit packing.

    include_offset selects the epoch added back to the timestamp field:
    epoch_start + epoch_offset (ConcurrentGenerator) or epoch_start alone
    (SequentialGenerator).
    """

    def __init__(self, config: SnowflakeConfigProtocol, *, include_offset: bool = True) -> None:
        validate_config(config)
        self.layout = BitLayout.from_bits(config.machine_id_bits, config.sequence_bits)
        self.epoch = config.epoch_start + (config.epoch_offset if include_offset else 0)
        logger.info(
            "IdParser ready: machine_bits=%d, sequence_bits=%d, epoch=%d",
            self.layout.machine_id_bits,
            self.layout.sequence_bits,
            self.epoch,
        )

    def parse(self, id_: int) -> ParsedId:
        """Split any 64-bit value into its fields; no plausibility checks."""
        raw = id_ & UINT64_MASK
        delta = raw >> self.layout.timestamp_left
        return ParsedId(
            machine_id=(raw >> self.layout.machine_left) & self.layout.max_machine_id,
            sequence=raw & self.layout.max_sequence,
            timestamp=delta + self.epoch,
            timestamp_delta=delta,
        )
