from src.sf_common.errors import (
    IllegalBitWidthError,
    NegativeMachineBitsError,
    NegativeSequenceBitsError,
)
from src.sf_config.models import SnowflakeConfigProtocol

# 64 bits = 1 sign bit + 41 timestamp bits + machine id bits + sequence bits
MAX_FIELD_BITS = 22


def validate_config(config: SnowflakeConfigProtocol) -> None:
    """Raise a ConfigError (1001-1003) if the bit widths cannot form a 64-bit ID."""
    if config.machine_id_bits + config.sequence_bits > MAX_FIELD_BITS:
        raise IllegalBitWidthError(config.machine_id_bits, config.sequence_bits)
    if config.machine_id_bits < 0:
        raise NegativeMachineBitsError(config.machine_id_bits)
    if config.sequence_bits < 0:
        raise NegativeSequenceBitsError(config.sequence_bits)
