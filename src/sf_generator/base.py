"""IdGenerator Protocol and the construction checks both variants share."""

from typing import Protocol

from src.sf_codec.layout import BitLayout
from src.sf_common.errors import MachineIdTooLargeError, NegativeMachineIdError
from src.sf_config.models import SnowflakeConfigProtocol
from src.sf_config.validator import validate_config


class IdGenerator(Protocol):
    machine_id: int
    layout: BitLayout
    effective_epoch: int

    def next_id(self) -> int: ...


def build_layout(config: SnowflakeConfigProtocol, machine_id: int) -> BitLayout:
    """Validate config + machine id and return the derived layout.

    Raises ConfigError (1xxx) or MachineIdError (2xxx); nothing is built on failure.
    """
    validate_config(config)
    layout = BitLayout.from_bits(config.machine_id_bits, config.sequence_bits)
    if machine_id < 0:
        raise NegativeMachineIdError(machine_id)
    if machine_id > layout.max_machine_id:
        raise MachineIdTooLargeError(machine_id, layout.max_machine_id)
    return layout
