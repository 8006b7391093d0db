"""Single-threaded Snowflake generator.

Not thread-safe: calling next_id() from several threads at once may emit
duplicates. Use ConcurrentGenerator for shared instances.
"""

import logging

from src.sf_common.clock import Clock, current_millis
from src.sf_config.models import SnowflakeConfigProtocol
from src.sf_generator.base import build_layout

logger = logging.getLogger(__name__)


class SequentialGenerator:
    """Snowflake generator without internal locking.

    When the sequence space of a millisecond is exhausted the generator moves
    its own timestamp one millisecond ahead instead of waiting for the clock.
    The logical clock may therefore run ahead of real time after a burst and
    resynchronises once real time catches up.
    """

    def __init__(
        self,
        config: SnowflakeConfigProtocol,
        machine_id: int,
        *,
        clock: Clock = current_millis,
    ) -> None:
        self.layout = build_layout(config, machine_id)
        self.machine_id = machine_id
        # epoch_offset is not applied here; see ConcurrentGenerator
        self.effective_epoch = config.epoch_start
        self._clock = clock
        self._timestamp = 0
        self._sequence = 0
        logger.info(
            "SequentialGenerator ready: machine_id=%d, machine_bits=%d, sequence_bits=%d, epoch=%d",
            machine_id,
            self.layout.machine_id_bits,
            self.layout.sequence_bits,
            self.effective_epoch,
        )

    def next_id(self) -> int:
        now = self._clock()

        if self._timestamp < now:
            self._timestamp = now
        elif self._sequence < self.layout.max_sequence:
            self._sequence += 1
        else:
            self._timestamp += 1
            self._sequence = 0
            logger.debug("Sequence exhausted, logical clock advanced to %d", self._timestamp)

        return self.layout.compose(
            self._timestamp - self.effective_epoch, self.machine_id, self._sequence
        )
