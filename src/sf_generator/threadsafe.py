"""Thread-safe Snowflake generator.

The lock only guards the decision whether to keep or replace the current
tick; the ID itself is composed outside of it.
"""

import itertools
import logging
import threading

from src.sf_common.clock import Clock, current_millis
from src.sf_config.models import SnowflakeConfigProtocol
from src.sf_generator.base import build_layout

logger = logging.getLogger(__name__)


class _Tick:
    """A millisecond together with its sequence counter.

    Replaced as a whole when time moves on; only the counter is advanced in place.
    """

    __slots__ = ("timestamp", "sequence", "_counter")

    def __init__(self, timestamp: int) -> None:
        self.timestamp = timestamp
        self.sequence = 0
        # count.__next__ is a single C call, atomic under the GIL
        self._counter = itertools.count(1)

    def increment(self) -> int:
        self.sequence = next(self._counter)
        return self.sequence


class ConcurrentGenerator:
    """Snowflake generator safe to share between threads.

    Same layout and forward-drift policy as SequentialGenerator, but the
    effective epoch is epoch_start + epoch_offset.
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
        self.effective_epoch = config.epoch_start + config.epoch_offset
        self._clock = clock
        self._tick: _Tick | None = None
        self._lock = threading.Lock()
        logger.info(
            "ConcurrentGenerator ready: machine_id=%d, machine_bits=%d, sequence_bits=%d, epoch=%d",
            machine_id,
            self.layout.machine_id_bits,
            self.layout.sequence_bits,
            self.effective_epoch,
        )

    def next_id(self) -> int:
        now = self._clock()

        with self._lock:
            tick = self._tick
            if tick is None or tick.timestamp < now:
                tick = self._tick = _Tick(now)
                seq = 0
            elif tick.sequence < self.layout.max_sequence:
                seq = tick.increment()
            else:
                tick = self._tick = _Tick(tick.timestamp + 1)
                seq = 0
                logger.debug("Sequence exhausted, logical clock advanced to %d", tick.timestamp)
            ts = tick.timestamp

        return self.layout.compose(ts - self.effective_epoch, self.machine_id, seq)
