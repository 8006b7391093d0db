"""Bit layout shared by the generators and the parser.

Layout (64 bits, most to least significant):
  - 1 bit: sign, always 0 for sane clocks
  - 41+ bits: milliseconds since the effective epoch
  - machine_id_bits: machine id
  - sequence_bits: per-millisecond sequence
"""

from dataclasses import dataclass

UINT64_MASK = (1 << 64) - 1


@dataclass(frozen=True)
class BitLayout:
    machine_id_bits: int
    sequence_bits: int
    machine_left: int
    timestamp_left: int
    max_machine_id: int
    max_sequence: int

    @classmethod
    def from_bits(cls, machine_id_bits: int, sequence_bits: int) -> "BitLayout":
        """Derive shifts and masks. A width of 0 gives a mask of 0."""
        machine_left = sequence_bits
        return cls(
            machine_id_bits=machine_id_bits,
            sequence_bits=sequence_bits,
            machine_left=machine_left,
            timestamp_left=machine_left + machine_id_bits,
            max_machine_id=(1 << machine_id_bits) - 1,
            max_sequence=(1 << sequence_bits) - 1,
        )

    def compose(self, timestamp_delta: int, machine_id: int, sequence: int) -> int:
        return (
            (timestamp_delta << self.timestamp_left)
            | (machine_id << self.machine_left)
            | sequence
        )
