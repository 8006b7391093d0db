"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Configuration (bit widths)
  2xxx: Machine identifier

All of these are raised at construction time only. Generating or parsing an
ID never raises.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# --- 1xxx: Configuration ---

class ConfigError(AppError):
    """The bit-width configuration is unusable."""


class IllegalBitWidthError(ConfigError):
    def __init__(self, machine_id_bits: int, sequence_bits: int) -> None:
        super().__init__(
            1001,
            "The sum of machineId bits and sequence greater than 22 bits "
            f"(machine_id_bits={machine_id_bits}, sequence_bits={sequence_bits})",
        )


class NegativeMachineBitsError(ConfigError):
    def __init__(self, machine_id_bits: int) -> None:
        super().__init__(1002, f"The machineId bits must be positive, got {machine_id_bits}")


class NegativeSequenceBitsError(ConfigError):
    def __init__(self, sequence_bits: int) -> None:
        super().__init__(1003, f"The sequence bits must be positive, got {sequence_bits}")


# --- 2xxx: Machine identifier ---

class MachineIdError(AppError):
    """The machine identifier does not fit the configured layout."""


class NegativeMachineIdError(MachineIdError):
    def __init__(self, machine_id: int) -> None:
        super().__init__(2001, f"machineId must not be negative, got {machine_id}")


class MachineIdTooLargeError(MachineIdError):
    def __init__(self, machine_id: int, max_machine_id: int) -> None:
        super().__init__(
            2002,
            f"machineId can't be greater than max machine id: {machine_id} > {max_machine_id}",
        )
        self.max_machine_id = max_machine_id
