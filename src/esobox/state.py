from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import numpy as np


class TapePolicy(str, Enum):
    WRAPAROUND = 'wraparound'
    BOUNDS_CHECKED = 'bounds_checked'


DEFAULT_TAPE_LENGTH = 65536


@dataclass
class MachineState:
    tape_length: int = DEFAULT_TAPE_LENGTH
    tape: np.ndarray = field(init=False, repr=False)
    cursor: int = 0
    block: int = 0

    def __post_init__(self) -> None:
        if self.tape_length <= 0:
            raise ValueError(f"tape length must be positive, got {self.tape_length}")
        self.tape = np.zeros(self.tape_length, dtype=np.uint8)

    @property
    def cell(self) -> int:
        return int(self.tape[self.cursor])

    def reset(self) -> None:
        self.tape.fill(0)
        self.cursor = 0
        self.block = 0
