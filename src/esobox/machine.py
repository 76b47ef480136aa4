"""
Tape machine: executes a compiled Program against a tape of 8-bit cells.

`,` at end of input leaves the current cell unchanged. Cell arithmetic
always wraps modulo 256; the tape itself either wraps (a ring) or rejects
moves off either end, depending on the TapePolicy.
"""

from __future__ import annotations

import errno
import io
from typing import BinaryIO, Optional

from .compiler import Cmd, Program
from .errors import make_bounds_error, make_io_error
from .state import DEFAULT_TAPE_LENGTH, MachineState, TapePolicy


def getc(input: BinaryIO) -> Optional[int]:
    try:
        data = input.read(1)
    except OSError as exc:
        raise make_io_error(exc) from exc
    if not data:
        return None
    return data[0]


def putc(output: BinaryIO, byte: int) -> None:
    try:
        written = output.write(bytes((byte,)))
    except OSError as exc:
        raise make_io_error(exc) from exc
    # raw streams report a would-block write as None; plain sinks may return None
    if written == 0 or (written is None and isinstance(output, io.RawIOBase)):
        raise make_io_error(OSError(errno.EIO, "failed to write whole buffer"))


class TapeMachine:
    """Runs one Program to completion; every run starts from a zeroed tape."""

    def __init__(self, program: Program, *, tape_length: int = DEFAULT_TAPE_LENGTH,
                 tape_policy: TapePolicy = TapePolicy.WRAPAROUND):
        self.program = program
        self.policy = TapePolicy(tape_policy)
        self.state = MachineState(tape_length=tape_length)

    def run(self, input: BinaryIO, output: BinaryIO) -> None:
        """
        Execute until a halting edge is taken.

        Raises:
            PointerOutOfBounds: bounds-checked policy only, on a move off the tape.
            BrainfuckIOError: if reading the input or writing the output fails.
        """
        state = self.state
        state.reset()

        blocks = self.program.blocks
        memory = memoryview(state.tape)  # writes go through to state.tape
        mem_len = len(memory)
        wrap = self.policy is TapePolicy.WRAPAROUND
        ptr = 0
        bb_no = 0

        try:
            while True:
                bb = blocks[bb_no]
                for cmd in bb.instrs:
                    if cmd is Cmd.INC:
                        memory[ptr] = (memory[ptr] + 1) & 0xFF
                    elif cmd is Cmd.DEC:
                        memory[ptr] = (memory[ptr] - 1) & 0xFF
                    elif cmd is Cmd.RIGHT:
                        if ptr + 1 < mem_len:
                            ptr += 1
                        elif wrap:
                            ptr = 0
                        else:
                            raise make_bounds_error('>', tape_length=mem_len)
                    elif cmd is Cmd.LEFT:
                        if ptr > 0:
                            ptr -= 1
                        elif wrap:
                            ptr = mem_len - 1
                        else:
                            raise make_bounds_error('<', tape_length=mem_len)
                    elif cmd is Cmd.GETC:
                        byte = getc(input)
                        if byte is not None:
                            memory[ptr] = byte
                    elif cmd is Cmd.PUTC:
                        putc(output, memory[ptr])

                target = bb.jz if memory[ptr] == 0 else bb.jnz
                if target is None:
                    break
                bb_no = target
        finally:
            state.cursor = ptr
            state.block = bb_no


def execute(program: Program, input: BinaryIO, output: BinaryIO, *,
            tape_length: int = DEFAULT_TAPE_LENGTH,
            tape_policy: TapePolicy = TapePolicy.WRAPAROUND) -> MachineState:
    machine = TapeMachine(program, tape_length=tape_length, tape_policy=tape_policy)
    machine.run(input, output)
    return machine.state
