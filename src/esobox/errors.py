from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EsoboxError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class BrainfuckSyntaxError(EsoboxError):
    bracket: str


@dataclass
class PointerOutOfBounds(EsoboxError):
    direction: str
    tape_length: int


@dataclass
class BrainfuckIOError(EsoboxError):
    pass


def make_syntax_error(bracket: str) -> BrainfuckSyntaxError:
    return BrainfuckSyntaxError(message=f"unmatched bracket `{bracket}`", bracket=bracket)


def make_bounds_error(direction: str, *, tape_length: int) -> PointerOutOfBounds:
    side = 'left' if direction == '<' else 'right'
    return PointerOutOfBounds(
        message=f"pointer moved off the {side} end of the tape with `{direction}` (tape length {tape_length})",
        direction=direction,
        tape_length=tape_length,
    )


def make_io_error(exc: OSError) -> BrainfuckIOError:
    detail = exc.strerror or str(exc) or type(exc).__name__
    return BrainfuckIOError(message=f"unexpected I/O error: {detail}")
