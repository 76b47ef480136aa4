from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Dict, Optional

from .compiler import compile_blocks
from .machine import execute
from .state import DEFAULT_TAPE_LENGTH, TapePolicy


@dataclass(frozen=True)
class RunOptions:
    tape_length: int = DEFAULT_TAPE_LENGTH
    tape_policy: TapePolicy = TapePolicy.WRAPAROUND

    def __post_init__(self) -> None:
        if self.tape_length <= 0:
            raise ValueError(f"tape length must be positive, got {self.tape_length}")
        # accept the plain string values as well
        object.__setattr__(self, 'tape_policy', TapePolicy(self.tape_policy))


@dataclass(frozen=True)
class RunResult:
    output: bytes


LANGUAGES: Dict[str, RunOptions] = {
    'brainfuck': RunOptions(tape_length=65536, tape_policy=TapePolicy.WRAPAROUND),
    'bf': RunOptions(tape_length=65536, tape_policy=TapePolicy.WRAPAROUND),
    'brainfuck-checked': RunOptions(tape_length=30000, tape_policy=TapePolicy.BOUNDS_CHECKED),
}


def options_for(language: str) -> RunOptions:
    try:
        return LANGUAGES[language]
    except KeyError:
        known = ', '.join(sorted(LANGUAGES))
        raise KeyError(f"unknown language {language!r} (known: {known})") from None


def run(source: str, input: BinaryIO, output: BinaryIO, options: Optional[RunOptions] = None) -> None:
    """Compile and run `source`, reading from `input` and writing to `output`.

    Returns None on success; failures are raised as EsoboxError subclasses.
    Output written before a failure stays written.
    """
    opts = RunOptions() if options is None else options
    program = compile_blocks(source)
    execute(program, input, output, tape_length=opts.tape_length, tape_policy=opts.tape_policy)


def run_string(source: str, input_data: bytes = b"", *, options: Optional[RunOptions] = None) -> RunResult:
    out = io.BytesIO()
    run(source, io.BytesIO(input_data), out, options)
    return RunResult(output=out.getvalue())


def run_file(path: str | Path, input: BinaryIO, output: BinaryIO, *,
             options: Optional[RunOptions] = None, encoding: str = "utf-8") -> None:
    p = Path(path)
    run(p.read_text(encoding=encoding), input, output, options)
