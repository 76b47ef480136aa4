"""
Block compiler: Brainfuck source text -> basic blocks.

Brackets never survive compilation. Each `[` ends a block whose jnz edge
enters the loop body, each `]` ends a block whose jnz edge jumps back to the
start of the body, and both get a jz edge to the block after the loop. The
machine therefore tests the current cell once per block instead of scanning
for the matching bracket.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import make_syntax_error


class Cmd(Enum):
    INC = '+'
    DEC = '-'
    LEFT = '<'
    RIGHT = '>'
    GETC = ','
    PUTC = '.'


_COMMANDS: Dict[str, Cmd] = {cmd.value: cmd for cmd in Cmd}


@dataclass(frozen=True)
class BasicBlock:
    instrs: Tuple[Cmd, ...]
    jz: Optional[int] = None   # taken when the current cell is zero; None halts
    jnz: Optional[int] = None  # taken otherwise; None halts

    @property
    def is_terminal(self) -> bool:
        return self.jz is None and self.jnz is None


@dataclass
class Program:
    blocks: List[BasicBlock] = field(default_factory=list)

    @property
    def entry(self) -> BasicBlock:
        return self.blocks[0]

    def __len__(self) -> int:
        return len(self.blocks)

    def __getitem__(self, index: int) -> BasicBlock:
        return self.blocks[index]

    def __iter__(self) -> Iterator[BasicBlock]:
        return iter(self.blocks)

    def instruction_count(self) -> int:
        return sum(len(bb.instrs) for bb in self.blocks)


def compile_blocks(source: str) -> Program:
    """
    Compile Brainfuck source into a Program.

    Raises:
        BrainfuckSyntaxError: on an unmatched `[` or `]`.
    """
    blocks: List[BasicBlock] = []
    pending: List[int] = []  # indices of blocks sealed by `[`
    current: List[Cmd] = []

    for ch in source:
        cmd = _COMMANDS.get(ch)
        if cmd is not None:
            current.append(cmd)
        elif ch == '[':
            n = len(blocks)
            blocks.append(BasicBlock(tuple(current), jz=None, jnz=n + 1))
            pending.append(n)
            current = []
        elif ch == ']':
            if not pending:
                raise make_syntax_error(']')
            opened = pending.pop()
            n = len(blocks)
            blocks.append(BasicBlock(tuple(current), jz=n + 1, jnz=opened + 1))
            blocks[opened] = replace(blocks[opened], jz=n + 1)
            current = []

    if pending:
        raise make_syntax_error('[')

    blocks.append(BasicBlock(tuple(current)))
    return Program(blocks)
