from __future__ import annotations

from typing import Iterable, List, Optional

from .compiler import Cmd, Program


def format_instrs(instrs: Iterable[Cmd]) -> str:
    return "".join(cmd.value for cmd in instrs)


def _target(t: Optional[int]) -> str:
    return "halt" if t is None else f"bb{t}"


def format_program(program: Program) -> str:
    """One line per block: `bb<N>: <instrs> | jz=<target> jnz=<target>`."""
    width = len(str(max(len(program) - 1, 0)))
    out: List[str] = []
    for i, bb in enumerate(program):
        label = f"bb{i:<{width}d}"
        out.append(f"{label}: {format_instrs(bb.instrs)} | jz={_target(bb.jz)} jnz={_target(bb.jnz)}")
    return "\n".join(out)


def count_static_ops(program: Program) -> int:
    """Command characters in the source: leaf instructions plus one per bracket."""
    # every block except the last was sealed by exactly one bracket
    return program.instruction_count() + len(program) - 1
