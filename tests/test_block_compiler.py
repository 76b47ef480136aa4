#!/usr/bin/env python3
"""
Tests for compiling Brainfuck source into basic blocks.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from dataclasses import FrozenInstanceError

import pytest

from esobox import BasicBlock, BrainfuckSyntaxError, Cmd, compile_blocks


def test_empty_source_is_one_terminal_block():
    program = compile_blocks("")
    assert len(program) == 1
    assert program.entry.instrs == ()
    assert program.entry.is_terminal


def test_comments_are_ignored():
    program = compile_blocks("hello world, no wait: that comma counts")
    assert len(program) == 1
    assert program.entry.instrs == (Cmd.GETC,)


def test_comment_only_source():
    program = compile_blocks("this is only a comment\n")
    assert len(program) == 1
    assert program.entry.is_terminal
    assert program.instruction_count() == 0


def test_straight_line_code_stays_in_one_block():
    program = compile_blocks("+-<>,.")
    assert len(program) == 1
    assert program.entry.instrs == (Cmd.INC, Cmd.DEC, Cmd.LEFT, Cmd.RIGHT, Cmd.GETC, Cmd.PUTC)


def test_single_loop_edges():
    program = compile_blocks("+[-].")
    assert program.blocks == [
        BasicBlock((Cmd.INC,), jz=2, jnz=1),
        BasicBlock((Cmd.DEC,), jz=2, jnz=1),
        BasicBlock((Cmd.PUTC,), jz=None, jnz=None),
    ]


def test_nested_loop_edges():
    program = compile_blocks("[>[+]<]")
    assert [(bb.jz, bb.jnz) for bb in program] == [
        (4, 1),  # before outer `[`
        (3, 2),  # before inner `[`
        (3, 2),  # inner body, at inner `]`
        (4, 1),  # rest of outer body, at outer `]`
        (None, None),
    ]
    assert program[2].instrs == (Cmd.INC,)
    assert program[3].instrs == (Cmd.LEFT,)


def test_sequential_loops():
    program = compile_blocks("[-]>[-]")
    assert [(bb.jz, bb.jnz) for bb in program] == [(2, 1), (2, 1), (4, 3), (4, 3), (None, None)]


def test_branch_targets_are_valid_indices():
    program = compile_blocks("++[>+++++<-]++[>>>+++++<<<-]++++++[>>+++++++<<-]>[>..........>.<<-]")
    for bb in program:
        for target in (bb.jz, bb.jnz):
            assert target is None or 0 <= target < len(program)
    assert program.blocks[-1].is_terminal
    assert sum(bb.is_terminal for bb in program) == 1


def test_unmatched_open_bracket():
    for source in ["[", "+[", "[[]", "[]["]:
        with pytest.raises(BrainfuckSyntaxError) as info:
            compile_blocks(source)
        assert info.value.bracket == '['
        assert str(info.value) == "unmatched bracket `[`"


def test_unmatched_close_bracket():
    for source in ["]", "+]", "[]]", "]["]:
        with pytest.raises(BrainfuckSyntaxError) as info:
            compile_blocks(source)
        assert info.value.bracket == ']'
        assert str(info.value) == "unmatched bracket `]`"


def test_brackets_inside_comments_still_count():
    with pytest.raises(BrainfuckSyntaxError):
        compile_blocks("this [is] a comment ]")


def test_blocks_are_frozen_after_compilation():
    program = compile_blocks("+[-]")
    with pytest.raises(FrozenInstanceError):
        program.entry.jz = None
    assert program.entry.jz == 2
