from .api import LANGUAGES, RunOptions, RunResult, options_for, run, run_file, run_string
from .compiler import BasicBlock, Cmd, Program, compile_blocks
from .errors import BrainfuckIOError, BrainfuckSyntaxError, EsoboxError, PointerOutOfBounds
from .machine import TapeMachine, execute
from .state import MachineState, TapePolicy

__all__ = [
    'LANGUAGES',
    'RunOptions',
    'RunResult',
    'options_for',
    'run',
    'run_file',
    'run_string',
    'BasicBlock',
    'Cmd',
    'Program',
    'compile_blocks',
    'EsoboxError',
    'BrainfuckSyntaxError',
    'PointerOutOfBounds',
    'BrainfuckIOError',
    'TapeMachine',
    'execute',
    'MachineState',
    'TapePolicy',
]
