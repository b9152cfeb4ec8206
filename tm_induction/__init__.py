"""
Solomonoff induction over two-symbol Turing machines

This module approximates Solomonoff induction by enumerating every complete
Turing-machine instruction table, running each as a weighted hypothesis, and
conditioning the resulting mixture on observed outputs.
"""

from .choices import ChoiceEnumerator
from .machine import (
    Move, InstructionSelector, InstructionResult, TuringMachine,
    HALT_STATE, HALT_RESULT, make_table, encode_input
)
from .tables import (
    InstructionTableEnumerator, input_space, output_space,
    tables_of_size, count_tables_of_size
)
from .frontier import PriorityFrontier
from .hypothesis import Hypothesis
from .inductor import Inductor, UNRESOLVED, DEFAULT_BASE, DEFAULT_STEP_BATCH, powers
from .formatting import table_to_text, machine_repr, format_prediction
from .session import run_session, run_session_with_callback, SessionResult

__all__ = [
    'ChoiceEnumerator',
    'Move',
    'InstructionSelector',
    'InstructionResult',
    'TuringMachine',
    'HALT_STATE',
    'HALT_RESULT',
    'make_table',
    'encode_input',
    'InstructionTableEnumerator',
    'input_space',
    'output_space',
    'tables_of_size',
    'count_tables_of_size',
    'PriorityFrontier',
    'Hypothesis',
    'Inductor',
    'UNRESOLVED',
    'DEFAULT_BASE',
    'DEFAULT_STEP_BATCH',
    'powers',
    'table_to_text',
    'machine_repr',
    'format_prediction',
    'run_session',
    'run_session_with_callback',
    'SessionResult',
]
