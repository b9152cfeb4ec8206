"""
Instruction table enumeration.

Generates every complete instruction table, ordered by state count and then
by choice order within a state count, in the same way that hypothesis
generation walks depths one at a time.
"""

from itertools import count
from typing import Iterator, List, Optional, Tuple

from pyrsistent import pmap

from .choices import ChoiceEnumerator
from .machine import (
    BITS, MOVES, HALT_RESULT,
    InstructionSelector, InstructionResult, InstructionTable
)


def input_space(state_count: int) -> List[InstructionSelector]:
    """All selectors of a machine with `state_count` states"""
    return [InstructionSelector(state, bit)
            for state in range(state_count)
            for bit in BITS]


def output_space(state_count: int) -> List[InstructionResult]:
    """
    All results a selector can map to: the halt result first, then every
    (next state, bit, move) triple.
    """
    outputs = [HALT_RESULT]
    for state in range(state_count):
        for bit in BITS:
            for move in MOVES:
                outputs.append(InstructionResult(next_state=state, bit=bit, move=move))
    return outputs


def count_tables_of_size(state_count: int) -> int:
    """Number of complete tables with `state_count` states"""
    return len(output_space(state_count)) ** len(input_space(state_count))


def tables_of_size(state_count: int) -> Iterator[InstructionTable]:
    """
    Generate all complete tables with exactly `state_count` states.

    A table picks one output for every input; earlier selectors vary slowest.
    Zero states gives a single empty table, which halts on any input.
    """
    if state_count < 0:
        raise ValueError(f"State count must be non-negative, got {state_count}")
    inputs = input_space(state_count)
    outputs = output_space(state_count)

    for choice in ChoiceEnumerator([outputs] * len(inputs)):
        yield pmap(dict(zip(inputs, choice)))


class InstructionTableEnumerator:
    """
    The sequence of all complete instruction tables.

    Tables with n states all come before any table with n + 1 states, and
    every table appears exactly once. The sequence is infinite unless
    `max_states` is given. Each iter() starts a fresh pass.
    """

    def __init__(self, max_states: Optional[int] = None):
        if max_states is not None and max_states < 0:
            raise ValueError(f"max_states must be non-negative, got {max_states}")
        self.max_states = max_states

    def _state_counts(self) -> Iterator[int]:
        if self.max_states is None:
            return count()
        return iter(range(self.max_states + 1))

    def __iter__(self) -> Iterator[InstructionTable]:
        for state_count in self._state_counts():
            yield from tables_of_size(state_count)

    def with_sizes(self) -> Iterator[Tuple[int, InstructionTable]]:
        """Same sequence, each table paired with its state count"""
        for state_count in self._state_counts():
            for table in tables_of_size(state_count):
                yield state_count, table
