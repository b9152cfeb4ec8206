"""
Two-symbol Turing machine execution model.

A machine is an immutable value: every transition returns a new TuringMachine
and never mutates the old one. The tape is a persistent set of the cell
offsets that hold a 1, so consecutive states share structure.
"""

from enum import Enum
from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from pyrsistent import PMap, PSet, pmap, pset


HALT_STATE = -1  # Any negative next state halts the machine
BITS = (False, True)


class Move(Enum):
    """Head movement after writing a bit"""
    LEFT = -1
    RIGHT = 1

    def __repr__(self):
        return 'L' if self is Move.LEFT else 'R'


MOVES = (Move.LEFT, Move.RIGHT)


@dataclass(frozen=True)
class InstructionSelector:
    """Lookup key of an instruction: the control state and the bit under the head"""
    state: int
    bit: bool

    def __repr__(self):
        return f"({self.state}, {int(self.bit)})"


@dataclass(frozen=True)
class InstructionResult:
    """What to do for a selector: next state (negative halts), bit to write, move"""
    next_state: int
    bit: bool
    move: Move

    @property
    def halts(self) -> bool:
        return self.next_state < 0

    def __repr__(self):
        if self.halts:
            return 'halt'
        return f"({self.next_state}, {int(self.bit)}, {self.move!r})"


HALT_RESULT = InstructionResult(next_state=HALT_STATE, bit=False, move=Move.LEFT)


# A table is an immutable selector -> result mapping (one table = one program)
InstructionTable = PMap

RuleKey = Union[InstructionSelector, Tuple[int, bool]]
RuleValue = Union[InstructionResult, Tuple[int, bool, Move]]


def make_table(rules: Union[Mapping[RuleKey, RuleValue], Iterable[Tuple[RuleKey, RuleValue]]] = ()) -> InstructionTable:
    """
    Build an instruction table from plain tuples or instruction objects.

    Args:
        rules: Mapping (or pairs) of (state, bit) -> (next_state, bit, move).
            Instruction objects are accepted as-is.

    Returns:
        An immutable, hashable instruction table
    """
    items = rules.items() if isinstance(rules, Mapping) else rules
    table: Dict[InstructionSelector, InstructionResult] = {}
    for key, value in items:
        selector = key if isinstance(key, InstructionSelector) else InstructionSelector(*key)
        result = value if isinstance(value, InstructionResult) else InstructionResult(*value)
        table[selector] = result
    return pmap(table)


def encode_input(value: int) -> PSet:
    """Tape holding the binary digits of value, least significant bit at offset 0"""
    if value < 0:
        raise ValueError(f"Input must be non-negative, got {value}")
    cells = []
    offset = 0
    while value:
        if value & 1:
            cells.append(offset)
        value >>= 1
        offset += 1
    return pset(cells)


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


@dataclass(frozen=True)
class TuringMachine:
    """
    Execution state of one program.

    Attributes:
        table: The instruction table (shared, never modified)
        position: Head offset; a negative offset means the machine fell off
            the left end of the tape and halted
        state: Control state; negative once a halt instruction ran
        tape: Offsets of the cells holding a 1
        elapsed_steps: Number of transitions taken
        checkpoint: (state, tape) captured at the last power-of-two step count,
            or None before the first capture
    """
    table: InstructionTable
    position: int = 0
    state: int = 0
    tape: PSet = field(default_factory=pset)
    elapsed_steps: int = 0
    checkpoint: Optional[tuple] = None

    @classmethod
    def start(cls, table: InstructionTable, input_value: int = 0) -> 'TuringMachine':
        """Fresh machine at state 0, head on offset 0, input written on the tape"""
        return cls(table=table, tape=encode_input(input_value))

    def bit_at(self, offset: int) -> bool:
        return offset in self.tape

    @property
    def head_bit(self) -> bool:
        return self.position in self.tape

    @property
    def selector(self) -> InstructionSelector:
        return InstructionSelector(self.state, self.head_bit)

    @property
    def snapshot(self) -> tuple:
        return (self.state, self.tape)

    @property
    def is_halted(self) -> bool:
        if self.position < 0 or self.state < 0:
            return True
        return self.selector not in self.table

    @property
    def is_loop_detected(self) -> bool:
        """
        True if state and tape match those captured at the last power-of-two
        step count.

        The head position is not compared, so this is a heuristic in both
        directions. A head sweeping over cells it leaves unchanged is flagged
        even if it would halt further along, and machines that keep growing
        their tape are never caught.
        """
        return self.checkpoint is not None and self.checkpoint == self.snapshot

    def advanced_one_step(self) -> 'TuringMachine':
        """
        Apply one transition.

        Returns self when the machine is halted or loop-detected.
        """
        if self.is_halted or self.is_loop_detected:
            return self

        checkpoint = self.checkpoint
        if is_power_of_two(self.elapsed_steps):
            checkpoint = self.snapshot

        instruction = self.table[self.selector]
        steps = self.elapsed_steps + 1
        if instruction.halts:
            return replace(self, state=instruction.next_state,
                           elapsed_steps=steps, checkpoint=checkpoint)

        if instruction.bit:
            tape = self.tape.add(self.position)
        else:
            tape = self.tape.discard(self.position)
        return TuringMachine(
            table=self.table,
            position=self.position + instruction.move.value,
            state=instruction.next_state,
            tape=tape,
            elapsed_steps=steps,
            checkpoint=checkpoint
        )

    def advanced(self, steps: int) -> 'TuringMachine':
        """Apply up to `steps` transitions, stopping early once halted or loop-detected"""
        if steps < 0:
            raise ValueError(f"Step count must be non-negative, got {steps}")
        machine = self
        for _ in range(steps):
            if machine.is_halted or machine.is_loop_detected:
                break
            machine = machine.advanced_one_step()
        return machine

    def advanced_until_halted(self, max_steps: Optional[int] = None) -> 'TuringMachine':
        """
        Run until the machine halts or is caught looping.

        Args:
            max_steps: Give up after this many transitions (None = no limit,
                which may never return for a non-halting machine)

        Returns:
            The last machine reached
        """
        machine = self
        taken = 0
        while not (machine.is_halted or machine.is_loop_detected):
            if max_steps is not None and taken >= max_steps:
                break
            machine = machine.advanced_one_step()
            taken += 1
        return machine

    def decoded_result(self) -> Optional[int]:
        """
        Read the output of a halted machine.

        The bits from the head position down to offset 0 form the result,
        most significant bit first. Returns None while the machine is running.
        """
        if not self.is_halted:
            return None
        result = 0
        for offset in range(self.position, -1, -1):
            result = result * 2 + (1 if offset in self.tape else 0)
        return result
