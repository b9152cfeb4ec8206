"""
Hypothesis data structure: one candidate program and its weight.

A hypothesis pairs a prior with a running Turing machine. The placeholder
hypothesis has no machine; its prior is the mass of all tables that have
not been materialized yet.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Optional

from .machine import TuringMachine


@dataclass(frozen=True)
class Hypothesis:
    """
    A candidate explanation of the observations.

    Invariant: weight = prior / max(1, max_seen_elapsed_steps), so a program
    that needs more steps to produce its output ranks lower.
    """
    prior: Fraction
    machine: Optional[TuringMachine] = None
    max_seen_elapsed_steps: int = 1

    @classmethod
    def placeholder(cls, prior: Fraction) -> 'Hypothesis':
        """Stand-in for every table not yet pulled from the enumerator"""
        return cls(prior=prior)

    @property
    def is_placeholder(self) -> bool:
        return self.machine is None

    @property
    def weight(self) -> Fraction:
        return Fraction(self.prior) / max(1, self.max_seen_elapsed_steps)

    @property
    def result(self) -> Optional[int]:
        """Decoded output if the machine halted, else None"""
        if self.machine is None:
            return None
        return self.machine.decoded_result()

    def advanced(self, steps: int) -> 'Hypothesis':
        """Run the machine for up to `steps` transitions and refresh the step count"""
        if self.machine is None:
            raise ValueError("Cannot run the placeholder hypothesis")
        machine = self.machine.advanced(steps)
        return Hypothesis(
            prior=self.prior,
            machine=machine,
            max_seen_elapsed_steps=max(self.max_seen_elapsed_steps, machine.elapsed_steps)
        )

    def restarted(self, input_value: int) -> 'Hypothesis':
        """
        Same program started over on a new input.

        Prior and max_seen_elapsed_steps are kept. The placeholder stays a
        placeholder.
        """
        if self.machine is None:
            return self
        return Hypothesis(
            prior=self.prior,
            machine=TuringMachine.start(self.machine.table, input_value),
            max_seen_elapsed_steps=self.max_seen_elapsed_steps
        )

    def __repr__(self):
        if self.machine is None:
            return f"Hypothesis(unexplored, prior={self.prior})"
        return (f"Hypothesis(prior={self.prior}, steps={self.machine.elapsed_steps}, "
                f"weight={self.weight})")
