"""
Anytime best-first approximation of Solomonoff induction.

Every complete instruction table is a hypothesis. The k-th table in
enumeration order gets prior base**k. A single placeholder hypothesis holds
the prior of all tables not materialized yet, so the total prior mass
1 / (1 - base) is accounted for exactly at all times.

Each call to advance() does one bounded unit of work on the heaviest
hypothesis. The caller decides how much work to do; the search never ends on
its own and both hypothesis pools grow without bound.
"""

import logging
from fractions import Fraction
from typing import Dict, Iterator, List, Optional, Union

from .frontier import PriorityFrontier
from .hypothesis import Hypothesis
from .machine import TuringMachine
from .tables import InstructionTableEnumerator

logger = logging.getLogger(__name__)


DEFAULT_BASE = Fraction(9, 10)
DEFAULT_STEP_BATCH = 100

# Prediction key for the mass of hypotheses that have not produced output yet
UNRESOLVED = None

Prediction = Dict[Optional[int], Fraction]


def powers(base: Fraction) -> Iterator[Fraction]:
    """base**0, base**1, base**2, ..."""
    value = Fraction(1)
    while True:
        yield value
        value *= base


def heaviest_first(hypothesis: Hypothesis) -> Fraction:
    return -hypothesis.weight


class Inductor:
    """
    Weighted mixture over all Turing machines, refined on demand.

    Args:
        base: Geometric prior ratio, strictly between 0 and 1
        step_batch: Machine transitions per unit of work on a hypothesis

    Attributes:
        frontier: Hypotheses still running, plus the placeholder
        finished: Hypotheses whose machine halted since the last observation
        current_input: Input that newly started machines receive
        prior_mass: Prior held by frontier + finished + discarded, fixed
            between observations
        discarded_prior: Prior of hypotheses dropped as non-halting since the
            last observation
    """

    def __init__(self, base: Union[Fraction, int, str] = DEFAULT_BASE,
                 step_batch: int = DEFAULT_STEP_BATCH):
        base = Fraction(base)
        if not 0 < base < 1:
            raise ValueError(f"base must be strictly between 0 and 1, got {base}")
        if step_batch < 1:
            raise ValueError(f"step_batch must be positive, got {step_batch}")

        self.base = base
        self.step_batch = step_batch
        self.frontier: PriorityFrontier[Hypothesis] = PriorityFrontier(key=heaviest_first)
        self.finished: List[Hypothesis] = []
        self.current_input = 0

        self.prior_mass = 1 / (1 - base)
        self.discarded_prior = Fraction(0)
        self.materialized_count = 0
        self.discarded_count = 0
        self.observation_count = 0

        self._unexplored = zip(InstructionTableEnumerator(), powers(base))
        self.frontier.insert(Hypothesis.placeholder(self.prior_mass))

    def advance(self, times: Optional[int] = None) -> None:
        """
        Do one unit of search work, or `times` + 1 units if `times` is given.

        Args:
            times: Number of extra units of work (advance(0) does one unit)
        """
        if times is None:
            self._advance_once()
            return
        if times < 0:
            raise ValueError(f"times must be non-negative, got {times}")
        for _ in range(times + 1):
            self._advance_once()

    def _advance_once(self) -> None:
        hypothesis = self.frontier.pop_best()
        if hypothesis is None:
            raise RuntimeError("Frontier is empty; the placeholder hypothesis was lost")

        if hypothesis.is_placeholder:
            self._materialize(hypothesis)
        else:
            self._run(hypothesis)

    def _materialize(self, placeholder: Hypothesis) -> None:
        """Split the next table off the unexplored mass"""
        table, prior = next(self._unexplored)
        fresh = Hypothesis(
            prior=prior,
            machine=TuringMachine.start(table, self.current_input),
            max_seen_elapsed_steps=1
        )
        self.frontier.insert(fresh)
        self.frontier.insert(Hypothesis.placeholder(placeholder.prior - prior))
        self.materialized_count += 1

    def _run(self, hypothesis: Hypothesis) -> None:
        advanced = hypothesis.advanced(self.step_batch)
        machine = advanced.machine
        if machine.is_halted:
            self.finished.append(advanced)
        elif machine.is_loop_detected:
            self.discarded_prior += advanced.prior
            self.discarded_count += 1
            logger.debug("Dropped looping machine after %d steps (prior %s)",
                         machine.elapsed_steps, advanced.prior)
        else:
            self.frontier.insert(advanced)

    def predict(self) -> Prediction:
        """
        Current posterior over the next output.

        Returns:
            Dict mapping UNRESOLVED (first) and each decoded output of a
            finished hypothesis to its share of the total weight. Values are
            exact and sum to 1.
        """
        unresolved = sum((h.weight for h in self.frontier), Fraction(0))

        by_result: Dict[int, Fraction] = {}
        for hypothesis in self.finished:
            result = hypothesis.result
            by_result[result] = by_result.get(result, Fraction(0)) + hypothesis.weight

        total = unresolved + sum(by_result.values(), Fraction(0))
        prediction: Prediction = {UNRESOLVED: unresolved / total}
        for result, weight in by_result.items():
            prediction[result] = weight / total
        return prediction

    def observe(self, observed_result: int, next_input: int) -> None:
        """
        Condition on an observed output and restart survivors on the next input.

        Finished hypotheses that produced a different output are discarded.
        Matching finished hypotheses and the whole frontier survive; running
        hypotheses have not produced anything that could contradict the
        observation yet. Every survivor restarts its program on `next_input`
        and keeps its prior.

        Args:
            observed_result: The output that actually happened
            next_input: Input for the next round
        """
        if observed_result < 0:
            raise ValueError(f"Observed result must be non-negative, got {observed_result}")
        if next_input < 0:
            raise ValueError(f"Next input must be non-negative, got {next_input}")

        matching = [h for h in self.finished if h.result == observed_result]
        survivors = matching + list(self.frontier)
        logger.info("Observed %d: %d of %d finished hypotheses agree, %d still running",
                    observed_result, len(matching), len(self.finished), len(self.frontier))

        self.frontier.clear()
        self.finished.clear()
        for hypothesis in survivors:
            self.frontier.insert(hypothesis.restarted(next_input))

        self.current_input = next_input
        self.prior_mass = sum((h.prior for h in survivors), Fraction(0))
        self.discarded_prior = Fraction(0)
        self.observation_count += 1

    def total_prior(self) -> Fraction:
        """Prior held by the frontier (placeholder included) and the finished pool"""
        running = sum((h.prior for h in self.frontier), Fraction(0))
        return running + sum((h.prior for h in self.finished), Fraction(0))

    @property
    def placeholder(self) -> Optional[Hypothesis]:
        for hypothesis in self.frontier:
            if hypothesis.is_placeholder:
                return hypothesis
        return None
