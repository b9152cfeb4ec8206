"""
Driver loop: advance, predict, observe, repeat.

Runs an Inductor against a fixed list of observations, the way an external
caller would, and collects the prediction made before each observation.
"""

import time
from dataclasses import dataclass
from fractions import Fraction
from typing import Callable, List, Optional, Sequence, Tuple

from .formatting import format_prediction
from .inductor import DEFAULT_BASE, DEFAULT_STEP_BATCH, Inductor, Prediction


@dataclass
class SessionResult:
    """Outcome of a session"""
    predictions: List[Prediction]  # One per round; the last follows the final observation
    observations: List[Tuple[int, int]]
    advances: int
    hypotheses_materialized: int
    hypotheses_discarded: int
    time_elapsed: float


def run_session(
    observations: Sequence[Tuple[int, int]],
    advances_per_round: int,
    base: Fraction = DEFAULT_BASE,
    step_batch: int = DEFAULT_STEP_BATCH,
    verbose: bool = False
) -> SessionResult:
    """
    Predict, then observe, for each (observed_result, next_input) pair.

    Each round does `advances_per_round` units of work before predicting.
    A final round after the last observation predicts the next output.

    Args:
        observations: (observed_result, next_input) pairs, in order
        advances_per_round: Units of work before each prediction
        base: Geometric prior ratio
        step_batch: Machine transitions per unit of work
        verbose: Print progress information

    Returns:
        SessionResult with len(observations) + 1 predictions
    """
    return run_session_with_callback(
        observations, advances_per_round, callback=None,
        base=base, step_batch=step_batch, verbose=verbose
    )


def run_session_with_callback(
    observations: Sequence[Tuple[int, int]],
    advances_per_round: int,
    callback: Optional[Callable[[int, int, float], None]] = None,
    base: Fraction = DEFAULT_BASE,
    step_batch: int = DEFAULT_STEP_BATCH,
    verbose: bool = False
) -> SessionResult:
    """
    Session with a callback for progress updates.

    Args:
        observations: (observed_result, next_input) pairs, in order
        advances_per_round: Units of work before each prediction
        callback: Function called with (round, advances, elapsed) periodically
        base: Geometric prior ratio
        step_batch: Machine transitions per unit of work
        verbose: Print progress information

    Returns:
        SessionResult with len(observations) + 1 predictions
    """
    if advances_per_round < 0:
        raise ValueError(f"advances_per_round must be non-negative, got {advances_per_round}")

    inductor = Inductor(base=base, step_batch=step_batch)
    start_time = time.time()
    last_callback = start_time
    total_advances = 0
    predictions: List[Prediction] = []

    rounds = list(observations) + [None]
    for round_index, observation in enumerate(rounds):
        for _ in range(advances_per_round):
            inductor.advance()
            total_advances += 1

            if callback is not None:
                current_time = time.time()
                # Call callback periodically (every 0.5 seconds)
                if current_time - last_callback > 0.5:
                    callback(round_index, total_advances, current_time - start_time)
                    last_callback = current_time

        prediction = inductor.predict()
        predictions.append(prediction)

        if verbose:
            elapsed = time.time() - start_time
            print(f"Round {round_index}: {len(inductor.frontier)} running, "
                  f"{len(inductor.finished)} finished, "
                  f"{inductor.materialized_count} materialized ({elapsed:.2f}s)")
            print(format_prediction(prediction))

        if observation is not None:
            observed_result, next_input = observation
            if verbose:
                print(f"Observing {observed_result}, next input {next_input}")
            inductor.observe(observed_result, next_input)

    return SessionResult(
        predictions=predictions,
        observations=list(observations),
        advances=total_advances,
        hypotheses_materialized=inductor.materialized_count,
        hypotheses_discarded=inductor.discarded_count,
        time_elapsed=time.time() - start_time
    )
