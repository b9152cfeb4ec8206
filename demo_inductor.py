"""
Demo script showing how to drive the inductor.

This script:
1. Runs a hand-written machine to completion and decodes its output
2. Runs a three-round session: predict, observe 1, predict, observe 1, predict
3. Prints each prediction

Usage:
    python demo_inductor.py            # 2000 advances per round
    python demo_inductor.py 20000      # more work per round
"""
import sys

from tm_induction import (
    Move, HALT_RESULT, TuringMachine, make_table,
    machine_repr, table_to_text, run_session
)


def run_example_machine():
    """Fill cells with 1s rightward until reaching a 1, then halt."""
    table = make_table({
        (0, False): (0, True, Move.RIGHT),
        (0, True): HALT_RESULT,
    })
    print("Example table:")
    print(table_to_text(table))

    machine = TuringMachine.start(table, 2 * 2 * 2 * 2)
    print(f"\nStart:  {machine_repr(machine)}")
    halted = machine.advanced_until_halted()
    print(f"Halted: {machine_repr(halted)}")
    print(f"Result: {halted.decoded_result()}")


def main():
    advances = int(sys.argv[1]) if len(sys.argv) > 1 else 2000

    run_example_machine()

    print()
    print("=" * 50)
    print(f"Session with {advances} advances per round")
    print("=" * 50)
    result = run_session([(1, 1), (1, 2)], advances_per_round=advances, verbose=True)
    print("-" * 50)
    print(f"{result.hypotheses_materialized} tables materialized, "
          f"{result.hypotheses_discarded} dropped as looping, "
          f"{result.time_elapsed:.2f}s")


if __name__ == "__main__":
    main()
