"""
Instruction table explorer.

Usage:
    python explore.py                  # First 20 tables in enumeration order
    python explore.py 42               # Table #42, run on input 0
    python explore.py 42 5             # Table #42, run on input 5
    python explore.py --sizes          # Table counts per state count
"""
import sys
from itertools import islice

from tm_induction import (
    InstructionTableEnumerator, TuringMachine, count_tables_of_size,
    machine_repr, table_to_text
)

MAX_STEPS = 10000


def nth_table(index):
    """Return (state count, table) at position index of the enumeration."""
    for size, table in islice(InstructionTableEnumerator().with_sizes(), index, index + 1):
        return size, table
    raise IndexError(index)


def show_table(index, input_value):
    """Display a table and run it on one input."""
    size, table = nth_table(index)
    print(f"\n{'='*60}")
    print(f"Table #{index} ({size} states)")
    print("=" * 60)
    print(table_to_text(table))

    machine = TuringMachine.start(table, input_value)
    final = machine.advanced_until_halted(max_steps=MAX_STEPS)
    print(f"\nInput {input_value}:")
    print(f"  {machine_repr(final)}")
    if not (final.is_halted or final.is_loop_detected):
        print(f"  ⚠ Still running after {MAX_STEPS} steps")


def show_sizes(max_states=4):
    """Show how many tables each state count contributes."""
    first = 0
    for size in range(max_states + 1):
        total = count_tables_of_size(size)
        print(f"  {size} states: {total} tables (#{first} .. #{first + total - 1})")
        first += total


def main():
    if "--sizes" in sys.argv:
        show_sizes()
        return

    if len(sys.argv) > 1:
        try:
            index = int(sys.argv[1])
            input_value = int(sys.argv[2]) if len(sys.argv) > 2 else 0
        except ValueError:
            print(__doc__)
            return
        show_table(index, input_value)
        return

    for index, table in enumerate(islice(InstructionTableEnumerator(), 20)):
        outputs = [TuringMachine.start(table, value).advanced_until_halted(max_steps=MAX_STEPS)
                   for value in range(4)]
        results = ['?' if m.decoded_result() is None else str(m.decoded_result()) for m in outputs]
        print(f"#{index:3d}: f(0..3) = {', '.join(results)}")


if __name__ == "__main__":
    main()
