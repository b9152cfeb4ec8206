"""
Text rendering for tables, machines and predictions.
"""

from typing import Optional

from .inductor import UNRESOLVED, Prediction
from .machine import InstructionResult, InstructionTable, TuringMachine


def format_result(result: InstructionResult) -> str:
    """Format one instruction result"""
    if result.halts:
        return 'halt'
    move = 'R' if result.move.value > 0 else 'L'
    return f"write {int(result.bit)}, move {move}, goto {result.next_state}"


def table_to_text(table: InstructionTable) -> str:
    """
    Render a table one rule per line, ordered by selector.

    Args:
        table: The instruction table

    Returns:
        Lines like "0,1 -> write 1, move R, goto 0"
    """
    if not table:
        return '(empty table: halts immediately)'
    lines = []
    for selector in sorted(table, key=lambda s: (s.state, s.bit)):
        lines.append(f"{selector.state},{int(selector.bit)} -> {format_result(table[selector])}")
    return '\n'.join(lines)


def machine_repr(machine: TuringMachine) -> str:
    """
    Compact one-line view of a machine.

    Useful for debugging and logging. The head cell is bracketed.
    """
    low = min([0, machine.position] + list(machine.tape))
    high = max([0, machine.position] + list(machine.tape))
    cells = []
    for offset in range(low, high + 1):
        bit = '1' if offset in machine.tape else '0'
        cells.append(f"[{bit}]" if offset == machine.position else bit)

    status = 'running'
    if machine.is_halted:
        status = f"halted -> {machine.decoded_result()}"
    elif machine.is_loop_detected:
        status = 'looping'
    return f"state={machine.state} steps={machine.elapsed_steps} tape={''.join(cells)} {status}"


def format_key(key: Optional[int]) -> str:
    return 'unresolved' if key is UNRESOLVED else str(key)


def format_prediction(prediction: Prediction, places: int = 6) -> str:
    """
    Render a prediction as "key: probability" lines.

    Probabilities are shown as decimals for reading only; the prediction
    itself stays exact.
    """
    return '\n'.join(f"{format_key(key)}: {float(value):.{places}f}"
                     for key, value in prediction.items())
