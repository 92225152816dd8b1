"""Built-in transition tables used by the command line and the tests."""

from typing import Any, Dict, NamedTuple

from simulator.table import HALT, Action, Observed, TransitionTable
from simulator.tape import Movement, Tape

L, R, S = Movement.LEFT, Movement.RIGHT, Movement.STAY


class Program(NamedTuple):
    table: TransitionTable
    initial_state: Any
    initial_tape: Dict[int, Any]
    description: str


def copy_and_erase():
    table = TransitionTable({
        Observed('a', 'A'): Action('b', L, 'B'),
        Observed('b', 'B'): Action(None, R, 'B'),
        Observed(None, 'B'): Action('a', S, HALT),
    })
    return Program(table, 'A', {0: 'a'}, "Rewrite 'a' as 'b', step left and drop an 'a'")


# Busy beaver champions: blank plays the role of symbol 0, 1 is the mark.
def busy_beaver_2():
    table = TransitionTable({
        (None, 'A'): Action(1, R, 'B'),
        (1, 'A'): Action(1, L, 'B'),
        (None, 'B'): Action(1, L, 'A'),
        (1, 'B'): Action(1, R, HALT),
    })
    return Program(table, 'A', {}, "2-state busy beaver: 6 steps, 4 ones")


def busy_beaver_3():
    table = TransitionTable({
        (None, 'A'): Action(1, R, 'B'),
        (1, 'A'): Action(1, R, HALT),
        (None, 'B'): Action(None, R, 'C'),
        (1, 'B'): Action(1, R, 'B'),
        (None, 'C'): Action(1, L, 'C'),
        (1, 'C'): Action(1, L, 'A'),
    })
    return Program(table, 'A', {}, "3-state busy beaver: 14 steps, 6 ones")


PROGRAMS = {
    "copy_and_erase": copy_and_erase,
    "busy_beaver_2": busy_beaver_2,
    "busy_beaver_3": busy_beaver_3,
}


def load_program(name):
    if name not in PROGRAMS:
        raise KeyError(f"Unknown program '{name}'. Available: {', '.join(sorted(PROGRAMS))}")
    return PROGRAMS[name]()


def prepare_tape(program):
    """Fresh tape with the program's initial contents and a cursor on position 0."""
    tape = Tape()
    head = tape.origin()
    for position, symbol in sorted(program.initial_tape.items()):
        cursor = tape.origin()
        while cursor.position < position:
            cursor.move_right()
        while cursor.position > position:
            cursor.move_left()
        cursor.write(symbol)
    return tape, head
