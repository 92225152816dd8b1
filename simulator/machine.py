"""
Execution engine.

A machine value is either Running(state) or HALTED. `step` consumes one
machine value and returns the next, mutating the tape and cursor it is handed.
Halting is terminal: stepping a halted machine returns it unchanged, or raises
StepAfterHalt when called with strict=True.
"""

from typing import Hashable, NamedTuple

from simulator.errors import StepAfterHalt
from simulator.table import HALT


class Running(NamedTuple):
    state: Hashable

    @property
    def halted(self):
        return False


class Halted:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def halted(self):
        return True

    def __repr__(self):
        return "HALTED"

    def __reduce__(self):
        return (Halted, ())


HALTED = Halted()


def new(initial_state):
    """Construct a running machine in the given control state."""
    return Running(initial_state)


def step(machine, table, cursor, strict=False):
    """
    Execute one transition.

    Reads the symbol under `cursor`, looks up (symbol, state) in `table`,
    writes the action's symbol, then moves the cursor. A missing table entry
    raises UnhandledInput before anything is written or moved.
    """
    if machine.halted:
        if strict:
            raise StepAfterHalt()
        return machine

    action = table.lookup(cursor.read(), machine.state)

    cursor.write(action.write)
    cursor.move(action.movement)

    if action.next is HALT:
        return HALTED
    return Running(action.next)
