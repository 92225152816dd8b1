from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Hashable, NamedTuple, Optional

from simulator.errors import UnhandledInput
from simulator.tape import Movement


class Halt:
    """Sentinel for the halting transition. Use the HALT instance."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "HALT"

    def __reduce__(self):
        return (Halt, ())


HALT = Halt()


class Observed(NamedTuple):
    """Lookup key: the symbol under the head (None for blank) and the current state."""
    symbol: Optional[Hashable]
    state: Hashable


class Action(NamedTuple):
    """What to do for one step: symbol to write, head movement, next state or HALT."""
    write: Optional[Any]
    movement: Movement
    next: Any

    @property
    def halts(self):
        return self.next is HALT


class TransitionTable(Mapping):
    """
    Read-only mapping of Observed -> Action.

    Accepts any mapping whose keys are Observed values or plain
    (symbol, state) pairs. The rules are copied on construction, so later
    changes to the source mapping do not leak into a running machine.
    """

    def __init__(self, rules=None):
        entries = {}
        for key, action in dict(rules or {}).items():
            observed = Observed(*key)
            if not isinstance(action, Action):
                action = Action(*action)
            if not isinstance(action.movement, Movement):
                raise TypeError(f"Action for {observed} has invalid movement {action.movement!r}")
            entries[observed] = action
        self._rules = MappingProxyType(entries)

    def __getitem__(self, key):
        return self._rules[Observed(*key)]

    def __iter__(self):
        return iter(self._rules)

    def __len__(self):
        return len(self._rules)

    def __contains__(self, key):
        return Observed(*key) in self._rules

    def __repr__(self):
        return f"TransitionTable({dict(self._rules)!r})"

    def lookup(self, symbol, state):
        """Action for (symbol, state); raises UnhandledInput when the table has none."""
        observed = Observed(symbol, state)
        try:
            return self._rules[observed]
        except KeyError:
            raise UnhandledInput(observed) from None

    def states(self):
        """Control states in first-seen order, covering both keys and targets."""
        seen = {}
        for observed, action in self._rules.items():
            seen.setdefault(observed.state, None)
            if not action.halts:
                seen.setdefault(action.next, None)
        return list(seen)

    def symbols(self):
        """Symbols read or written by the table, blank (None) first when present."""
        seen = {}
        for observed, action in self._rules.items():
            seen.setdefault(observed.symbol, None)
            seen.setdefault(action.write, None)
        symbols = [symbol for symbol in seen if symbol is not None]
        return ([None] if None in seen else []) + symbols
