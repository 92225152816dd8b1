class MachineError(Exception):
    """Base class for faults raised while executing a machine."""


class UnhandledInput(MachineError, KeyError):
    """The transition table has no entry for the observed (symbol, state) pair."""

    def __init__(self, observed):
        self.observed = observed
        super().__init__(observed)

    def __str__(self):
        return (f"No transition for symbol {self.observed.symbol!r} "
                f"in state {self.observed.state!r}")


class StepAfterHalt(MachineError):
    """A halted machine was stepped in strict mode."""

    def __str__(self):
        return "Machine is halted; no further steps are allowed"
