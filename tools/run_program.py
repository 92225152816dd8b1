# tools/run_program.py

import argparse
from typing import Any, NamedTuple

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from simulator import machine as tm
from simulator.programs import PROGRAMS, load_program, prepare_tape
from simulator.tape import Tape

console = Console()


class RunResult(NamedTuple):
    machine: Any
    cursor: Any
    steps: int

    @property
    def halted(self):
        return self.machine.halted


# === Driver Loop ===
def run_program(table, initial_state, tape=None, cursor=None, max_steps=10_000, strict=False, on_step=None):
    """
    Step a machine from `initial_state` until it halts or `max_steps` steps
    have run. `on_step(step_number, machine, cursor)` is called after each step.
    UnhandledInput from the table propagates to the caller.
    """
    if cursor is None:
        tape = tape if tape is not None else Tape()
        cursor = tape.origin()

    machine = tm.new(initial_state)
    steps = 0
    while not machine.halted and steps < max_steps:
        machine = tm.step(machine, table, cursor, strict=strict)
        steps += 1
        if on_step is not None:
            on_step(steps, machine, cursor)

    return RunResult(machine, cursor, steps)


# === Rendering ===
def format_window(symbols, blank="_"):
    """Join a window left to right, blanks shown as `blank`."""
    return " ".join(blank if symbol is None else str(symbol) for symbol in symbols)


def trace_printer(window_left=2, window_right=3, blank="_", out=None):
    """Build an on_step callback that prints the tape window after every step."""
    out = out or console

    def on_step(step_number, machine, cursor):
        strip = escape(format_window(cursor.window(window_left, window_right), blank))
        state = "HALTED" if machine.halted else escape(str(machine.state))
        out.print(f"[dim]{step_number:>6}[/dim]  {strip}  [cyan]{state}[/cyan]", highlight=False)

    return on_step


def run_with_progress(table, initial_state, tape, cursor, max_steps, strict=False, on_step=None):
    """Run without tracing, showing a spinner with the step count. `on_step` is still called after every step."""
    with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TextColumn("{task.completed:,} steps"),
            TimeElapsedColumn(),
            console=console,
            transient=True,
    ) as progress:
        task = progress.add_task("[cyan]Running...", total=None)

        def advance(step_number, machine, cursor):
            if step_number % 1000 == 0:
                progress.update(task, completed=step_number)
            if on_step is not None:
                on_step(step_number, machine, cursor)

        return run_program(table, initial_state, tape=tape, cursor=cursor,
                           max_steps=max_steps, strict=strict, on_step=advance)


def print_summary(result, tape, out=None):
    out = out or console
    if result.halted:
        out.print(f"[green]Halted after {result.steps:,} steps.[/green]")
    else:
        out.print(f"[yellow]Stopped after {result.steps:,} steps without halting "
                  f"(state {result.machine.state!r}).[/yellow]")
    contents = tape.contents()
    out.print(f"Head at position {result.cursor.position}; "
              f"{len(contents)} non-blank cells, {len(tape)} cells materialized.")


# === CLI ===
def main():
    parser = argparse.ArgumentParser(description="Run a built-in tape machine program.")
    parser.add_argument("--program", default="copy_and_erase", choices=sorted(PROGRAMS),
                        help="Program to run")
    parser.add_argument("--max_steps", type=int, default=10_000, help="Maximum steps before stopping")
    parser.add_argument("--window", type=int, default=2, help="Cells shown on each side of the head")
    parser.add_argument("--strict", action="store_true", help="Treat stepping a halted machine as an error")
    args = parser.parse_args()

    program = load_program(args.program)
    tape, head = prepare_tape(program)
    console.print(f"[dim]{'start':>6}[/dim]  {format_window(head.window(args.window, args.window + 1))}")
    result = run_program(program.table, program.initial_state, tape=tape, cursor=head,
                         max_steps=args.max_steps, strict=args.strict,
                         on_step=trace_printer(args.window, args.window + 1))
    print_summary(result, tape)


if __name__ == "__main__":
    main()
