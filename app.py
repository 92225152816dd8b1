# app.py

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt, IntPrompt, Confirm
from rich.table import Table

from config.config_loader import DEFAULT_CONFIG, load_config, save_config
from logger.logger import JSONLogger
from simulator.errors import MachineError
from simulator.programs import PROGRAMS, load_program, prepare_tape
from tools.run_program import format_window, print_summary, run_program, run_with_progress, trace_printer
from tools.table_inspect import print_table

console = Console()

CONFIG_PATH = Path("config/runtime_config.json")

# === Utilities ===
def load_runtime_config(path=CONFIG_PATH):
    if not Path(path).exists():
        console.print(f"[yellow]No config at {path}, using defaults.[/yellow]")
        return DEFAULT_CONFIG.copy()
    return load_config(str(path))

def save_runtime_config(config, path=None):
    save_config(config, str(path or CONFIG_PATH))
    console.print("[green]Configuration updated successfully.[/green]")

def show_main_menu():
    console.print("\n[bold cyan]Tape Machine Simulator[/bold cyan]")
    console.print("[1] Run Program")
    console.print("[2] Inspect Program")
    console.print("[3] List Programs")
    console.print("[4] Edit Config")
    console.print("[5] Exit")


def list_programs():
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Program", justify="left")
    table.add_column("Initial State", justify="center")
    table.add_column("Rules", justify="center")
    table.add_column("Description", justify="left")

    for name in sorted(PROGRAMS):
        program = load_program(name)
        table.add_row(name, str(program.initial_state), str(len(program.table)), program.description)

    console.print(table)


def handle_run(config, program_name):
    """Run a program with the given config. Returns the process exit status."""
    program = load_program(program_name)
    tape, head = prepare_tape(program)
    json_logger = JSONLogger(config["output_directory"], config["log_file_prefix"]) if config["log_runs"] else None

    left, right, blank = config["window_left"], config["window_right"], config["blank_glyph"]
    console.print(f"\n[bold]Running {program_name}[/bold] from state {program.initial_state!r}")

    steps_done = [0]
    printer = trace_printer(left, right, blank, console) if config["show_trace"] else None

    def on_step(step_number, machine, cursor):
        steps_done[0] = step_number
        if printer is not None:
            printer(step_number, machine, cursor)

    try:
        if config["show_trace"]:
            console.print(f"[dim]{'start':>6}[/dim]  {format_window(head.window(left, right), blank)}", highlight=False)
            result = run_program(program.table, program.initial_state, tape=tape, cursor=head,
                                 max_steps=config["max_steps"], strict=config["strict_halt"], on_step=on_step)
        else:
            result = run_with_progress(program.table, program.initial_state, tape, head,
                                       config["max_steps"], strict=config["strict_halt"], on_step=on_step)
    except MachineError as e:
        console.print(f"[red]Machine fault after {steps_done[0]:,} steps: {e}[/red]")
        if json_logger is not None:
            json_logger.log_fault(program_name, e, steps_done[0])
        return 1

    print_summary(result, tape, console)
    if json_logger is not None:
        json_logger.log_run(program_name, result, tape)
    return 0


def handle_inspect(program_name):
    program = load_program(program_name)
    console.print(f"\n[bold]{program_name}[/bold]: {program.description}")
    console.print(f"  Initial state: {program.initial_state}")
    console.print(f"  Initial tape: {program.initial_tape or 'blank'}")
    print_table(program.table, console)


def choose_program(config):
    return Prompt.ask("Program", choices=sorted(PROGRAMS), default=config["program"])


def handle_edit_config(config):
    console.print("\n[bold]Edit Configuration[/bold]")

    program = choose_program(config)
    max_steps = IntPrompt.ask("Max Steps", default=config["max_steps"])
    window_left = IntPrompt.ask("Cells shown left of the head", default=config["window_left"])
    window_right = IntPrompt.ask("Cells shown at and right of the head", default=config["window_right"])
    strict_halt = Confirm.ask("Treat stepping a halted machine as an error?", default=config["strict_halt"])
    show_trace = Confirm.ask("Print the tape after every step?", default=config["show_trace"])
    log_runs = Confirm.ask("Log runs to JSON lines files?", default=config["log_runs"])

    updated = dict(config)
    updated.update({
        "program": program,
        "max_steps": max_steps,
        "window_left": window_left,
        "window_right": window_right,
        "strict_halt": strict_halt,
        "show_trace": show_trace,
        "log_runs": log_runs
    })

    try:
        save_runtime_config(updated)
    except (TypeError, ValueError) as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        return config
    except OSError as e:
        console.print(f"[red]Could not save configuration: {e}[/red]")
        return config
    return updated


def interactive_main(config):
    while True:
        show_main_menu()
        choice = Prompt.ask("\nChoose an option", choices=["1", "2", "3", "4", "5"], default="5")

        if choice == "1":
            handle_run(config, choose_program(config))
        elif choice == "2":
            handle_inspect(choose_program(config))
        elif choice == "3":
            list_programs()
        elif choice == "4":
            config = handle_edit_config(config)
        elif choice == "5":
            console.print("[bold green]Goodbye![/bold green]")
            break

# === CLI Mode for Automation ===
def cli_main(args, config):
    if args.max_steps is not None:
        config["max_steps"] = args.max_steps
    if args.strict:
        config["strict_halt"] = True
    if args.quiet:
        config["show_trace"] = False
    program_name = args.program or config["program"]

    if args.list:
        list_programs()
        return 0
    if args.inspect:
        handle_inspect(program_name)
        return 0
    return handle_run(config, program_name)

def main():
    parser = argparse.ArgumentParser(description="Tape Machine Simulator")
    parser.add_argument("--program", choices=sorted(PROGRAMS), help="Program to run or inspect")
    parser.add_argument("--list", action="store_true", help="List built-in programs")
    parser.add_argument("--inspect", action="store_true", help="Print the program's transition table")
    parser.add_argument("--max-steps", type=int, help="Maximum steps before stopping")
    parser.add_argument("--strict", action="store_true", help="Treat stepping a halted machine as an error")
    parser.add_argument("--quiet", action="store_true", help="Do not print the tape after every step")
    parser.add_argument("--config", default=str(CONFIG_PATH), help="Path to runtime config JSON")
    args = parser.parse_args()

    config = load_runtime_config(args.config)

    if args.program or args.list or args.inspect or args.max_steps is not None or args.quiet or args.strict:
        sys.exit(cli_main(args, config))
    else:
        interactive_main(config)

if __name__ == "__main__":
    main()
