import argparse

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from simulator.programs import PROGRAMS, load_program

MISSING = "---"


def _symbol_text(symbol):
    return "_" if symbol is None else str(symbol)


def action_notation(action):
    """Compact busy beaver notation: <write><L|R|S><next>, with H for halt."""
    next_state = "H" if action.halts else str(action.next)
    return f"{_symbol_text(action.write)}{action.movement.value}{next_state}"


def table_grid(table):
    """
    Rows of a state x symbol grid. The first row is the header; each following
    row starts with the state name. Missing entries are shown as '---'.
    """
    symbols = table.symbols()
    rows = [["State"] + [_symbol_text(symbol) for symbol in symbols]]
    for state in table.states():
        row = [str(state)]
        for symbol in symbols:
            action = table.get((symbol, state))
            row.append(MISSING if action is None else action_notation(action))
        rows.append(row)
    return rows


def print_table(table, console=None, title="Transition Table"):
    """Pretty print the transition table as a state x symbol grid."""
    console = console or Console()
    header, *rows = table_grid(table)

    grid = Table(title=title, show_header=True, header_style="bold magenta")
    for column in header:
        grid.add_column(column, justify="center")
    for row in rows:
        grid.add_row(*[f"[red]{cell}[/red]" if cell == MISSING else escape(cell) for cell in row])

    console.print(grid)


def main():
    parser = argparse.ArgumentParser(description="Transition Table Inspector")
    parser.add_argument("--program", required=True, choices=sorted(PROGRAMS), help="Program to inspect")
    args = parser.parse_args()

    program = load_program(args.program)
    console = Console()
    console.print(f"[bold]{args.program}[/bold]: {program.description}")
    console.print(f"  Initial state: {program.initial_state}")
    console.print(f"  Rules: {len(program.table)}")
    print_table(program.table, console)


if __name__ == "__main__":
    main()
