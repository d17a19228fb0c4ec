# tools/program_inspect.py

import argparse

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from turing.library import load_program
from turing.tape import MoveLeft, MoveRight, render_cell

console = Console()

def describe_action(action, blank_glyph="Δ"):
    if isinstance(action, MoveLeft):
        return "ML"
    if isinstance(action, MoveRight):
        return "MR"
    return f"W {render_cell(action.cell, blank_glyph)}"

def build_transition_table(machine, blank_glyph="Δ"):
    """Rich table of the rules in declaration order, shadowed duplicates flagged."""
    table = Table(title="Transition Table", show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("State")
    table.add_column("Read", justify="center")
    table.add_column("Action", justify="center")
    table.add_column("Next State")
    table.add_column("Note")

    seen = set()
    for idx, transition in enumerate(machine.transitions):
        key = (transition.state, transition.read)
        # first match wins, so a repeated (state, read) pair can never fire
        note = "[yellow]unreachable[/yellow]" if key in seen else ""
        seen.add(key)

        next_state = escape(transition.next_state)
        if transition.next_state in machine.accepting_states:
            next_state = f"[green]{next_state}[/green]"

        table.add_row(
            str(idx),
            escape(transition.state),
            escape(render_cell(transition.read, blank_glyph)),
            escape(describe_action(transition.action, blank_glyph)),
            next_state,
            note,
        )
    return table

def inspect_program(name_or_path):
    machine = load_program(name_or_path)
    accepting = " ".join(repr(state) for state in sorted(machine.accepting_states))

    console.print(f"[bold cyan]Program {escape(str(name_or_path))}[/bold cyan]")
    console.print(f"  Initial State: {escape(machine.initial_state)}")
    console.print(f"  Accepting States: {escape(accepting)}")
    console.print(f"  States: {escape(', '.join(machine.transitions.states()))}")
    console.print(f"  Transitions: {len(machine.transitions)}")
    console.print(build_transition_table(machine))
    return machine

def main():
    parser = argparse.ArgumentParser(description="Turing Machine Program Inspector")
    parser.add_argument("program", help="Bundled program name or path to a .tm file")
    args = parser.parse_args()

    inspect_program(args.program)

if __name__ == "__main__":
    main()
