# app.py

import argparse
import os
import sys

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from config.config_loader import DEFAULT_CONFIG_PATH, SHIPPED_CONFIG_PATH, load_config
from logger.logger import JSONLogger, run_entry
from turing.compiler import compile_file
from turing.errors import ParseError, StepLimitExceeded
from turing.library import list_programs, load_program

console = Console()

# === Utilities ===
def load_runtime_config(path=None):
    """Explicit path, else ./config/runtime_config.json, else the copy shipped with the package."""
    if path is None:
        for candidate in (DEFAULT_CONFIG_PATH, SHIPPED_CONFIG_PATH):
            if os.path.exists(candidate):
                path = candidate
                break
    return load_config(path)

def make_logger(config):
    if not config["log_runs"]:
        return None
    return JSONLogger(config["output_directory"], config["log_file_prefix"])

def print_plain(text):
    # tape symbols may contain brackets, keep rich from reading them as markup
    console.print(text, markup=False, highlight=False, soft_wrap=True)

def run_input(machine, program_name, text, config, logger=None):
    """Run a clone of `machine` on `text` and print the final tape and result.

    Returns the clone so callers can inspect it, or None when the step cap was hit.
    """
    tm = machine.copy()
    tm.set_tape(text)
    try:
        result = tm.run(
            verbose=config["verbose"],
            max_steps=config["max_steps"],
            blank_glyph=config["blank_glyph"],
            head_marker=config["head_marker"],
        )
    except StepLimitExceeded as e:
        print_plain(tm.format_tape(config["blank_glyph"], config["head_marker"]))
        console.print(f"[red]{e} (state {tm.state}).[/red]")
        return None

    print_plain(tm.format_tape(config["blank_glyph"], config["head_marker"]))
    print_plain(f"{str(result).lower()}, {tm.state}")

    if logger is not None:
        entry = run_entry(program_name, text, tm)
        logger.log(entry)
        if result:
            logger.log_accepted([entry])
        else:
            logger.log_rejected([entry])
    return tm

def show_main_menu(programs):
    console.print("\n[bold cyan]Turing Machine Runner[/bold cyan]")
    console.print("Select a Turing machine to run:")
    for idx, info in enumerate(programs, start=1):
        console.print(f"[{idx}] {info.title}", highlight=False)
    console.print(f"[{len(programs) + 1}] Load program from file")
    console.print(f"[{len(programs) + 2}] Exit")

def handle_load_file():
    path = Prompt.ask("Path to .tm program")
    try:
        machine = compile_file(path)
    except (OSError, ParseError) as e:
        console.print(f"[red]Could not load {escape(path)}: {escape(str(e))}[/red]")
        return None
    console.print(f"[green]Compiled {len(machine.transitions)} transitions from {escape(path)}.[/green]")
    return machine

def interactive_main(config):
    programs = list_programs()
    compiled = {info.name: load_program(info.name) for info in programs}
    logger = make_logger(config)

    load_choice = str(len(programs) + 1)
    exit_choice = str(len(programs) + 2)
    choices = [str(i) for i in range(1, len(programs) + 3)]

    while True:
        show_main_menu(programs)
        choice = Prompt.ask("\nChoose an option", choices=choices, default=exit_choice)

        if choice == exit_choice:
            console.print("[bold green]Goodbye![/bold green]")
            break

        if choice == load_choice:
            machine = handle_load_file()
            if machine is None:
                continue
            name = "custom"
            prompt = "Enter input string:"
        else:
            info = programs[int(choice) - 1]
            machine = compiled[info.name]
            name = info.name
            prompt = info.prompt

        text = Prompt.ask(prompt.rstrip(":"), default="", show_default=False).strip()
        run_input(machine, name, text, config, logger)

# === CLI Mode for Automation ===
def cli_main(args, config):
    try:
        machine = load_program(args.program)
    except ParseError as e:
        console.print(f"[red]Compile error: {escape(str(e))}[/red]")
        return 1
    except KeyError as e:
        console.print(f"[red]{escape(str(e.args[0]))}[/red]")
        return 1
    except OSError as e:
        console.print(f"[red]Could not load {escape(args.program)}: {escape(str(e))}[/red]")
        return 1

    logger = make_logger(config)
    status = 0
    for text in args.input or [""]:
        if run_input(machine, args.program, text, config, logger) is None:
            status = 1
    return status

def main(argv=None):
    parser = argparse.ArgumentParser(description="Compile and run single-tape Turing machine programs")
    parser.add_argument("--program", help="Bundled program name or path to a .tm file")
    parser.add_argument("--input", action="append", help="Input string (repeat for several runs)")
    parser.add_argument("--verbose", action="store_true", help="Print the tape before every step")
    parser.add_argument("--max-steps", type=int, help="Give up after this many steps (default: unbounded)")
    parser.add_argument("--config", help=f"Runtime config file (default: {DEFAULT_CONFIG_PATH} if present)")
    args = parser.parse_args(argv)
    if args.max_steps is not None and args.max_steps <= 0:
        parser.error("--max-steps must be a positive integer")

    try:
        config = load_runtime_config(args.config)
    except (OSError, ValueError, TypeError) as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    if args.verbose:
        config["verbose"] = True
    if args.max_steps is not None:
        config["max_steps"] = args.max_steps

    if args.program:
        return cli_main(args, config)
    interactive_main(config)
    return 0

if __name__ == "__main__":
    sys.exit(main())
