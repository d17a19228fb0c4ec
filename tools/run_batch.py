# tools/run_batch.py

import argparse
import json
from pathlib import Path

from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn

from logger.logger import JSONLogger, run_entry
from turing.errors import StepLimitExceeded
from turing.library import load_program

# === Utility Loaders ===
def load_inputs(inputs_file):
    """One input string per line. Blank lines are skipped."""
    with open(inputs_file, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]

def console_message(msg):
    print(f"[run_batch] {msg}")

# === Single Run ===
def run_single(machine, program_name, text, max_steps=None):
    tm = machine.copy()
    tm.set_tape(text)
    try:
        tm.run(max_steps=max_steps)
    except StepLimitExceeded:
        entry = run_entry(program_name, text, tm)
        entry["step_limit_exceeded"] = True
        return entry
    return run_entry(program_name, text, tm)

# === Main Batch Runner ===
def run_batch(program, inputs_file, output_name="results", results_dir="results", max_steps=None, logger=None):
    machine = load_program(program)
    inputs = load_inputs(inputs_file)
    program_name = Path(program).stem

    results_folder = Path(results_dir) / program_name
    results_folder.mkdir(parents=True, exist_ok=True)
    results_file = results_folder / f"{output_name}.jsonl"

    console_message(f"Loaded {len(inputs):,} inputs for {program_name}.")

    results = []
    with Progress(
            SpinnerColumn(),
            BarColumn(),
            "[progress.percentage]{task.percentage:>3.0f}%",
            TextColumn("{task.completed}/{task.total} Inputs"),
            TimeElapsedColumn()
    ) as progress:
        task = progress.add_task("[cyan]Running...", total=len(inputs))
        for text in inputs:
            results.append(run_single(machine, program_name, text, max_steps=max_steps))
            progress.update(task, advance=1)

    # === BULK WRITE once per batch ===
    with open(results_file, "a", encoding="utf-8") as f:
        for entry in results:
            f.write(json.dumps(entry, ensure_ascii=False) + "\n")

    if logger is not None:
        logger.log_batch(results)
        logger.log_accepted([entry for entry in results if entry["accepted"]])
        logger.log_rejected([entry for entry in results if not entry["accepted"] and "step_limit_exceeded" not in entry])

    accepted = sum(1 for entry in results if entry["accepted"])
    console_message(f"[SUCCESS] {accepted:,} of {len(results):,} inputs accepted. Results saved to {results_file}.")
    return results

# === CLI ===
def main():
    parser = argparse.ArgumentParser(description="Run a Turing machine program over a file of inputs.")
    parser.add_argument("--program", required=True, help="Bundled program name or path to a .tm file")
    parser.add_argument("--inputs", required=True, help="File with one input string per line")
    parser.add_argument("--output", default="results", help="Output result file name (default: results)")
    parser.add_argument("--max_steps", type=int, default=None, help="Step cap per input (default: unbounded)")
    parser.add_argument("--log", action="store_true", help="Also append results to the JSON-lines run log")
    args = parser.parse_args()

    logger = JSONLogger() if args.log else None
    run_batch(args.program, args.inputs, args.output, max_steps=args.max_steps, logger=logger)

if __name__ == "__main__":
    main()
