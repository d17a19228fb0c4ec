import json
import os
from datetime import datetime, timezone

def utc_date():
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")

class JSONLogger:
    """Appends run records as JSON lines, one file per UTC day."""

    def __init__(self, output_directory="logs/", log_file_prefix="turing_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(output_directory, exist_ok=True)
        self.rotate()

    def _path(self, name):
        return os.path.join(self.output_directory, f"{name}{self.today}.jsonl")

    @staticmethod
    def _append(path, entries):
        with open(path, "a", encoding="utf-8") as f:
            f.writelines(json.dumps(entry, ensure_ascii=False) + "\n" for entry in entries)

    def log(self, entry: dict):
        """Log a single entry to the main run log."""
        self._append(self.current_log, [entry])

    def log_batch(self, entries: list):
        """Log a batch of entries to the main run log."""
        self._append(self.current_log, entries)

    def rotate(self):
        """Start a new main log file if the UTC date has changed."""
        self.today = utc_date()
        self.current_log = self._path(self.log_file_prefix)

    def log_accepted(self, entries: list):
        """Log runs that ended in an accepting state."""
        self._append(self._path("accepted_"), entries)

    def log_rejected(self, entries: list):
        """Log runs that halted without a matching transition."""
        self._append(self._path("rejected_"), entries)

def run_entry(program, text, machine):
    """Build the log record for a finished run."""
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "program": program,
        "input": text,
        "accepted": machine.accepted,
        "final_state": machine.state,
        "steps": machine.steps,
        "tape": machine.symbols()
    }
