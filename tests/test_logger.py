import json

from logger.logger import JSONLogger, run_entry
from turing.library import load_program


def read_lines(path):
    with open(path, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f]


def finished_machine(text):
    machine = load_program("binary_invert").copy()
    machine.set_tape(text)
    machine.run()
    return machine


def test_run_entry_fields():
    entry = run_entry("binary_invert", "01", finished_machine("01"))
    assert entry["program"] == "binary_invert"
    assert entry["input"] == "01"
    assert entry["accepted"] is True
    assert entry["final_state"] == "qf"
    assert entry["tape"] == "10"
    assert entry["steps"] > 0
    assert "timestamp" in entry


def test_log_appends_json_lines(tmp_path):
    logger = JSONLogger(output_directory=str(tmp_path / "logs"), log_file_prefix="tm_")
    logger.log({"a": 1})
    logger.log_batch([{"b": 2}, {"c": "Δ"}])
    assert logger.current_log.endswith(f"tm_{logger.today}.jsonl")
    assert read_lines(logger.current_log) == [{"a": 1}, {"b": 2}, {"c": "Δ"}]


def test_accepted_and_rejected_files(tmp_path):
    logger = JSONLogger(output_directory=str(tmp_path))
    logger.log_accepted([run_entry("binary_invert", "0", finished_machine("0"))])
    logger.log_rejected([run_entry("binary_invert", "2", finished_machine("2"))])
    accepted = read_lines(tmp_path / f"accepted_{logger.today}.jsonl")
    rejected = read_lines(tmp_path / f"rejected_{logger.today}.jsonl")
    assert [e["input"] for e in accepted] == ["0"]
    assert [e["accepted"] for e in rejected] == [False]


def test_rotate_keeps_prefix(tmp_path):
    logger = JSONLogger(output_directory=str(tmp_path), log_file_prefix="x_")
    logger.rotate()
    assert logger.current_log.endswith(f"x_{logger.today}.jsonl")
