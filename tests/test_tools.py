import json

from tools.program_inspect import build_transition_table, describe_action, inspect_program
from tools.run_batch import load_inputs, run_batch
from turing.compiler import compile_program
from turing.library import load_program
from turing.tape import BLANK, MOVE_LEFT, Symbol, Write


def test_describe_action():
    assert describe_action(MOVE_LEFT) == "ML"
    assert describe_action(Write(BLANK)) == "W Δ"
    assert describe_action(Write(Symbol("x"))) == "W x"


def test_transition_table_rows():
    machine = compile_program("q0\nqf\nWS q0 qf 1\nWS q0 qf 2\n")
    table = build_transition_table(machine)
    assert table.row_count == 2
    notes = list(table.columns[5].cells)
    assert notes[0] == ""
    assert "unreachable" in notes[1]


def test_inspect_program_prints_summary(capsys):
    machine = inspect_program("palindrome")
    out = capsys.readouterr().out
    assert "Initial State: q0" in out
    assert "'qacc'" in out
    assert len(machine.transitions) == len(load_program("palindrome").transitions)


def test_load_inputs_skips_blank_lines(tmp_path):
    path = tmp_path / "inputs.txt"
    path.write_text("ab\n\n  \nba\n", encoding="utf-8")
    assert load_inputs(path) == ["ab", "ba"]


def test_run_batch_writes_results(tmp_path):
    inputs = tmp_path / "inputs.txt"
    inputs.write_text("a\naa\naaa\n", encoding="utf-8")
    results = run_batch("pow2_a", inputs, results_dir=str(tmp_path / "results"))
    assert [entry["accepted"] for entry in results] == [True, True, False]

    results_file = tmp_path / "results" / "pow2_a" / "results.jsonl"
    lines = [json.loads(line) for line in results_file.read_text(encoding="utf-8").splitlines()]
    assert [entry["input"] for entry in lines] == ["a", "aa", "aaa"]


def test_run_batch_step_limit(tmp_path):
    program = tmp_path / "loop.tm"
    program.write_text("q0\nqf\nMR q0 q0\nMR q0 q0 x\n", encoding="utf-8")
    inputs = tmp_path / "inputs.txt"
    inputs.write_text("x\n", encoding="utf-8")
    results = run_batch(str(program), inputs, results_dir=str(tmp_path / "results"), max_steps=25)
    assert results[0]["step_limit_exceeded"] is True
    assert results[0]["steps"] == 25
