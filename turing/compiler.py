"""Compile the line-oriented machine description into a TuringMachine.

Program layout (blank lines are ignored everywhere):

    <initial state>
    <accepting state> <accepting state> ...
    <rule>
    ...

Rules:

    ML <state> <next_state> [<read>]      move left
    MR <state> <next_state> [<read>]      move right
    WB <state> <next_state> [<read>]      write blank
    WS <state> <next_state> <write>       read blank, write symbol
    WS <state> <next_state> <read> <write>

An omitted read symbol means Blank. Only the first character of a symbol
token is used.
"""

from pathlib import Path

from turing.errors import ParseError
from turing.tape import BLANK, MOVE_LEFT, MOVE_RIGHT, Symbol, Write
from turing.transition import Transition
from turing.turing_machine import TuringMachine

ACTION_CODES = ("ML", "MR", "WB", "WS")


def _symbol(token):
    return Symbol(token[0])


def parse_rule(line):
    """Parse a single rule line into a Transition."""
    tokens = [token for token in line.strip().split(" ") if token]

    if len(tokens) < 3:
        raise ParseError(line, ParseError.TOO_FEW_TOKENS)
    if len(tokens) > 5:
        raise ParseError(line, ParseError.TOO_MANY_TOKENS)

    code, state, next_state = tokens[0], tokens[1], tokens[2]
    if code not in ACTION_CODES:
        raise ParseError(line, ParseError.UNKNOWN_ACTION)

    read = BLANK
    if len(tokens) == 5 or (len(tokens) == 4 and code != "WS"):
        read = _symbol(tokens[3])

    if code == "ML":
        action = MOVE_LEFT
    elif code == "MR":
        action = MOVE_RIGHT
    elif code == "WB":
        action = Write(BLANK)
    else:
        if len(tokens) == 3:
            raise ParseError(line, ParseError.MISSING_SYMBOL)
        action = Write(_symbol(tokens[-1]))

    return Transition(state, read, action, next_state)


def parse_accepting_states(line):
    # Literal single-space split: "a  b" keeps an empty label between a and b.
    return line.rstrip("\r").split(" ")


def compile_program(code):
    lines = [line for line in code.split("\n") if line.strip()]
    if len(lines) < 2:
        raise ParseError(code, ParseError.MISSING_HEADER)

    initial_state = lines[0].strip()
    accepting_states = parse_accepting_states(lines[1])
    machine = TuringMachine(initial_state, accepting_states)

    for line in lines[2:]:
        machine.transitions.append(parse_rule(line))

    return machine


def compile_file(path):
    try:
        with open(Path(path), "r", encoding="utf-8") as f:
            code = f.read()
    except UnicodeDecodeError as e:
        raise ParseError(str(path), ParseError.INVALID_ENCODING) from e
    return compile_program(code)
