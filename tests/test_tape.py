from turing.tape import (
    BLANK,
    MOVE_LEFT,
    MOVE_RIGHT,
    Blank,
    MoveLeft,
    Symbol,
    Write,
    render_cell,
    tape_from_string,
)


def test_cell_equality_is_structural():
    assert Blank() == BLANK
    assert Symbol("a") == Symbol("a")
    assert Symbol("a") != Symbol("b")
    assert Symbol("a") != BLANK
    assert BLANK != Symbol("Δ")


def test_cells_are_hashable():
    assert len({BLANK, Blank(), Symbol("a"), Symbol("a"), Symbol("b")}) == 3


def test_action_equality():
    assert MoveLeft() == MOVE_LEFT
    assert MOVE_LEFT != MOVE_RIGHT
    assert Write(Symbol("x")) == Write(Symbol("x"))
    assert Write(Symbol("x")) != Write(BLANK)


def test_tape_from_string_adds_sentinels():
    assert tape_from_string("ab") == [BLANK, Symbol("a"), Symbol("b"), BLANK]
    assert tape_from_string("") == [BLANK, BLANK]


def test_render_cell():
    assert render_cell(BLANK) == "Δ"
    assert render_cell(BLANK, "_") == "_"
    assert render_cell(Symbol("7")) == "7"
