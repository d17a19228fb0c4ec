from dataclasses import dataclass


# === Cells ===
@dataclass(frozen=True)
class Blank:
    pass


@dataclass(frozen=True)
class Symbol:
    char: str


BLANK = Blank()


# === Actions ===
@dataclass(frozen=True)
class MoveLeft:
    pass


@dataclass(frozen=True)
class MoveRight:
    pass


@dataclass(frozen=True)
class Write:
    cell: object


MOVE_LEFT = MoveLeft()
MOVE_RIGHT = MoveRight()


def tape_from_string(text):
    """Build a tape for `text`: one Blank on each side of the input symbols."""
    return [BLANK] + [Symbol(c) for c in text] + [BLANK]


def render_cell(cell, blank_glyph="Δ"):
    return blank_glyph if cell == BLANK else cell.char
