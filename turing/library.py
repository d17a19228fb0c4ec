from collections import namedtuple
from pathlib import Path

from turing.compiler import compile_file

PROGRAMS_DIRECTORY = Path(__file__).parent / "programs"

ProgramInfo = namedtuple("ProgramInfo", ["name", "title", "prompt", "path"])

# Menu order
BUNDLED_PROGRAMS = [
    ("binary_invert", "Binary Inverter", "Enter binary number to invert:"),
    ("pow2_a", "Power of 2 'a's", "Enter string to check if the number of 'a's is a power of 2:"),
    ("an2anbn", "a^n to a^n b^n", "Enter string to convert from a^n to a^n b^n:"),
    ("palindrome", "Palindrome", "Enter string to check if it is a palindrome:"),
]


def list_programs(directory=PROGRAMS_DIRECTORY):
    return [
        ProgramInfo(name, title, prompt, Path(directory) / f"{name}.tm")
        for name, title, prompt in BUNDLED_PROGRAMS
    ]


def find_program(name):
    for info in list_programs():
        if info.name == name:
            return info
    raise KeyError(f"Unknown program: {name}")


def load_program(name_or_path):
    """Compile a bundled program by name, or any `.tm` file by path.

    Bundled names win over files of the same name in the working directory.
    """
    name = str(name_or_path)
    if name in {entry[0] for entry in BUNDLED_PROGRAMS}:
        return compile_file(find_program(name).path)

    path = Path(name_or_path)
    if path.is_file():
        return compile_file(path)
    if path.exists():
        raise FileNotFoundError(f"Not a program file: {path}")
    if path.suffix == ".tm":
        raise FileNotFoundError(f"Program file not found at: {path}")
    return compile_file(find_program(name).path)
