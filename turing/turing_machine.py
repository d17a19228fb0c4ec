from turing.errors import StepLimitExceeded
from turing.tape import BLANK, MoveLeft, MoveRight, Symbol, render_cell, tape_from_string
from turing.transition import Transition, TransitionTable


class TuringMachine:
    def __init__(self, initial_state, accepting_states, transitions=None):
        self.initial_state = initial_state
        self.accepting_states = frozenset(accepting_states)
        self.transitions = transitions if transitions is not None else TransitionTable()
        self.tape = [BLANK]
        self.head = 0
        self.state = initial_state
        self.steps = 0
        self.halted = False
        self.accepted = False

    def add_transition(self, state, read, action, next_state):
        self.transitions.append(Transition(state, read, action, next_state))

    def set_tape(self, text):
        """Load `text` onto a fresh tape. The head starts on the leading Blank."""
        self.head = 0
        self.tape = tape_from_string(text)
        self.steps = 0
        self.halted = False
        self.accepted = False

    def reset(self):
        self.tape = [BLANK]
        self.head = 0
        self.state = self.initial_state
        self.steps = 0
        self.halted = False
        self.accepted = False

    def copy(self):
        clone = TuringMachine(self.initial_state, self.accepting_states, self.transitions.copy())
        clone.tape = list(self.tape)
        clone.head = self.head
        clone.state = self.state
        clone.steps = self.steps
        clone.halted = self.halted
        clone.accepted = self.accepted
        return clone

    __copy__ = copy

    def step(self):
        """Apply one transition.

        Returns True or False when this step halts the machine (accept or
        reject) and None while it is still running.
        """
        if self.halted:
            return self.accepted

        self.steps += 1
        transition = self.transitions.find(self.state, self.tape[self.head])
        if transition is None:
            self.halted = True
            self.accepted = False
            return False

        action = transition.action
        if isinstance(action, MoveLeft):
            if self.head == 0:
                # grow leftwards and look up again from the new Blank
                self.tape.insert(0, BLANK)
                return None
            self.head -= 1
        elif isinstance(action, MoveRight):
            self.head += 1
            if self.head == len(self.tape):
                self.tape.append(BLANK)
        else:
            self.tape[self.head] = action.cell

        self.state = transition.next_state
        if self.state in self.accepting_states:
            self.halted = True
            self.accepted = True
            return True
        return None

    def run(self, verbose=False, max_steps=None, blank_glyph="Δ", head_marker="|"):
        """Step until the machine accepts or no transition matches.

        There is no step bound unless `max_steps` is given, in which case
        StepLimitExceeded is raised once that many steps ran without halting.
        """
        while True:
            if max_steps is not None and self.steps >= max_steps:
                raise StepLimitExceeded(self.steps)
            if verbose:
                self.visualize(blank_glyph, head_marker)
            result = self.step()
            if result is not None:
                return result

    def current_cell(self):
        return self.tape[self.head]

    def symbols(self):
        return "".join(cell.char for cell in self.tape if isinstance(cell, Symbol))

    def format_tape(self, blank_glyph="Δ", head_marker="|"):
        rendered = ""
        for pos, cell in enumerate(self.tape):
            if pos == self.head:
                rendered += head_marker
            rendered += render_cell(cell, blank_glyph)
        return f"'{rendered}'"

    def visualize(self, blank_glyph="Δ", head_marker="|"):
        print(self.format_tape(blank_glyph, head_marker))

    def __repr__(self):
        return (
            f"TuringMachine(state={self.state!r}, head={self.head}, "
            f"tape={self.format_tape()}, transitions={len(self.transitions)})"
        )
