from dataclasses import dataclass


@dataclass(frozen=True)
class Transition:
    state: str
    read: object
    action: object
    next_state: str


class TransitionTable:
    """Ordered rules. Lookup is first-match in declaration order, duplicates allowed."""

    def __init__(self, transitions=None):
        self.transitions = list(transitions or [])

    def append(self, transition):
        self.transitions.append(transition)

    def find(self, state, cell):
        for transition in self.transitions:
            if transition.state == state and transition.read == cell:
                return transition
        return None

    def states(self):
        """All state labels in order of first appearance."""
        seen = {}
        for transition in self.transitions:
            seen.setdefault(transition.state, None)
            seen.setdefault(transition.next_state, None)
        return list(seen)

    def copy(self):
        return TransitionTable(self.transitions)

    def __iter__(self):
        return iter(self.transitions)

    def __len__(self):
        return len(self.transitions)

    def __getitem__(self, index):
        return self.transitions[index]
