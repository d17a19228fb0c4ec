class ParseError(ValueError):
    """Raised when a program line cannot be compiled into a transition."""

    TOO_FEW_TOKENS = "too few tokens"
    TOO_MANY_TOKENS = "too many tokens"
    UNKNOWN_ACTION = "unknown action code"
    MISSING_SYMBOL = "missing symbol"
    INVALID_ENCODING = "file is not valid UTF-8"
    MISSING_HEADER = "missing initial or accepting state line"

    def __init__(self, line, reason):
        self.line = line
        self.reason = reason
        super().__init__(f"Invalid instruction ({reason}): {line}")


class StepLimitExceeded(RuntimeError):
    """Raised by run() when a configured step cap is reached before halting."""

    def __init__(self, steps):
        self.steps = steps
        super().__init__(f"Machine did not halt within {steps:,} steps")
