"""Exceptions raised by pydfa."""


class PydfaError(ValueError):
    """Base exception for all pydfa errors."""

    pass


class MalformedAutomaton(PydfaError):
    """Raised when an automaton definition violates a structural constraint."""

    pass


class DescriptionParseError(PydfaError):
    """Raised when a textual automaton description cannot be parsed."""

    def __init__(self, message: str, line: int = -1) -> None:
        self.line = line
        super().__init__(message)

    def __str__(self) -> str:
        if self.line >= 0:
            return f"{super().__str__()} (line {self.line})"
        return super().__str__()
