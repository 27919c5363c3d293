"""Error taxonomy for definition parsing and simulation.

Every failure is terminal: the parser and simulator never recover locally,
they raise one of the classes below and leave presentation to the caller.
"""

from __future__ import annotations

from typing import Optional


class FSMError(Exception):
    """Base class for all parse and run failures."""


# --- Parse-time errors --------------------------------------------------------


class ParseError(FSMError):
    """A definition text could not be turned into a valid machine."""

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class MissingSection(ParseError):
    def __init__(self, section: str) -> None:
        self.section = section
        super().__init__(f"Missing '{section}:' section")


class DuplicateSection(ParseError):
    def __init__(self, section: str, line: int) -> None:
        self.section = section
        super().__init__(f"Section '{section}:' appears more than once", line)


class UnexpectedContent(ParseError):
    def __init__(self, text: str, line: int) -> None:
        self.text = text
        super().__init__(f"Unexpected content outside any section: {text!r}", line)


class MalformedState(ParseError):
    def __init__(self, text: str, line: int) -> None:
        self.text = text
        super().__init__(f"Malformed state declaration: {text!r}", line)


class DuplicateState(ParseError):
    def __init__(self, state: str, line: int) -> None:
        self.state = state
        super().__init__(f"State '{state}' is declared more than once", line)


class NoFinalState(ParseError):
    def __init__(self) -> None:
        super().__init__("No state is marked 'final:'")


class MalformedTransition(ParseError):
    def __init__(self, text: str, line: int) -> None:
        self.text = text
        super().__init__(
            f"Malformed transition {text!r}, expected '<symbol>: <state> -> <state>'",
            line,
        )


class UnknownState(ParseError):
    def __init__(self, state: str, line: int) -> None:
        self.state = state
        super().__init__(f"Unknown state '{state}'", line)


class MissingTransition(ParseError):
    def __init__(self, symbol: str, state: str) -> None:
        self.symbol = symbol
        self.state = state
        super().__init__(f"Missing transition on '{symbol}' from {state}")


class DuplicateTransition(ParseError):
    def __init__(self, first: str, second: str, line: int) -> None:
        self.first = first
        self.second = second
        super().__init__(f"Transition {first} and {second} conflict", line)


class MissingStart(ParseError):
    def __init__(self) -> None:
        super().__init__("'start:' does not name a state")


class AmbiguousStart(ParseError):
    def __init__(self, names: list[str]) -> None:
        self.names = names
        super().__init__(f"'start:' names more than one state: {' '.join(names)}")


class UnknownStartState(ParseError):
    def __init__(self, state: str) -> None:
        self.state = state
        super().__init__(f"Start state '{state}' is not a declared state")


# --- Run-time errors ----------------------------------------------------------


class RunError(FSMError):
    """A simulation halted before consuming the whole input."""

    def __init__(self, message: str, position: int) -> None:
        self.position = position
        super().__init__(message)


class UnknownSymbol(RunError):
    def __init__(self, symbol: str, position: int, state: str) -> None:
        self.symbol = symbol
        self.state = state
        super().__init__(
            f"'{symbol}' at position {position} is not in the input alphabet",
            position,
        )
