"""
Text loader for automaton descriptions.

Format (header tokens are whitespace-separated and may span lines):

    <state count>
    <symbol count> <symbol>...
    <initial state>
    <accepting count> <state>...
    <transition count>
    <state> <symbol> <next state>     (one triple per transition)
    <input string>                    (one per line until end of file)

Every line after the one holding the last header token is an input string.
Empty lines and lines consisting of a single "-" are skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from pydfa.core.types import AutomatonDescription
from pydfa.errors import DescriptionParseError

SKIP_MARKER = "-"


@dataclass(frozen=True)
class ParsedInput:
    description: AutomatonDescription
    strings: tuple[str, ...]


class _TokenReader:
    def __init__(self, lines: list[str]) -> None:
        self._lines = lines
        self._line_index = -1
        self._pending: list[str] = []

    @property
    def line_index(self) -> int:
        """0-based index of the line holding the last consumed token."""
        return self._line_index

    def next_token(self, what: str) -> str:
        while not self._pending:
            self._line_index += 1
            if self._line_index >= len(self._lines):
                raise DescriptionParseError(f"unexpected end of input while reading {what}")
            self._pending = self._lines[self._line_index].split()
        return self._pending.pop(0)

    def next_int(self, what: str) -> int:
        token = self.next_token(what)
        try:
            return int(token)
        except ValueError:
            raise DescriptionParseError(
                f"expected integer for {what}, got {token!r}", line=self._line_index + 1
            ) from None

    def next_count(self, what: str) -> int:
        value = self.next_int(what)
        if value < 0:
            raise DescriptionParseError(f"{what} must be >= 0", line=self._line_index + 1)
        return value

    def next_symbol(self, what: str) -> str:
        token = self.next_token(what)
        if len(token) != 1:
            raise DescriptionParseError(
                f"expected single-character symbol for {what}, got {token!r}",
                line=self._line_index + 1,
            )
        return token

    def finish_header(self) -> None:
        if self._pending:
            raise DescriptionParseError(
                f"unexpected trailing tokens after header: {' '.join(self._pending)}",
                line=self._line_index + 1,
            )


def _split_lines(text: str) -> list[str]:
    # "\n" is the only line terminator; one trailing "\r" per line is dropped
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def parse_description(text: str) -> ParsedInput:
    lines = _split_lines(text)
    reader = _TokenReader(lines)

    state_count = reader.next_int("state count")

    n_symbols = reader.next_count("symbol count")
    alphabet = [reader.next_symbol(f"symbol {i + 1}") for i in range(n_symbols)]

    initial_state = reader.next_int("initial state")

    n_accepting = reader.next_count("accepting state count")
    accepting = [reader.next_int(f"accepting state {i + 1}") for i in range(n_accepting)]

    n_transitions = reader.next_count("transition count")
    transitions = []
    for i in range(n_transitions):
        src = reader.next_int(f"transition {i + 1} source")
        symbol = reader.next_symbol(f"transition {i + 1} symbol")
        dst = reader.next_int(f"transition {i + 1} target")
        transitions.append((src, symbol, dst))

    reader.finish_header()

    strings = tuple(
        line for line in lines[reader.line_index + 1 :] if line and line != SKIP_MARKER
    )

    description = AutomatonDescription(
        state_count=state_count,
        alphabet=frozenset(alphabet),
        initial_state=initial_state,
        accepting_states=frozenset(accepting),
        transitions=tuple(transitions),
    )
    return ParsedInput(description=description, strings=strings)


def load_description(path: Union[str, Path]) -> ParsedInput:
    """
    Read and parse a description file.

    Raises:
        FileNotFoundError: If path does not exist
        DescriptionParseError: If the header is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Description file not found: {path}")
    return parse_description(path.read_text(encoding="utf-8"))
