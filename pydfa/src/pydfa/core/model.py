from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

import numpy as np

from pydfa.core.types import AutomatonDescription, require_state_id
from pydfa.errors import MalformedAutomaton


@dataclass(frozen=True)
class AutomatonModel:
    """
    Immutable deterministic finite automaton.

    States are integers, nominally in [0, state_count). The transition table is
    partial: a missing (state, symbol) key means the automaton is stuck there.

    With strict_states=False, state IDs outside [0, state_count) are tolerated;
    such transitions are stored but can only fire if the run actually reaches them.
    """

    state_count: int
    alphabet: frozenset[str]
    initial_state: int
    accepting_states: frozenset[int]
    transitions: Mapping[tuple[int, str], int]
    strict_states: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "state_count", require_state_id("state_count", self.state_count))
        object.__setattr__(self, "initial_state", require_state_id("initial_state", self.initial_state))
        object.__setattr__(self, "alphabet", frozenset(self.alphabet))
        object.__setattr__(
            self,
            "accepting_states",
            frozenset(require_state_id("accepting state", s) for s in self.accepting_states),
        )
        table = {
            (require_state_id("transition source", state), symbol): require_state_id(
                "transition target", next_state
            )
            for (state, symbol), next_state in dict(self.transitions).items()
        }
        object.__setattr__(self, "transitions", MappingProxyType(table))

        if self.state_count <= 0:
            raise MalformedAutomaton("state_count must be > 0")

        for symbol in self.alphabet:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise MalformedAutomaton(f"alphabet symbols must be single characters: {symbol!r}")

        for (state, symbol), next_state in self.transitions.items():
            if symbol not in self.alphabet:
                raise MalformedAutomaton(f"transition references unknown symbol: {symbol!r}")
            if self.strict_states:
                self._check_state("transition source", state)
                self._check_state("transition target", next_state)

        if self.strict_states:
            self._check_state("initial_state", self.initial_state)
            for state in self.accepting_states:
                self._check_state("accepting state", state)

    def _check_state(self, role: str, state: int) -> None:
        if not (0 <= state < self.state_count):
            raise MalformedAutomaton(f"{role} {state} outside [0, {self.state_count})")

    @classmethod
    def from_description(
        cls,
        description: AutomatonDescription,
        strict_states: bool = True,
    ) -> AutomatonModel:
        table: dict[tuple[int, str], int] = {}
        for state, symbol, next_state in description.transitions:
            key = (state, symbol)
            if key in table and table[key] != next_state:
                raise MalformedAutomaton(
                    f"conflicting transitions for ({state}, {symbol!r}): "
                    f"{table[key]} and {next_state}"
                )
            table[key] = next_state

        return cls(
            state_count=description.state_count,
            alphabet=description.alphabet,
            initial_state=description.initial_state,
            accepting_states=description.accepting_states,
            transitions=table,
            strict_states=strict_states,
        )

    @property
    def states(self) -> range:
        return range(self.state_count)

    def is_symbol_in_alphabet(self, symbol: str) -> bool:
        return symbol in self.alphabet

    def lookup_transition(self, state: int, symbol: str) -> Optional[int]:
        """Destination of (state, symbol), or None when no transition is defined."""
        return self.transitions.get((state, symbol))

    def is_accepting(self, state: int) -> bool:
        return state in self.accepting_states

    def missing_transitions(self) -> list[tuple[int, str]]:
        return [
            (state, symbol)
            for state in self.states
            for symbol in sorted(self.alphabet)
            if (state, symbol) not in self.transitions
        ]

    def is_complete(self) -> bool:
        return not self.missing_transitions()

    def transition_matrix(self) -> np.ndarray:
        """
        Dense transition table.

        Returns:
            int64 array of shape (state_count, len(alphabet)); columns follow the
            sorted alphabet, -1 marks an undefined transition. Entries whose source
            lies outside [0, state_count) are not representable and are omitted.
        """
        symbols = sorted(self.alphabet)
        column = {symbol: idx for idx, symbol in enumerate(symbols)}
        matrix = np.full((self.state_count, len(symbols)), -1, dtype=np.int64)
        for (state, symbol), next_state in self.transitions.items():
            if 0 <= state < self.state_count:
                matrix[state, column[symbol]] = next_state
        return matrix
