"""
Core types for pydfa: Verdict, HaltReason, AutomatonDescription, Trace.

Data containers; they check value types only. Structural validation of automata
lives in model.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from numbers import Integral

from pydfa.errors import MalformedAutomaton


class Verdict(Enum):
    """Outcome of running one string through one automaton."""

    ACCEPT = "accept"
    REJECT = "reject"

    def __bool__(self) -> bool:
        return self is Verdict.ACCEPT

    @classmethod
    def from_bool(cls, accepted: bool) -> Verdict:
        return cls.ACCEPT if accepted else cls.REJECT


class HaltReason(Enum):
    """Why a run stopped."""

    END_OF_INPUT = "end_of_input"
    UNKNOWN_SYMBOL = "unknown_symbol"
    NO_TRANSITION = "no_transition"


@dataclass(frozen=True)
class AutomatonDescription:
    """
    Raw automaton definition as supplied by a loader.

    Immutable: alphabet and accepting_states are frozensets, transitions a tuple
    of (state, symbol, next_state) triples in the order they were declared.
    """

    state_count: int
    alphabet: frozenset[str]
    initial_state: int
    accepting_states: frozenset[int]
    transitions: tuple[tuple[int, str, int], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "state_count", require_state_id("state_count", self.state_count))
        object.__setattr__(self, "initial_state", require_state_id("initial_state", self.initial_state))
        object.__setattr__(self, "alphabet", frozenset(self.alphabet))
        object.__setattr__(
            self,
            "accepting_states",
            frozenset(require_state_id("accepting state", s) for s in self.accepting_states),
        )
        object.__setattr__(
            self,
            "transitions",
            tuple(
                (
                    require_state_id("transition source", src),
                    symbol,
                    require_state_id("transition target", dst),
                )
                for src, symbol, dst in self.transitions
            ),
        )


def require_state_id(role: str, value: object) -> int:
    # bool is an Integral but never a state ID
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise MalformedAutomaton(f"{role} must be an integer, got {value!r}")
    return int(value)


@dataclass(frozen=True)
class Trace:
    """Record of a single run: visited states, consumed symbols, halt reason."""

    input_string: str
    states: tuple[int, ...]
    consumed: int
    halt_reason: HaltReason
    verdict: Verdict

    @property
    def final_state(self) -> int:
        return self.states[-1]
