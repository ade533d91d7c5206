"""
String acceptance for AutomatonModel.

Every function here is total over str input: an unknown symbol or an undefined
transition ends the run with Verdict.REJECT, never an exception. The current
state starts at model.initial_state on every call and is never shared.
"""

from __future__ import annotations

from typing import Iterable

from pydfa.core.model import AutomatonModel
from pydfa.core.types import HaltReason, Trace, Verdict


def evaluate(model: AutomatonModel, input_string: str) -> Verdict:
    current_state = model.initial_state

    for symbol in input_string:
        if not model.is_symbol_in_alphabet(symbol):
            return Verdict.REJECT
        next_state = model.lookup_transition(current_state, symbol)
        if next_state is None:
            return Verdict.REJECT
        current_state = next_state

    return Verdict.from_bool(model.is_accepting(current_state))


def evaluate_batch(model: AutomatonModel, input_strings: Iterable[str]) -> list[Verdict]:
    """Evaluate each string in order; verdict i belongs to input string i."""
    return [evaluate(model, input_string) for input_string in input_strings]


def trace(model: AutomatonModel, input_string: str) -> Trace:
    """
    Run input_string like evaluate() and record the walk.

    Returns:
        Trace whose states start with the initial state and append one entry per
        consumed symbol. On an early halt, consumed counts the symbols taken
        before the offending one.
    """
    states = [model.initial_state]
    halt_reason = HaltReason.END_OF_INPUT

    for symbol in input_string:
        if not model.is_symbol_in_alphabet(symbol):
            halt_reason = HaltReason.UNKNOWN_SYMBOL
            break
        next_state = model.lookup_transition(states[-1], symbol)
        if next_state is None:
            halt_reason = HaltReason.NO_TRANSITION
            break
        states.append(next_state)

    if halt_reason is HaltReason.END_OF_INPUT:
        verdict = Verdict.from_bool(model.is_accepting(states[-1]))
    else:
        verdict = Verdict.REJECT

    return Trace(
        input_string=input_string,
        states=tuple(states),
        consumed=len(states) - 1,
        halt_reason=halt_reason,
        verdict=verdict,
    )
