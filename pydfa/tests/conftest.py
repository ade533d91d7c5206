"""
Pytest configuration and fixtures for pydfa tests.

Provides small reference automata.
"""

import pytest


@pytest.fixture
def even_ones_model():
    """
    Binary strings with an even number of 1s.

    State 0 = even (accepting), state 1 = odd.
    """
    from pydfa.core.model import AutomatonModel

    return AutomatonModel(
        state_count=2,
        alphabet=frozenset({"0", "1"}),
        initial_state=0,
        accepting_states=frozenset({0}),
        transitions={(0, "0"): 0, (0, "1"): 1, (1, "0"): 1, (1, "1"): 0},
    )


@pytest.fixture
def stuck_model():
    """Single accepting state over {'x'} with no transitions at all."""
    from pydfa.core.model import AutomatonModel

    return AutomatonModel(
        state_count=1,
        alphabet=frozenset({"x"}),
        initial_state=0,
        accepting_states=frozenset({0}),
        transitions={},
    )


@pytest.fixture
def ab_star_model():
    """
    Partial automaton for a b* over {'a', 'b'}.

    0 --a--> 1, 1 --b--> 1; state 1 accepts, (0, 'b') and (1, 'a') are undefined.
    """
    from pydfa.core.model import AutomatonModel

    return AutomatonModel(
        state_count=2,
        alphabet=frozenset({"a", "b"}),
        initial_state=0,
        accepting_states=frozenset({1}),
        transitions={(0, "a"): 1, (1, "b"): 1},
    )
