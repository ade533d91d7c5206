"""
pydfa: deterministic finite automaton simulation.

Build an AutomatonModel once, then evaluate any number of strings against it:

    >>> from pydfa import AutomatonModel, evaluate
    >>> model = AutomatonModel(
    ...     state_count=2,
    ...     alphabet=frozenset("01"),
    ...     initial_state=0,
    ...     accepting_states=frozenset({0}),
    ...     transitions={(0, "0"): 0, (0, "1"): 1, (1, "0"): 1, (1, "1"): 0},
    ... )
    >>> evaluate(model, "11")
    <Verdict.ACCEPT: 'accept'>
"""

from pydfa.core.evaluator import evaluate, evaluate_batch, trace
from pydfa.core.model import AutomatonModel
from pydfa.core.types import AutomatonDescription, HaltReason, Trace, Verdict
from pydfa.errors import MalformedAutomaton, PydfaError

__version__ = "0.1.0"

__all__ = [
    "AutomatonDescription",
    "AutomatonModel",
    "HaltReason",
    "MalformedAutomaton",
    "PydfaError",
    "Trace",
    "Verdict",
    "evaluate",
    "evaluate_batch",
    "trace",
    "__version__",
]
