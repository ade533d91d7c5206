from __future__ import annotations

from numpy.random import default_rng

from pydfa import AutomatonDescription, AutomatonModel, Verdict, evaluate, evaluate_batch
from pydfa.analysis.metrics import acceptance_rate
from pydfa.analysis.sampling import sample_strings


def make_div3_model() -> AutomatonModel:
    """Binary numbers divisible by 3, read most significant bit first."""
    return AutomatonModel.from_description(
        AutomatonDescription(
            state_count=3,
            alphabet=frozenset({"0", "1"}),
            initial_state=0,
            accepting_states=frozenset({0}),
            transitions=(
                (0, "0", 0),
                (0, "1", 1),
                (1, "0", 2),
                (1, "1", 0),
                (2, "0", 1),
                (2, "1", 2),
            ),
        )
    )


def _expected_even_ones(string: str) -> Verdict:
    if set(string) - {"0", "1"}:
        return Verdict.REJECT
    return Verdict.from_bool(string.count("1") % 2 == 0)


def test_even_ones_reference_scenario(even_ones_model) -> None:
    assert evaluate(even_ones_model, "") is Verdict.ACCEPT
    assert evaluate(even_ones_model, "1") is Verdict.REJECT
    assert evaluate(even_ones_model, "11") is Verdict.ACCEPT
    assert evaluate(even_ones_model, "1001") is Verdict.ACCEPT
    assert evaluate(even_ones_model, "1a01") is Verdict.REJECT


def test_partial_reference_scenario(stuck_model) -> None:
    assert evaluate(stuck_model, "") is Verdict.ACCEPT
    assert evaluate(stuck_model, "x") is Verdict.REJECT


def test_div3_matches_arithmetic() -> None:
    model = make_div3_model()
    for n in range(1, 200):
        string = format(n, "b")
        assert evaluate(model, string) is Verdict.from_bool(n % 3 == 0), string


def test_sampled_batch_matches_reference(even_ones_model) -> None:
    rng = default_rng(2024)
    strings = sample_strings("01", 300, 12, rng)
    strings += sample_strings("01", 100, 12, rng, foreign_symbols="a2 ", foreign_prob=0.2)

    predicted = evaluate_batch(even_ones_model, strings)
    expected = [_expected_even_ones(s) for s in strings]

    assert predicted == expected
    assert 0.0 < acceptance_rate(predicted) < 1.0


def test_batch_is_idempotent(even_ones_model) -> None:
    strings = sample_strings("01", 50, 10, default_rng(8), foreign_symbols="x", foreign_prob=0.1)
    assert evaluate_batch(even_ones_model, strings) == evaluate_batch(even_ones_model, strings)
