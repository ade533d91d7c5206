from __future__ import annotations

from typing import Iterable

from numpy.random import Generator


def _validate_prob(name: str, value: float) -> None:
    if not (0.0 <= value <= 1.0):
        raise ValueError(f"{name} must be in [0, 1]")


def sample_strings(
    alphabet: Iterable[str],
    n_strings: int,
    max_length: int,
    rng: Generator,
    foreign_symbols: Iterable[str] = (),
    foreign_prob: float = 0.0,
) -> list[str]:
    """
    Draw random test strings over an alphabet.

    Lengths are uniform in [0, max_length]. Each position independently takes a
    symbol from foreign_symbols with probability foreign_prob, otherwise a symbol
    from the alphabet. Symbols are picked from sorted pools so results depend only
    on the state of rng.
    """
    symbols = sorted(set(alphabet))
    foreign = sorted(set(foreign_symbols))

    if n_strings < 0:
        raise ValueError("n_strings must be >= 0")
    if max_length < 0:
        raise ValueError("max_length must be >= 0")
    _validate_prob("foreign_prob", foreign_prob)
    if foreign_prob > 0.0 and not foreign:
        raise ValueError("foreign_symbols must not be empty when foreign_prob > 0")
    if not symbols and max_length > 0 and foreign_prob < 1.0:
        raise ValueError("alphabet must not be empty")

    strings: list[str] = []
    for _ in range(n_strings):
        length = int(rng.integers(0, max_length + 1))
        chars = []
        for _position in range(length):
            if foreign_prob > 0.0 and rng.random() < foreign_prob:
                chars.append(foreign[int(rng.integers(len(foreign)))])
            else:
                chars.append(symbols[int(rng.integers(len(symbols)))])
        strings.append("".join(chars))

    return strings
