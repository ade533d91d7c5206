from __future__ import annotations

from typing import Sequence

import numpy as np

from pydfa.core.types import Verdict


def verdicts_to_array(verdicts: Sequence[Verdict]) -> np.ndarray:
    return np.array([verdict is Verdict.ACCEPT for verdict in verdicts], dtype=bool)


def acceptance_rate(verdicts: Sequence[Verdict]) -> float:
    if not verdicts:
        raise ValueError("verdicts must not be empty")
    return float(verdicts_to_array(verdicts).mean())
