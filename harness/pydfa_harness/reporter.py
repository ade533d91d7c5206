from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

from pydfa.core.types import Verdict

_WORDS = {Verdict.ACCEPT: "accepts", Verdict.REJECT: "rejects"}


def format_verdicts(verdicts: Sequence[Verdict]) -> list[str]:
    """Numbered report lines, 1-based: "1. accepts", "2. rejects", ..."""
    return [f"{i}. {_WORDS[verdict]}" for i, verdict in enumerate(verdicts, start=1)]


def write_report(path: Union[str, Path], verdicts: Sequence[Verdict]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for line in format_verdicts(verdicts):
            f.write(line + "\n")
