from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

from pydfa_harness.config import DEFAULT_SENTINEL


def collect_strings(lines: Iterable[str], sentinel: str = DEFAULT_SENTINEL) -> list[str]:
    """Read lines until the sentinel line (or end of stream); newlines are dropped."""
    collected = []
    for line in lines:
        line = line.rstrip("\r\n")
        if line == sentinel:
            break
        collected.append(line)
    return collected


def append_strings(path: Union[str, Path], strings: Iterable[str]) -> int:
    """
    Append strings to a description file, one per line.

    A missing trailing newline in the existing file is added first so the first
    new string does not merge with the last line. Returns the number written.
    """
    path = Path(path)
    needs_newline = False
    if path.exists() and path.stat().st_size > 0:
        with open(path, "rb") as f:
            f.seek(-1, 2)
            needs_newline = f.read(1) != b"\n"

    count = 0
    with open(path, "a", encoding="utf-8") as f:
        if needs_newline:
            f.write("\n")
        for string in strings:
            f.write(string + "\n")
            count += 1
    return count
