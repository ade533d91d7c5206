from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

DEFAULT_REPORT_NAME = "saida.txt"
DEFAULT_SENTINEL = "end"
DEFAULT_SAMPLE_MAX_LENGTH = 8


@dataclass
class RunConfig:
    """Settings for one batch run of the command-line driver.

    sample=None evaluates the strings stored in the input file; an integer
    evaluates that many random strings over the automaton's alphabet instead.
    """

    input_path: Union[str, Path]
    output_path: Optional[Union[str, Path]] = None
    strict_states: bool = True
    echo: bool = True
    append: bool = False
    sentinel: str = DEFAULT_SENTINEL
    sample: Optional[int] = None
    sample_max_length: int = DEFAULT_SAMPLE_MAX_LENGTH
    seed: Optional[int] = None

    def __post_init__(self):
        """Normalize paths and validate RunConfig constraints."""
        self.input_path = Path(self.input_path)
        if self.output_path is None:
            self.output_path = self.input_path.with_name(DEFAULT_REPORT_NAME)
        else:
            self.output_path = Path(self.output_path)

        if self.output_path.resolve() == self.input_path.resolve():
            raise ValueError("output_path must differ from input_path")
        if not self.sentinel:
            raise ValueError("sentinel must not be empty")
        if self.sample is not None and self.sample <= 0:
            raise ValueError("sample must be > 0")
        if self.sample_max_length < 0:
            raise ValueError("sample_max_length must be >= 0")
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be >= 0")
