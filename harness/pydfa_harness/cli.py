"""
Command-line driver: load a description, evaluate its strings, write the report.

    pydfa entrada.txt -o saida.txt
    pydfa entrada.txt --append < new_strings.txt
    pydfa entrada.txt --sample 500 --seed 7
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

import numpy as np

from pydfa.analysis.metrics import acceptance_rate
from pydfa.analysis.sampling import sample_strings
from pydfa.core.evaluator import evaluate_batch
from pydfa.core.model import AutomatonModel
from pydfa.errors import PydfaError
from pydfa_harness.append import append_strings, collect_strings
from pydfa_harness.config import DEFAULT_SAMPLE_MAX_LENGTH, DEFAULT_SENTINEL, RunConfig
from pydfa_harness.loader import load_description
from pydfa_harness.reporter import format_verdicts, write_report

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pydfa",
        description="Decide acceptance of each input string by a deterministic finite automaton.",
    )
    parser.add_argument("input", help="automaton description file followed by input strings")
    parser.add_argument("-o", "--output", default=None, help="report file (default: saida.txt beside input)")
    parser.add_argument(
        "--lenient-states",
        action="store_true",
        help="tolerate state IDs outside [0, state count)",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="do not echo progress")
    parser.add_argument(
        "--append",
        action="store_true",
        help="after the run, read new strings from stdin and append them to the input file",
    )
    parser.add_argument(
        "--sentinel",
        default=DEFAULT_SENTINEL,
        help=f"line that ends --append input (default: {DEFAULT_SENTINEL!r})",
    )
    parser.add_argument(
        "--sample",
        type=int,
        default=None,
        metavar="N",
        help="evaluate N random strings over the alphabet instead of the strings in the file",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=DEFAULT_SAMPLE_MAX_LENGTH,
        help=f"longest sampled string (default: {DEFAULT_SAMPLE_MAX_LENGTH})",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for --sample (default: OS entropy)")
    return parser


def _print_summary(model: AutomatonModel, out: TextIO) -> None:
    print(f"States: {model.state_count}", file=out)
    print(f"Alphabet: {' '.join(sorted(model.alphabet))}", file=out)
    print(f"Initial state: {model.initial_state}", file=out)
    print(f"Accepting states: {' '.join(str(s) for s in sorted(model.accepting_states))}", file=out)
    print(f"Transitions: {len(model.transitions)}", file=out)
    for (state, symbol), next_state in sorted(model.transitions.items()):
        print(f"Transition: {state} --{symbol}--> {next_state}", file=out)


def run(config: RunConfig, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    try:
        parsed = load_description(config.input_path)
        model = AutomatonModel.from_description(parsed.description, strict_states=config.strict_states)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error reading {config.input_path}: {exc}", file=stderr)
        return EXIT_IO_ERROR
    except PydfaError as exc:
        print(f"Invalid automaton in {config.input_path}: {exc}", file=stderr)
        return EXIT_INVALID_INPUT

    if config.echo:
        _print_summary(model, stdout)

    if config.sample is None:
        strings = list(parsed.strings)
    else:
        try:
            strings = sample_strings(
                model.alphabet,
                n_strings=config.sample,
                max_length=config.sample_max_length,
                rng=np.random.default_rng(config.seed),
            )
        except ValueError as exc:
            print(f"Cannot sample strings for {config.input_path}: {exc}", file=stderr)
            return EXIT_INVALID_INPUT

    verdicts = evaluate_batch(model, strings)

    if config.echo:
        for string, line in zip(strings, format_verdicts(verdicts)):
            print(f"Processing: {string}", file=stdout)
            print(line, file=stdout)
        if config.sample is not None:
            print(f"Acceptance rate: {acceptance_rate(verdicts):.3f}", file=stdout)

    try:
        write_report(config.output_path, verdicts)
    except OSError as exc:
        print(f"Error writing {config.output_path}: {exc}", file=stderr)
        return EXIT_IO_ERROR

    if config.append:
        if config.echo:
            print(f"Enter strings to append (type {config.sentinel!r} to finish):", file=stdout)
        new_strings = collect_strings(stdin, sentinel=config.sentinel)
        try:
            count = append_strings(config.input_path, new_strings)
        except OSError as exc:
            print(f"Error appending to {config.input_path}: {exc}", file=stderr)
            return EXIT_IO_ERROR
        if config.echo:
            print(f"Appended {count} string(s) to {config.input_path}", file=stdout)

    return EXIT_OK


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    args = build_parser().parse_args(argv)
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    try:
        config = RunConfig(
            input_path=args.input,
            output_path=args.output,
            strict_states=not args.lenient_states,
            echo=not args.quiet,
            append=args.append,
            sentinel=args.sentinel,
            sample=args.sample,
            sample_max_length=args.max_length,
            seed=args.seed,
        )
    except ValueError as exc:
        print(f"Invalid arguments: {exc}", file=stderr)
        return EXIT_INVALID_INPUT

    return run(config, stdin, stdout, stderr)


if __name__ == "__main__":
    raise SystemExit(main())
