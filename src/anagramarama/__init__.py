"""anagramarama: a multi-word anagram generator.

Finds every combination of dictionary words whose letters, taken together, are an exact
rearrangement of a given phrase.  Uses backtracking over a length-sorted list of candidate
words, split across a pool of worker processes.
"""

import argparse
import cProfile
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from .solver import solver
from .solver.config import SolverConfig
from .wordlist import sanitize


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser.

    Options left unset fall back to the values from the environment or `.env` file.
    """
    parser = argparse.ArgumentParser(
        prog="anagramarama",
        description="Multi-word anagram generator",
    )
    parser.add_argument("phrase", nargs="+", help="Expression to anagram")
    parser.add_argument("--dict", dest="dict_path", type=str, help="Dictionary file")
    parser.add_argument("--minlen", dest="min_word_len", type=int, help="Minimum word length")
    parser.add_argument("--maxlen", dest="max_word_len", type=int, help="Maximum word length")
    parser.add_argument(
        "--maxwords",
        dest="max_words",
        type=int,
        help="Maximum number of words (0 = no maximum)",
    )
    parser.add_argument(
        "--workers", dest="parallelism", type=int, help="Number of worker processes"
    )
    parser.add_argument(
        "--sortlines",
        dest="sort_lines",
        action=argparse.BooleanOptionalAction,
        help="(Also) sort the output by lines",
    )
    parser.add_argument(
        "--sortwords",
        dest="sort_words",
        action=argparse.BooleanOptionalAction,
        help="(Also) sort the output by words",
    )
    parser.add_argument("--log-file", dest="log_file", type=str, help="Write the run log here")
    parser.add_argument(
        "--candidates",
        action="store_true",
        help="Just show candidate words (don't anagram)",
    )
    parser.add_argument("--silent", action="store_true", help="Don't print results")
    parser.add_argument("--cpuprofile", type=str, help="Write cpu profile to file")
    return parser


CONFIG_OPTIONS = (
    "dict_path",
    "min_word_len",
    "max_word_len",
    "max_words",
    "parallelism",
    "sort_lines",
    "sort_words",
    "log_file",
)
"""Command-line options that override SolverConfig fields."""


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the anagram generator."""
    args = build_parser().parse_args(argv)
    overrides = {
        name: getattr(args, name) for name in CONFIG_OPTIONS if getattr(args, name) is not None
    }
    try:
        config = SolverConfig(**overrides)
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return 1

    phrase = " ".join(args.phrase)

    profiler = cProfile.Profile() if args.cpuprofile else None
    if profiler is not None:
        profiler.enable()
    try:
        if args.candidates:
            solver.show_candidates(sanitize(phrase), config)
        else:
            solver.run(phrase, config, silent=args.silent)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Solver interrupted by user.", file=sys.stderr)
        return 1
    finally:
        if profiler is not None:
            profiler.disable()
            profiler.dump_stats(args.cpuprofile)
    return 0
