"""Main solver module for anagramarama."""

import os
import sys
from collections.abc import Sequence
from pathlib import Path
from pprint import pprint
from time import time
from typing import TextIO

from anagramarama.candidates import candidates
from anagramarama.output import sort_lines, sort_words
from anagramarama.solver.config import SolverConfig
from anagramarama.solver.parallel import solve_parallel
from anagramarama.solver.task_args import TaskArgs
from anagramarama.utils import int_comma, time_str
from anagramarama.wordlist import load_word_list, sanitize


def get_worker_count(n_workers: int | None, *, logf: TextIO) -> int:
    """Get the number of worker processes to start.

    Args:
        n_workers (int | None): Requested number of worker processes.  If None,
            defaults to the number of CPU cores.
        logf: Stream to log warnings to.
    """
    cpus = os.cpu_count() or 1  # Fallback to 1 if os.cpu_count() is None
    if n_workers is None:
        return cpus
    if n_workers > cpus:
        print(
            f"Warning: requested number of workers ({n_workers}) exceeds CPU count ({cpus})",
            file=logf,
            flush=True,
        )
    return n_workers


def anagrams(
    phrase: str,
    words: Sequence[str],
    config: SolverConfig,
    *,
    logf: TextIO | None = None,
) -> list[str]:
    """Find all combinations of words whose letters are an exact rearrangement of `phrase`.

    Args:
        phrase (str): The sanitized phrase (uppercase letters A-Z, see `sanitize`).
        words (Sequence[str]): Raw dictionary words.  Anything that is not a usable
            candidate is filtered out.
        config (SolverConfig): Word length bounds, word count limit and parallelism.
        logf: Stream to log the solving process to.  Defaults to stderr.

    Returns:
        The anagrams found, one space-separated line per anagram, in no particular order.
    """
    logf = logf if logf is not None else sys.stderr

    cand = candidates(
        words,
        phrase,
        min_word_len=config.min_word_len,
        max_word_len=config.max_word_len,
    )
    task_args = TaskArgs(phrase=phrase, candidates=cand, max_words=config.max_words)

    print("Solver initialized with:", file=logf, flush=True)
    pprint(task_args.summary(), stream=logf, width=100)

    if not cand.words:
        print("No candidate words found.", file=logf, flush=True)
        return []

    lines = solve_parallel(
        task_args,
        parallelism=get_worker_count(config.parallelism, logf=logf),
        logf=logf,
    )
    print(
        f"Found {int_comma(len(lines))} anagrams in {time_str(time() - task_args.start_time)}.",
        file=logf,
        flush=True,
    )
    return lines


def show_candidates(phrase: str, config: SolverConfig, *, out: TextIO | None = None) -> None:
    """Print the candidate words for `phrase`, each followed by its alternates."""
    cand = candidates(
        load_word_list(config.dict_path),
        phrase,
        min_word_len=config.min_word_len,
        max_word_len=config.max_word_len,
    )
    for word in cand.words:
        print(" ".join(cand.group(word)), file=out)


def solve_one(
    phrase: str, config: SolverConfig, *, logf: TextIO, out: TextIO | None, silent: bool = False
) -> list[str]:
    """Load the dictionary, find the anagrams of `phrase` and print them to `out`."""
    print("Solver config:", file=logf, flush=True)
    pprint(config.model_dump(), stream=logf, width=100)

    words = load_word_list(config.dict_path)
    print(f"Loaded {int_comma(len(words))} words from {config.dict_path}", file=logf, flush=True)

    lines = anagrams(phrase, words, config, logf=logf)
    if config.sort_words:
        lines = sort_words(lines)
    if config.sort_lines:
        lines = sort_lines(lines)

    if not silent:
        for line in lines:
            print(line, file=out)
    return lines


def run(
    raw_phrase: str, config: SolverConfig, *, out: TextIO | None = None, silent: bool = False
) -> list[str]:
    """Run the solver on the given phrase.

    Args:
        raw_phrase (str): The phrase to anagram.  Non-letters are removed.
        config (SolverConfig): The solver configuration.
        out: Stream the anagrams are printed to.  Defaults to stdout.
        silent (bool): Whether to skip printing the anagrams.

    Returns:
        The anagrams, after any sorting requested by `config`.
    """
    phrase = sanitize(raw_phrase)
    if not phrase:
        raise ValueError(f"Phrase contains no letters: {raw_phrase!r}")

    if config.log_file is None:
        return solve_one(phrase, config, logf=sys.stderr, out=out, silent=silent)

    logfile = Path(config.log_file)
    logfile.parent.mkdir(parents=True, exist_ok=True)
    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            return solve_one(phrase, config, logf=logf, out=out, silent=silent)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            raise
