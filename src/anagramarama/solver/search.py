"""Recursive backtracking search for anagrams."""

from anagramarama.freqmap import build_freqmap, contains, equals
from anagramarama.solver.alternates import expand_alternates
from anagramarama.solver.task_args import TaskArgs

Base = tuple[str, ...]
"""Words chosen so far.  Tuples are never extended in place, so sibling branches never
share a growing sequence."""


def search(base: Base, base_len: int, start: int, args: TaskArgs) -> list[str]:
    """Find all anagrams of the phrase that begin with `base`.

    Only candidates at positions `start` and later are added to the base.  Since every
    branch moves strictly forward through the candidate list, each combination of
    words is generated once, in a single order.

    Args:
        base (Base): The words chosen so far.
        base_len (int): Total number of letters in `base`.
        start (int): Index of the first candidate that may still be added.
        args (TaskArgs): Shared search state.

    Returns:
        The anagram lines found from this base, including alternate spellings.
    """
    plen = args.phrase_len

    # Base is longer than the phrase.
    if base_len > plen:
        return []
    # Too many words.
    if args.max_words and len(base) > args.max_words:
        return []

    if base_len < plen:
        # Nothing built on a base that does not fit the phrase can fit either.
        if not contains(args.phrase_map, *base):
            return []

        ret: list[str] = []
        cand = args.candidates
        for ix in range(start, len(cand)):
            word = cand[ix]
            new_len = base_len + len(word)
            # Candidates are sorted by length, so no later word fits either.
            if new_len > plen:
                break
            ret.extend(search(base + (word,), new_len, ix + 1, args))
        return ret

    # Same length as the phrase: need an exact match.
    if not equals(args.phrase_map, build_freqmap(*base)):
        return []
    return expand_alternates(base, args.alternates)


def search_task(task_index: int, args: TaskArgs) -> list[str]:
    """Run the search for a single top-level candidate.

    The task's base is the candidate at `task_index`, and only the candidates after it
    may be added.  Tasks for different indexes never produce the same combination.

    Args:
        task_index (int): Index of the top-level candidate.
        args (TaskArgs): Shared search state.

    Returns:
        The anagram lines found for this task.
    """
    word = args.candidates[task_index]
    return search((word,), len(word), task_index + 1, args)


def search_all(args: TaskArgs) -> list[str]:
    """Run every top-level task sequentially in the current process."""
    ret: list[str] = []
    for task_index in range(len(args.candidates)):
        ret.extend(search_task(task_index, args))
    return ret
