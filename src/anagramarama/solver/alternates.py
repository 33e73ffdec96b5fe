"""Expansion of a found anagram into its alternate spellings."""

from collections.abc import Mapping, Sequence

from anagramarama.utils import signature


def expand_alternates(
    solution: Sequence[str], alternates: Mapping[str, Sequence[str]]
) -> list[str]:
    """Expand one anagram into every line obtained by swapping in alternate words.

    Positions are processed left to right.  Whenever the word at a position has
    alternates, every line produced so far forks once per alternate (the original word
    is not repeated), so the number of lines is the product of the group sizes.

    Note: the output grows multiplicatively with the number of words that have
    alternates.  No cap is applied.

    Args:
        solution: The words of one anagram, in order.
        alternates: Mapping of letter signature to all words sharing that signature.

    Returns:
        The space-joined lines, starting with the original solution.
    """
    lines: list[list[str]] = [list(solution)]
    for pos, word in enumerate(solution):
        group = alternates.get(signature(word), ())
        if len(group) <= 1:
            continue
        forks: list[list[str]] = []
        for line in lines:
            for alt in group:
                if alt == word:
                    continue
                fork = line.copy()
                fork[pos] = alt
                forks.append(fork)
        lines.extend(forks)
    return [" ".join(line) for line in lines]
