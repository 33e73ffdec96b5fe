"""Candidate word filtering for the anagram solver."""

from collections.abc import Iterable
from dataclasses import dataclass

from anagramarama.freqmap import build_freqmap, contains
from anagramarama.utils import signature


@dataclass(frozen=True)
class Candidates:
    """Words usable for anagramming a phrase.

    Pickleable, so that it can be handed to worker processes.
    """

    words: tuple[str, ...]
    """Candidate words, sorted by ascending length (ties keep dictionary order).

    Only the first word seen for each letter signature is listed here.
    """

    alternates: dict[str, tuple[str, ...]]
    """Mapping of a letter signature to all distinct candidate words with that signature.

    The first member of each group is the one listed in `words`.  Treat as read-only.
    """

    def __len__(self) -> int:
        return len(self.words)

    def group(self, word: str) -> tuple[str, ...]:
        """Return the alternate group for `word`, or just the word if it has none."""
        return self.alternates.get(signature(word), (word,))


def is_letters(word: str) -> bool:
    """Returns whether the word consists of uppercase letters A-Z only."""
    return all("A" <= ch <= "Z" for ch in word)


def candidates(
    words: Iterable[str],
    phrase: str,
    *,
    min_word_len: int = 0,
    max_word_len: int = 0,
) -> Candidates:
    """Filter a raw word list down to the words usable in anagrams of `phrase`.

    Words are converted to uppercase.  Words containing anything other than letters
    are silently dropped, as are words whose letters cannot be drawn from the phrase.
    Words that are anagrams of an earlier candidate are kept only as alternates.

    Args:
        words: Raw dictionary words, in dictionary order.
        phrase: The sanitized phrase (uppercase letters A-Z).
        min_word_len: Minimum word length to accept (0 = no minimum).
        max_word_len: Maximum word length to accept (0 = no maximum).

    Returns:
        The candidate words and the alternate groups.
    """
    phrase_map = build_freqmap(phrase)
    phrase_len = sum(phrase_map)

    cand: list[str] = []
    groups: dict[str, list[str]] = {}

    for word in words:
        # Uppercasing can change the length (e.g. "ß" -> "SS"), so do it first.
        word = word.upper()
        wlen = len(word)
        if wlen > phrase_len:
            continue
        if min_word_len and wlen < min_word_len:
            continue
        if max_word_len and wlen > max_word_len:
            continue

        if not is_letters(word):
            continue
        if not contains(phrase_map, word):
            continue

        sig = signature(word)
        group = groups.get(sig)
        if group is None:
            groups[sig] = [word]
            cand.append(word)
        elif word not in group:
            group.append(word)

    # sort() is stable, so words of equal length keep their dictionary order.
    cand.sort(key=len)
    return Candidates(
        words=tuple(cand),
        alternates={sig: tuple(group) for sig, group in groups.items()},
    )
