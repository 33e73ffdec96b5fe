"""Shared, read-only search state for anagram solver tasks."""

from datetime import datetime
from time import time

from anagramarama.candidates import Candidates
from anagramarama.freqmap import build_freqmap, freqmap_to_string
from anagramarama.utils import TIMESTAMP_FMT


class TaskArgs:
    """Wrapper for task arguments for the solver.

    Pickleable, so that it can be used with multiprocessing (passed to worker processes).
    Built once before any task runs and never modified afterwards; every worker reads
    the same values, so no locking is needed.
    """

    def __init__(self, *, phrase: str, candidates: Candidates, max_words: int) -> None:
        """Initialize the task arguments.

        Args:
            phrase (str): The sanitized phrase (uppercase letters A-Z).
            candidates (Candidates): Candidate words and alternate groups for the phrase.
            max_words (int): Maximum number of words per anagram (0 = no maximum).
        """
        self.phrase = phrase
        """The sanitized phrase."""

        self.phrase_map = build_freqmap(phrase)
        """Frequency map of the phrase."""

        self.phrase_len = sum(self.phrase_map)
        """Number of letters in the phrase."""

        self.candidates = candidates.words
        """Candidate words, sorted by ascending length."""

        self.alternates = candidates.alternates
        """Mapping of letter signature to alternate words."""

        self.max_words = max_words
        """Maximum number of words per anagram (0 = no maximum)."""

        self.start_time = time()
        """Timestamp when the solver started, in seconds since the epoch."""

    def summary(self) -> dict[str, object]:
        """Return a dictionary-based summary of the task arguments."""
        return {
            "phrase": self.phrase,
            "phrase_letters": freqmap_to_string(self.phrase_map),
            "phrase_len": self.phrase_len,
            "candidates_count": len(self.candidates),
            "alternates_count": sum(len(g) - 1 for g in self.alternates.values()),
            "max_words": self.max_words,
            "start_time": datetime.fromtimestamp(self.start_time)
            .astimezone()
            .strftime(TIMESTAMP_FMT),
        }
