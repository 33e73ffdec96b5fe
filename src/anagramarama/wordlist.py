"""Module for word list and phrase handling in anagramarama."""

import re
from os import PathLike
from pathlib import Path

NON_LETTER_PATTERN = re.compile(r"[^A-Z]")


def load_word_list(path: str | PathLike) -> list[str]:
    """Load the word list from a dictionary file, one word per line.

    Words are returned unchanged apart from stripping surrounding whitespace, in file
    order.  Empty lines are skipped.  Filtering happens later, in `candidates`.

    Args:
        path: Path to the dictionary file.

    Returns:
        A list of words.
    """
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    with word_list_path.open("r", encoding="utf-8") as f:
        return [stripped for line in f if (stripped := line.strip())]


def sanitize(phrase: str) -> str:
    """Convert the phrase to uppercase and remove all characters that are not A-Z."""
    return NON_LETTER_PATTERN.sub("", phrase.upper())
