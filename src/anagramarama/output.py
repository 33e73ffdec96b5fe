"""Sorting helpers for anagram output."""

from collections.abc import Iterable

from sortedcontainers import SortedList


def sort_words(lines: Iterable[str]) -> list[str]:
    """Sort the words inside each line, keeping the order of the lines.

    Lines that only differ in word order become identical, which makes output
    from different runs easy to compare.
    """
    return [" ".join(sorted(line.split(" "))) for line in lines]


def sort_lines(lines: Iterable[str]) -> list[str]:
    """Return the lines in sorted order."""
    return list(SortedList(lines))
