"""Module for letter frequency maps."""

from array import array
from typing import TypeAlias

FREQMAP_LEN = 26
"""Number of slots in a frequency map, one per uppercase letter A-Z."""

_ORD_A = ord("A")

FrequencyMap: TypeAlias = "array[int]"
"""An array of 26 integers representing counts of letters A-Z."""


def build_freqmap(*words: str) -> FrequencyMap:
    """Create a frequency map from one or more strings.

    Each letter A-Z in the strings increments its slot.  Any other character
    (spaces, punctuation, lowercase letters) is skipped.

    Args:
        words: The strings to count.

    Returns:
        An array of 26 integers, where each index corresponds to a letter A-Z
        and the value at that index is the count of that letter in the input.
    """
    fm = array("I", [0] * FREQMAP_LEN)
    for word in words:
        for ch in word:
            idx = ord(ch) - _ORD_A
            if 0 <= idx < FREQMAP_LEN:
                fm[idx] += 1
    return fm


def contains(base: FrequencyMap, *words: str) -> bool:
    """Returns whether all letters in `words` can be drawn from `base`.

    `base` is never modified.  Counts are tracked on an overlay whose slots are copied
    from `base` only when the corresponding letter is first seen, so the check costs
    one step per letter instead of a full copy of the map.

    Args:
        base: The frequency map to draw letters from.
        words: The strings whose letters must be drawn.
    """
    overlay = [-1] * FREQMAP_LEN
    for word in words:
        for ch in word:
            idx = ord(ch) - _ORD_A
            if idx < 0 or idx >= FREQMAP_LEN:
                continue
            left = overlay[idx]
            if left < 0:
                left = base[idx]
            if left == 0:
                return False
            overlay[idx] = left - 1
    return True


def equals(a: FrequencyMap, b: FrequencyMap) -> bool:
    """Returns whether two frequency maps hold the same count for every letter."""
    if len(a) != len(b):
        return False
    return all(a[idx] == b[idx] for idx in range(FREQMAP_LEN))


def freqmap_to_string(fm: FrequencyMap) -> str:
    """Convert a frequency map to a string holding each letter `count` times, in order A-Z."""
    return "".join(chr(_ORD_A + idx) * fm[idx] for idx in range(FREQMAP_LEN))
