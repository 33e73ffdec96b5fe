"""Utility functions for anagramarama."""

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


def signature(word: str) -> str:
    """Canonical sorted-letter signature of a word.

    Two words share a signature exactly when they are anagrams of each other.
    """
    return "".join(sorted(word))


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.ss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"
