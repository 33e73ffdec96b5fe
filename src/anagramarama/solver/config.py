"""Anagram solver configuration."""

from typing import Self

from dotenv import find_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv(usecwd=True) or None


class SolverConfig(BaseSettings):
    """Configuration settings for the anagram solver.

    Values are read from `ANAGRAMARAMA_*` environment variables and from a `.env` file,
    and may be overridden with keyword arguments (as the command line does).
    """

    min_word_len: int = Field(default=0, ge=0)
    """Reject candidate words shorter than this. 0 (default) means no minimum."""

    max_word_len: int = Field(default=0, ge=0)
    """Reject candidate words longer than this. 0 (default) means no maximum."""

    max_words: int = Field(default=16, ge=0)
    """Maximum number of words in one anagram. 0 means no maximum. Default: 16."""

    parallelism: int | None = Field(default=None, ge=1)
    """Number of worker processes to use. If None (default), uses os.cpu_count()."""

    dict_path: str = "words.txt"
    """Dictionary file, one word per line. Default: words.txt."""

    sort_words: bool = True
    """Whether to sort the words inside each output line. Default: True."""

    sort_lines: bool = False
    """Whether to sort the output lines. Default: False."""

    log_file: str | None = None
    """File to write the run log to. If None (default), logs go to stderr."""

    model_config = SettingsConfigDict(
        env_prefix="ANAGRAMARAMA_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )

    @model_validator(mode="after")
    def check_word_len_bounds(self) -> Self:
        """Reject a minimum word length above the maximum (when both are set)."""
        if self.min_word_len and self.max_word_len and self.min_word_len > self.max_word_len:
            raise ValueError(
                f"min_word_len ({self.min_word_len}) exceeds max_word_len ({self.max_word_len})"
            )
        return self
