import pytest
from pydantic import ValidationError

from anagramarama.solver.config import SolverConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ANAGRAMARAMA_MAX_WORDS", raising=False)
    config = SolverConfig(_env_file=None)
    assert config.min_word_len == 0
    assert config.max_word_len == 0
    assert config.max_words == 16
    assert config.parallelism is None
    assert config.sort_words is True
    assert config.sort_lines is False


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANAGRAMARAMA_MAX_WORDS", "3")
    monkeypatch.setenv("ANAGRAMARAMA_DICT_PATH", "/tmp/words.txt")
    config = SolverConfig(_env_file=None)
    assert config.max_words == 3
    assert config.dict_path == "/tmp/words.txt"

    # Keyword arguments take precedence over the environment.
    assert SolverConfig(_env_file=None, max_words=5).max_words == 5


def test_env_file(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ANAGRAMARAMA_MIN_WORD_LEN", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("ANAGRAMARAMA_MIN_WORD_LEN=4\n", encoding="utf-8")
    assert SolverConfig(_env_file=env_file).min_word_len == 4


def test_invalid_word_length_bounds() -> None:
    with pytest.raises(ValidationError, match="exceeds max_word_len"):
        SolverConfig(_env_file=None, min_word_len=5, max_word_len=3)
    # 0 means unbounded, so it never conflicts.
    assert SolverConfig(_env_file=None, min_word_len=5, max_word_len=0).min_word_len == 5


@pytest.mark.parametrize(
    "field,value",
    [("min_word_len", -1), ("max_word_len", -1), ("max_words", -1), ("parallelism", 0)],
)
def test_invalid_values(field: str, value: int) -> None:
    with pytest.raises(ValidationError):
        SolverConfig(_env_file=None, **{field: value})


def test_unknown_field_rejected() -> None:
    with pytest.raises(ValidationError):
        SolverConfig(_env_file=None, bogus=1)
