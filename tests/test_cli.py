import sys
from pathlib import Path

import pytest

from anagramarama import main
from anagramarama.solver.config import SolverConfig
from anagramarama.solver.solver import anagrams, get_worker_count, run

DICT = str(Path(__file__).parent / "data" / "words.txt")


def test_main_prints_sorted_anagrams(capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["--dict", DICT, "--workers", "1", "--sortlines", "c", "a", "t"])
    assert rc == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["ACT", "AT C", "C TA", "CAT", "TAC"]


def test_main_maxwords(capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["--dict", DICT, "--workers", "2", "--maxwords", "1", "--sortlines", "Cat!"])
    assert rc == 0
    assert capsys.readouterr().out.splitlines() == ["ACT", "CAT", "TAC"]


def test_main_unsorted_words(capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["--dict", DICT, "--workers", "1", "--sortlines", "--no-sortwords", "CAT"])
    assert rc == 0
    assert capsys.readouterr().out.splitlines() == ["ACT", "C AT", "C TA", "CAT", "TAC"]


def test_main_candidates(capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["--dict", DICT, "--candidates", "CAT"])
    assert rc == 0
    assert capsys.readouterr().out.splitlines() == ["A", "C", "AT TA", "ACT CAT TAC"]


def test_main_silent(capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["--dict", DICT, "--workers", "1", "--silent", "CAT"])
    assert rc == 0
    assert capsys.readouterr().out == ""


def test_main_errors(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    assert main(["--dict", str(tmp_path / "INVALIDFILE"), "CAT"]) == 1
    assert "Word list file not found" in capsys.readouterr().err

    assert main(["--dict", DICT, "123"]) == 1
    assert "no letters" in capsys.readouterr().err

    assert main(["--dict", DICT, "--minlen", "5", "--maxlen", "3", "CAT"]) == 1
    assert "Invalid configuration" in capsys.readouterr().err


def test_main_usage_error() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2


def test_main_log_file_and_profile(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "run.log"
    profile = tmp_path / "cpu.prof"
    rc = main(
        [
            "--dict", DICT,
            "--workers", "1",
            "--log-file", str(log_file),
            "--cpuprofile", str(profile),
            "CAT",
        ]
    )  # fmt: skip
    assert rc == 0
    assert len(capsys.readouterr().out.splitlines()) == 5
    log = log_file.read_text(encoding="utf-8")
    assert "Solver config:" in log
    assert "Found 5 anagrams" in log
    assert profile.is_file()


def test_run_returns_lines(tmp_path: Path) -> None:
    config = SolverConfig(_env_file=None, dict_path=DICT, parallelism=1, sort_lines=True)
    out = tmp_path / "out.txt"
    with out.open("w", encoding="utf-8") as f:
        lines = run("cat", config, out=f)
    assert lines == ["ACT", "AT C", "C TA", "CAT", "TAC"]
    assert out.read_text(encoding="utf-8").splitlines() == lines


def test_anagrams_without_candidates() -> None:
    config = SolverConfig(_env_file=None, parallelism=2)
    assert anagrams("CAT", ["dog", "god", "zebra"], config) == []


def test_anagrams_parallelism_invariance() -> None:
    words = ["A", "BC", "AB", "C", "ABC", "CBA", "BA"]
    serial = anagrams("ABC", words, SolverConfig(_env_file=None, parallelism=1, max_words=3))
    parallel = anagrams("ABC", words, SolverConfig(_env_file=None, parallelism=3, max_words=3))
    assert sorted(serial) == sorted(parallel)
    assert set(serial) == {"ABC", "CBA", "A BC", "C AB", "C BA"}


def test_get_worker_count(capsys: pytest.CaptureFixture[str]) -> None:
    assert get_worker_count(None, logf=sys.stderr) >= 1
    assert get_worker_count(10_000, logf=sys.stderr) == 10_000
    assert "exceeds CPU count" in capsys.readouterr().err
