from anagramarama.solver.alternates import expand_alternates

ALTERNATES = {
    "ACT": ("ACT", "CAT", "TAC"),
    "AT": ("AT", "TA"),
    "C": ("C",),
}


def test_expand_without_alternates() -> None:
    assert expand_alternates(("C",), ALTERNATES) == ["C"]
    # Words missing from the index are kept as they are.
    assert expand_alternates(("DOG",), ALTERNATES) == ["DOG"]


def test_expand_single_position() -> None:
    assert expand_alternates(("ACT",), ALTERNATES) == ["ACT", "CAT", "TAC"]


def test_expand_multiplies_group_sizes() -> None:
    lines = expand_alternates(("AT", "C", "ACT"), ALTERNATES)
    assert lines[0] == "AT C ACT"
    assert len(lines) == 2 * 1 * 3
    assert len(set(lines)) == len(lines)
    assert set(lines) == {
        f"{a} C {b}" for a in ("AT", "TA") for b in ("ACT", "CAT", "TAC")
    }


def test_expand_does_not_modify_solution() -> None:
    solution = ["AT", "ACT"]
    expand_alternates(solution, ALTERNATES)
    assert solution == ["AT", "ACT"]
