# tests/test_solver.py

from __future__ import annotations

import random

import pytest

from secret_santa.core.exceptions import SolverStuckError
from secret_santa.engine import AssignmentSolver


def everyone_but_self(names):
    return {n: [m for m in names if m != n] for n in names}


def assert_bijection(names, assignments):
    givers = [a.giver for a in assignments]
    recipients = [a.recipient for a in assignments]
    assert givers == list(names)
    assert sorted(recipients) == sorted(names)
    assert all(a.giver != a.recipient for a in assignments)


@pytest.mark.parametrize("seed", range(25))
def test_solution_is_a_bijection(seed):
    names = ["A", "B", "C", "D", "E", "F", "G"]
    solver = AssignmentSolver(rng=random.Random(seed), max_attempts=1000)

    assignments = solver.solve(names, everyone_but_self(names))

    assert_bijection(names, assignments)


@pytest.mark.parametrize("seed", range(25))
def test_solution_respects_possibilities(seed):
    names = ["A", "B", "C", "D", "E"]
    possibilities = {
        "A": ["B", "C"],
        "B": ["C", "D"],
        "C": ["D", "E"],
        "D": ["E", "A"],
        "E": ["A", "B"],
    }
    solver = AssignmentSolver(rng=random.Random(seed), max_attempts=1000)

    assignments = solver.solve(names, possibilities)

    assert_bijection(names, assignments)
    for a in assignments:
        assert a.recipient in possibilities[a.giver]


def test_input_possibilities_are_not_mutated():
    names = ["A", "B", "C"]
    possibilities = everyone_but_self(names)
    snapshot = {k: list(v) for k, v in possibilities.items()}

    AssignmentSolver(rng=random.Random(3)).solve(names, possibilities)

    assert possibilities == snapshot


def test_same_seed_same_result():
    names = [f"P{i}" for i in range(12)]
    possibilities = everyone_but_self(names)

    first = AssignmentSolver(rng=random.Random(2024)).solve(names, possibilities)
    second = AssignmentSolver(rng=random.Random(2024)).solve(names, possibilities)

    assert first == second


def test_self_candidate_is_never_committed():
    # A lists itself; the only valid pairing is the swap
    names = ["A", "B"]
    possibilities = {"A": ["A", "B"], "B": ["A"]}

    for seed in range(10):
        assignments = AssignmentSolver(rng=random.Random(seed), max_attempts=50).solve(
            names, possibilities
        )
        assert [(a.giver, a.recipient) for a in assignments] == [("A", "B"), ("B", "A")]


def test_forced_chain_is_found():
    names = ["A", "B", "C", "D"]
    possibilities = {
        "A": ["B", "C", "D"],
        "B": ["C"],
        "C": ["D", "A"],
        "D": ["A"],
    }

    for seed in range(20):
        solver = AssignmentSolver(rng=random.Random(seed), max_attempts=100)
        result = {a.giver: a.recipient for a in solver.solve(names, possibilities)}
        assert result == {"A": "B", "B": "C", "C": "D", "D": "A"}


def test_empty_possibilities_exhaust_attempts():
    names = ["A", "B"]
    solver = AssignmentSolver(rng=random.Random(1), max_attempts=5)

    with pytest.raises(SolverStuckError) as exc_info:
        solver.solve(names, {"A": [], "B": []})

    assert exc_info.value.attempts == 5
    assert solver.last_attempts == 5


def test_single_participant_cannot_be_assigned():
    with pytest.raises(SolverStuckError):
        AssignmentSolver(max_attempts=3).solve(["A"], {"A": ["A"]})


def test_empty_population():
    assert AssignmentSolver(max_attempts=1).solve([], {}) == []


def test_missing_possibilities_are_rejected():
    with pytest.raises(KeyError):
        AssignmentSolver().solve(["A", "B"], {"A": ["B"]})


@pytest.mark.parametrize("bad", [0, -1])
def test_max_attempts_must_be_positive(bad):
    with pytest.raises(ValueError):
        AssignmentSolver(max_attempts=bad)
