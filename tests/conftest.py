"""Pytest configuration and fixtures for rcpspt tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from rcpspt.logger import reset_logger
from rcpspt.models import Problem

SAMPLE_SMT = """\
************************************************************************
file with basedata            : sample.bas
initial value random generator: 12345
************************************************************************
projects                      :  1
jobs (incl. supersource/sink ):  4
horizon                       :  6
RESOURCES
  - renewable                 :  2   R
  - nonrenewable              :  0   N
  - doubly constrained        :  0   D
************************************************************************
PRECEDENCE RELATIONS:
jobnr.    #modes  #successors   successors
   1        1          2           2   3
   2        1          1           4
   3        1          1           4
   4        1          0
************************************************************************
REQUESTS/DURATIONS:
jobnr. mode duration  R 1  R 2
------------------------------------------------------------------------
  1      1     0
  2      1     2       1  2     0  1
  3      1     1       2        1
  4      1     0
************************************************************************
RESOURCEAVAILABILITIES:
  R 1  R 2
  2  2  2  2  2  2
  1  1  1  1  1  1
************************************************************************
"""

INFEASIBLE_SMT = """\
************************************************************************
jobs (incl. supersource/sink ):  3
horizon                       :  4
RESOURCES
  - renewable                 :  1   R
************************************************************************
PRECEDENCE RELATIONS:
jobnr.    #modes  #successors   successors
   1        1          1           2
   2        1          1           3
   3        1          0
************************************************************************
REQUESTS/DURATIONS:
jobnr. mode duration  R 1
------------------------------------------------------------------------
  1      1     0
  2      1     2       3  3
  3      1     0
************************************************************************
RESOURCEAVAILABILITIES:
  R 1
  2  2  2  2
************************************************************************
"""


@pytest.fixture(autouse=True)
def clean_logger() -> Iterator[None]:
    """Reset the logger before and after each test for isolation."""
    reset_logger()
    yield
    reset_logger()


def make_problem(
    horizon: int,
    durations: list[int],
    successors: list[list[int]],
    requests: list[list[list[int]]],
    capacities: list[list[int]],
) -> Problem:
    """Build a Problem from successor lists.

    Example:
        make_problem(10, [0, 2, 0], [[1], [2], []], [[[]], [[1, 1]], [[]]], [[5] * 10])
    """
    return Problem.from_successors(
        horizon=horizon,
        durations=durations,
        successors=successors,
        requests=requests,
        capacities=capacities,
    )


@pytest.fixture
def chain_problem() -> Problem:
    """Source, one job of duration 2 with demand 1, sink; capacity 5 over horizon 10."""
    return make_problem(
        horizon=10,
        durations=[0, 2, 0],
        successors=[[1], [2], []],
        requests=[[[]], [[1, 1]], [[]]],
        capacities=[[5] * 10],
    )


@pytest.fixture
def bottleneck_problem() -> Problem:
    """Two unrelated unit jobs that each need the full capacity."""
    return make_problem(
        horizon=4,
        durations=[0, 1, 1, 0],
        successors=[[1, 2], [3], [3], []],
        requests=[[[]], [[3]], [[3]], [[]]],
        capacities=[[3] * 4],
    )


@pytest.fixture
def impossible_problem() -> Problem:
    """A job whose demand exceeds the capacity at every time step."""
    return make_problem(
        horizon=10,
        durations=[0, 2, 0],
        successors=[[1], [2], []],
        requests=[[[]], [[6, 6]], [[]]],
        capacities=[[5] * 10],
    )


@pytest.fixture
def crowded_problem() -> Problem:
    """Feasible in isolation, but two overlapping jobs never fit before the horizon."""
    return make_problem(
        horizon=3,
        durations=[0, 2, 2, 0],
        successors=[[1, 2], [3], [3], []],
        requests=[[[]], [[1, 1]], [[1, 1]], [[]]],
        capacities=[[1] * 3],
    )


@pytest.fixture
def project_problem() -> Problem:
    """Eight jobs, two resources, time-varying capacity and demand shapes."""
    capacity_r0 = [4] * 30
    for t in range(5, 8):
        capacity_r0[t] = 2
    return make_problem(
        horizon=30,
        durations=[0, 3, 2, 4, 2, 3, 1, 0],
        successors=[[1, 2, 3], [4], [4, 5], [6], [7], [7], [7], []],
        requests=[
            [[], []],
            [[2, 2, 2], [1, 0, 1]],
            [[3, 1], [2, 2]],
            [[1, 1, 1, 1], [3, 0, 0, 3]],
            [[2, 3], [1, 1]],
            [[4, 0, 4], [0, 1, 0]],
            [[1], [3]],
            [[], []],
        ],
        capacities=[capacity_r0, [3] * 30],
    )
