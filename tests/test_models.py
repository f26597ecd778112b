"""Tests for the Problem data model."""

import dataclasses

import pytest

from rcpspt.models import Problem


def test_predecessors_derived_from_successors(project_problem: Problem) -> None:
    assert project_problem.predecessors[4] == [1, 2]
    assert project_problem.predecessors[7] == [4, 5, 6]
    assert project_problem.predecessors[0] == []


def test_counts_and_dummy_jobs(project_problem: Problem) -> None:
    assert project_problem.job_count == 8
    assert project_problem.resource_count == 2
    assert project_problem.source == 0
    assert project_problem.sink == 7
    assert project_problem.successor_count(2) == 2


def test_makespan_and_start_time(chain_problem: Problem) -> None:
    finish_times = [0, 5, 5]

    assert chain_problem.makespan(finish_times) == 5
    assert chain_problem.start_time(1, finish_times) == 3


def test_problem_is_immutable(chain_problem: Problem) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        chain_problem.horizon = 20  # type: ignore[misc]
