"""Tests for precedence graph traversal orders."""

from rcpspt.graph import backward_order, forward_order
from rcpspt.models import Problem
from tests.conftest import make_problem


def test_forward_order_respects_predecessors(project_problem: Problem) -> None:
    order = forward_order(project_problem)

    assert order[0] == project_problem.source
    assert sorted(order) == list(range(project_problem.job_count))
    position = {job: i for i, job in enumerate(order)}
    for job, preds in enumerate(project_problem.predecessors):
        for pred in preds:
            assert position[pred] < position[job]


def test_backward_order_respects_successors(project_problem: Problem) -> None:
    order = backward_order(project_problem)

    assert order[0] == project_problem.sink
    assert sorted(order) == list(range(project_problem.job_count))
    position = {job: i for i, job in enumerate(order)}
    for job, succs in enumerate(project_problem.successors):
        for succ in succs:
            assert position[succ] < position[job]


def test_join_visited_once(bottleneck_problem: Problem) -> None:
    """A job with several predecessors appears exactly once."""
    assert forward_order(bottleneck_problem) == [0, 1, 2, 3]
    assert backward_order(bottleneck_problem) == [3, 1, 2, 0]


def test_cycle_leaves_jobs_unvisited() -> None:
    problem = make_problem(
        horizon=10,
        durations=[0, 1, 1, 0],
        successors=[[1], [2], [1, 3], []],
        requests=[[[]], [[1]], [[1]], [[]]],
        capacities=[[2] * 10],
    )

    assert forward_order(problem) == [0]
