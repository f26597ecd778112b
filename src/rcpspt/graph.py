"""Breadth-first traversal orders over the precedence graph."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Problem


def forward_order(problem: Problem) -> list[int]:
    """Breadth-first order from the source, visiting a job after all its predecessors.

    Jobs on a cycle, or not reachable from the source, are left out, so a
    result shorter than ``problem.job_count`` means the graph is malformed.

    Returns:
        List of job indices in topological order
    """
    in_degree = [len(preds) for preds in problem.predecessors]
    queue: deque[int] = deque([problem.source])
    result: list[int] = []

    while queue:
        job = queue.popleft()
        result.append(job)
        for successor in problem.successors[job]:
            in_degree[successor] -= 1
            if in_degree[successor] == 0:
                queue.append(successor)

    return result


def backward_order(problem: Problem) -> list[int]:
    """Breadth-first order from the sink, visiting a job after all its successors.

    Returns:
        List of job indices in reverse topological order
    """
    out_degree = [len(succs) for succs in problem.successors]
    queue: deque[int] = deque([problem.sink])
    result: list[int] = []

    while queue:
        job = queue.popleft()
        result.append(job)
        for predecessor in problem.predecessors[job]:
            out_degree[predecessor] -= 1
            if out_degree[predecessor] == 0:
                queue.append(predecessor)

    return result
