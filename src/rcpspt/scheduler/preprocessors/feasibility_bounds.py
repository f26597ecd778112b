"""Earliest feasible finish and latest feasible start times."""

from rcpspt.exceptions import InfeasibleInstanceError
from rcpspt.graph import backward_order, forward_order
from rcpspt.logger import get_logger
from rcpspt.models import Problem

from ..core import FeasibilityBounds
from ..resources import ResourceProfile

logger = get_logger()


class FeasibilityBoundCalculator:
    """Computes per-job time bounds via forward and backward traversals.

    Competing activities are ignored: each job is checked against the full
    capacity profile as if it had the resource timeline to itself. A job whose
    demand cannot be met anywhere within the horizon makes the whole instance
    infeasible.
    """

    def __init__(self, problem: Problem):
        self.problem = problem
        self._capacity = ResourceProfile(problem.capacities, problem.horizon)

    def compute(self) -> FeasibilityBounds:
        """Run both traversals.

        Returns:
            FeasibilityBounds with earliest finish and latest start per job

        Raises:
            InfeasibleInstanceError: If some job cannot be placed within the horizon
        """
        earliest_finish = self.earliest_finish_times()
        latest_start = self.latest_start_times()
        return FeasibilityBounds(earliest_finish=earliest_finish, latest_start=latest_start)

    def earliest_finish_times(self) -> list[int]:
        """Forward pass from the source.

        The finish time proposed to a successor is the maximum over its
        predecessors (critical path), then shifted later until the job fits.
        """
        problem = self.problem
        earliest = [0] * problem.job_count

        for job in forward_order(problem):
            duration = problem.durations[job]
            finish = self._capacity.earliest_feasible_finish(
                problem.requests[job], duration, earliest[job]
            )
            if finish is None:
                logger.debug(f"  Job {job}: no feasible finish up to horizon {problem.horizon}")
                raise InfeasibleInstanceError(job, "finish")
            earliest[job] = finish

            for successor in problem.successors[job]:
                proposed = finish + problem.durations[successor]
                if proposed > earliest[successor]:
                    earliest[successor] = proposed

        return earliest

    def latest_start_times(self) -> list[int]:
        """Backward pass from the sink.

        The start time proposed to a predecessor is the minimum over its
        successors, then shifted earlier until the job fits.
        """
        problem = self.problem
        latest = [problem.horizon] * problem.job_count

        for job in backward_order(problem):
            duration = problem.durations[job]
            start = self._capacity.latest_feasible_start(
                problem.requests[job], duration, latest[job]
            )
            if start is None:
                logger.debug(f"  Job {job}: no feasible start at or after time 0")
                raise InfeasibleInstanceError(job, "start")
            latest[job] = start

            for predecessor in problem.predecessors[job]:
                proposed = start - problem.durations[predecessor]
                if proposed < latest[predecessor]:
                    latest[predecessor] = proposed

        return latest
