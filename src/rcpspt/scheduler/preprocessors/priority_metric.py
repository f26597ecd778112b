"""Extended resource utilization and CPRU priority values."""

import math

from rcpspt.graph import backward_order
from rcpspt.models import Problem

from ..core import FeasibilityBounds, PriorityMetrics
from ..resources import ResourceProfile

DEFAULT_OMEGA1 = 0.4
DEFAULT_OMEGA2 = 0.6


class PriorityMetricCalculator:
    """Computes the CPRU (critical path and resource utilization) score per job.

    For each job, from the sink backwards:

        ru = omega1 * (successors / resources) * (demand / availability)
             + omega2 * sum(ru of direct successors)
        cpru = (horizon - latest_start) * ru

    where availability is the total capacity over the job's feasible window
    ``[earliest_finish - duration, latest_start + duration)``. Values that come
    out NaN, infinite or negative are clamped to zero.
    """

    def __init__(
        self,
        problem: Problem,
        bounds: FeasibilityBounds,
        *,
        omega1: float = DEFAULT_OMEGA1,
        omega2: float = DEFAULT_OMEGA2,
    ):
        self.problem = problem
        self.bounds = bounds
        self.omega1 = omega1
        self.omega2 = omega2
        self._capacity = ResourceProfile(problem.capacities, problem.horizon)

    def compute(self) -> PriorityMetrics:
        """Compute resource utilization and CPRU values for every job."""
        problem = self.problem
        ru = [0.0] * problem.job_count

        for job in backward_order(problem):
            ru[job] = self._resource_utilization(job, ru)

        cpru = [
            (problem.horizon - self.bounds.latest_start[job]) * ru[job]
            for job in range(problem.job_count)
        ]
        return PriorityMetrics(resource_utilization=ru, cpru=cpru)

    def _resource_utilization(self, job: int, ru: list[float]) -> float:
        problem = self.problem
        duration = problem.durations[job]

        demand = sum(sum(row[:duration]) for row in problem.requests[job])
        availability = self._capacity.total_supply(
            self.bounds.earliest_finish[job] - duration,
            self.bounds.latest_start[job] + duration,
        )

        own = 0.0
        if availability > 0 and problem.resource_count > 0:
            own = (problem.successor_count(job) / problem.resource_count) * (demand / availability)

        value = self.omega1 * own + self.omega2 * sum(ru[s] for s in problem.successors[job])
        if math.isnan(value) or math.isinf(value) or value < 0.0:
            return 0.0
        return value
