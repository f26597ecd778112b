"""Independent feasibility check of a finish-time assignment."""

from dataclasses import dataclass, field

from rcpspt.models import Problem


def _default_violations() -> list["Violation"]:
    return []


@dataclass(frozen=True)
class Violation:
    """A single constraint violated by a schedule."""

    kind: str  # "length" | "horizon" | "precedence" | "resource"
    job: int | None
    message: str
    resource: int | None = None
    time: int | None = None


@dataclass
class SolutionReport:
    """Result of validating a schedule."""

    violations: list[Violation] = field(default_factory=_default_violations)

    @property
    def valid(self) -> bool:
        """True if the schedule violates no constraint."""
        return not self.violations

    def describe(self) -> str:
        """Human-readable summary of all violations."""
        if self.valid:
            return "valid"
        return "; ".join(v.message for v in self.violations)


def validate_solution(problem: Problem, finish_times: list[int]) -> SolutionReport:
    """Check precedence and resource feasibility of a schedule.

    Only the finish times are inspected; how the schedule was built does not
    matter and ``finish_times`` is not modified.

    Args:
        problem: Problem instance
        finish_times: Finish time per job

    Returns:
        SolutionReport listing every violation found
    """
    report = SolutionReport()

    if len(finish_times) != problem.job_count:
        report.violations.append(
            Violation(
                kind="length",
                job=None,
                message=f"expected {problem.job_count} finish times, got {len(finish_times)}",
            )
        )
        return report

    _check_horizon(problem, finish_times, report)
    if not report.valid:
        return report

    _check_precedence(problem, finish_times, report)
    _check_resources(problem, finish_times, report)
    return report


def _check_horizon(problem: Problem, finish_times: list[int], report: SolutionReport) -> None:
    for job, finish in enumerate(finish_times):
        start = problem.start_time(job, finish_times)
        if start < 0 or finish > problem.horizon:
            report.violations.append(
                Violation(
                    kind="horizon",
                    job=job,
                    message=f"job {job} occupies [{start}, {finish}) outside [0, {problem.horizon})",
                )
            )


def _check_precedence(problem: Problem, finish_times: list[int], report: SolutionReport) -> None:
    for job in range(problem.job_count):
        start = problem.start_time(job, finish_times)
        for predecessor in problem.predecessors[job]:
            if finish_times[predecessor] > start:
                report.violations.append(
                    Violation(
                        kind="precedence",
                        job=job,
                        message=(
                            f"job {job} starts at {start} before predecessor "
                            f"{predecessor} finishes at {finish_times[predecessor]}"
                        ),
                    )
                )


def _check_resources(problem: Problem, finish_times: list[int], report: SolutionReport) -> None:
    usage = [[0] * problem.horizon for _ in range(problem.resource_count)]
    first_job_at: dict[tuple[int, int], int] = {}

    for job in range(problem.job_count):
        duration = problem.durations[job]
        start = problem.start_time(job, finish_times)
        for resource in range(problem.resource_count):
            demand = problem.requests[job][resource]
            for offset in range(duration):
                t = start + offset
                usage[resource][t] += demand[offset]
                if usage[resource][t] > problem.capacities[resource][t]:
                    key = (resource, t)
                    if key not in first_job_at:
                        first_job_at[key] = job

    for (resource, t), job in sorted(first_job_at.items()):
        report.violations.append(
            Violation(
                kind="resource",
                job=job,
                resource=resource,
                time=t,
                message=(
                    f"resource {resource} demand {usage[resource][t]} exceeds capacity "
                    f"{problem.capacities[resource][t]} at t={t} (first exceeded by job {job})"
                ),
            )
        )
