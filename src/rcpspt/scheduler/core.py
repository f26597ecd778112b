"""Core dataclasses for the scheduling system."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


def _default_int_list() -> list[int]:
    return []


def _default_str_list() -> list[str]:
    return []


def _default_dict() -> dict[str, Any]:
    return {}


@dataclass(frozen=True)
class FeasibilityBounds:
    """Per-job bounds computed under resource constraints alone.

    Each job is evaluated as if it had the resource timeline to itself.
    """

    earliest_finish: list[int]
    latest_start: list[int]


@dataclass(frozen=True)
class PriorityMetrics:
    """Per-job priority values derived from the feasibility bounds."""

    resource_utilization: list[float]  # Extended resource utilization (RU)
    cpru: list[float]  # Critical path length times RU


@dataclass
class PreProcessResult:
    """Result of the pre-processing phase (bounds and priorities)."""

    bounds: FeasibilityBounds
    priorities: PriorityMetrics
    metadata: dict[str, Any] = field(default_factory=_default_dict)


class SolveStatus(str, Enum):
    """Outcome of a solve call."""

    FOUND = "found"
    NOT_FOUND = "not_found"  # Every trial abandoned or beyond the horizon
    INFEASIBLE_INSTANCE = "infeasible_instance"  # Bound computation failed


@dataclass
class TrialResult:
    """Outcome of a single serial SGS pass."""

    index: int
    finish_times: list[int] | None  # None if the trial was abandoned
    makespan: int | None = None  # Finish time of the sink
    abandoned_job: int | None = None


@dataclass
class SolveResult:
    """Result of solving one problem instance.

    ``finish_times`` is only populated when ``status`` is ``FOUND``.
    """

    status: SolveStatus
    finish_times: list[int] | None = None
    makespan: int | None = None  # Finish time of the sink
    trials_completed: int = 0
    trials_abandoned: int = 0
    # Best makespan after each completed trial (non-increasing)
    best_makespan_history: list[int] = field(default_factory=_default_int_list)
    message: str | None = None
    algorithm_metadata: dict[str, Any] = field(default_factory=_default_dict)

    @property
    def found(self) -> bool:
        """True if a feasible schedule was found."""
        return self.status == SolveStatus.FOUND


@dataclass
class SchedulingResult:
    """Complete result of a scheduling run including timing and validation."""

    solve: SolveResult
    elapsed_ms: int
    valid: bool | None = None  # None when validation was skipped or nothing found
    warnings: list[str] = field(default_factory=_default_str_list)

    @property
    def found(self) -> bool:
        """True if a feasible schedule was found."""
        return self.solve.found

    @property
    def finish_times(self) -> list[int] | None:
        """Finish times of the best schedule, if any."""
        return self.solve.finish_times

    @property
    def makespan(self) -> int | None:
        """Makespan of the best schedule, if any."""
        return self.solve.makespan
