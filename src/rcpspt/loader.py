"""Problem loading with structural validation and config discovery."""

from __future__ import annotations

from pathlib import Path

from .exceptions import CircularDependencyError, MissingReferenceError, ValidationError
from .graph import forward_order
from .models import Problem
from .parser import ProblemParser
from .unified_config import DEFAULT_CONFIG_NAME, UnifiedConfig, load_unified_config


def discover_config(
    instance_path: Path | None = None,
    config_path: Path | None = None,
) -> UnifiedConfig | None:
    """Discover unified config from various locations.

    Search order:
    1. Explicit config_path argument (set via CLI --config)
    2. Instance directory / rcpspt_config.yaml
    3. Current directory / rcpspt_config.yaml
    """
    if config_path is not None:
        return load_unified_config(config_path)

    if instance_path is not None:
        base = instance_path if instance_path.is_dir() else instance_path.parent
        dir_config = base / DEFAULT_CONFIG_NAME
        if dir_config.exists():
            return load_unified_config(dir_config)

    cwd_config = Path(DEFAULT_CONFIG_NAME)
    if cwd_config.exists():
        return load_unified_config(cwd_config)

    return None


def load_problem(path: Path | str) -> Problem:
    """Load and validate a problem instance.

    Args:
        path: Path to an instance file

    Returns:
        Structurally valid Problem

    Raises:
        ParseError: If the file cannot be parsed
        ValidationError: If the instance is malformed
    """
    problem = ProblemParser().parse_file(path)
    validate_problem(problem)
    return problem


def validate_problem(problem: Problem) -> None:  # noqa: PLR0912 - one check per invariant
    """Validate dimensions, dummy activities and acyclicity of a problem.

    The solver assumes every one of these holds; they are checked here, when
    the problem is constructed, and never during solving.
    """
    n = problem.job_count
    if n < 2:
        raise ValidationError("A problem needs at least a source and a sink job")
    if problem.resource_count < 1:
        raise ValidationError("A problem needs at least one resource")
    if problem.horizon < 1:
        raise ValidationError("The horizon must be positive")

    if len(problem.durations) != n or len(problem.successors) != n or len(problem.requests) != n:
        raise ValidationError(f"Durations, successors and requests must all have {n} entries")
    if len(problem.capacities) != problem.resource_count:
        raise ValidationError(f"Capacities must have {problem.resource_count} rows")

    for resource, row in enumerate(problem.capacities):
        if len(row) != problem.horizon:
            raise ValidationError(
                f"Resource {resource} has {len(row)} capacities, expected {problem.horizon}"
            )
        if any(value < 0 for value in row):
            raise ValidationError(f"Resource {resource} has a negative capacity")

    for job in range(n):
        duration = problem.durations[job]
        if duration < 0:
            raise ValidationError(f"Job {job} has a negative duration")
        if duration > problem.horizon:
            raise ValidationError(f"Job {job} is longer than the horizon")
        if len(problem.requests[job]) != problem.resource_count:
            raise ValidationError(f"Job {job} must have requests for every resource")
        for resource, demand in enumerate(problem.requests[job]):
            if len(demand) < duration:
                raise ValidationError(
                    f"Job {job} has {len(demand)} requests on resource {resource}, "
                    f"expected {duration}"
                )
            if any(value < 0 for value in demand):
                raise ValidationError(f"Job {job} has a negative request on resource {resource}")
        for successor in problem.successors[job]:
            if not 0 <= successor < n:
                raise MissingReferenceError(f"Job {job} has unknown successor {successor}")

    _check_dummy_activities(problem)

    if len(forward_order(problem)) != n:
        raise CircularDependencyError("Circular dependency detected in precedence graph")


def _check_dummy_activities(problem: Problem) -> None:
    source, sink = problem.source, problem.sink
    if problem.durations[source] != 0 or problem.predecessors[source]:
        raise ValidationError("Job 0 must be a zero-duration source without predecessors")
    if problem.durations[sink] != 0 or problem.successors[sink]:
        raise ValidationError(f"Job {sink} must be a zero-duration sink without successors")

    for job in range(problem.job_count):
        if job != source and not problem.predecessors[job]:
            raise ValidationError(f"Job {job} has no predecessors; only job 0 may be a source")
        if job != sink and not problem.successors[job]:
            raise ValidationError(f"Job {job} has no successors; only job {sink} may be a sink")
