"""High-level scheduling service."""

import random
import time

from rcpspt.exceptions import InfeasibleInstanceError
from rcpspt.logger import checks_enabled, get_logger
from rcpspt.models import Problem

from .algorithms import create_algorithm
from .config import SolverConfig
from .core import SchedulingResult, SolveResult, SolveStatus
from .preprocessors import create_preprocessor
from .protocols import PreProcessor, SchedulingAlgorithm
from .validator import validate_solution

logger = get_logger()


class SchedulingService:
    """High-level service for solving a problem instance.

    This service coordinates:
    - PreProcessor (feasibility bounds and CPRU priorities)
    - SchedulingAlgorithm (randomized tournament trials)
    - Solution validation (advisory)

    and measures the elapsed computation time.
    """

    def __init__(self, config: SolverConfig | None = None):
        """Initialize scheduling service.

        Args:
            config: Optional solver configuration
        """
        self.config = config or SolverConfig()

    def solve(self, problem: Problem, *, rng: random.Random | None = None) -> SolveResult:
        """Compute bounds, priorities and the best schedule for a problem.

        Instance-level infeasibility is reported as a result value, never raised.

        Args:
            problem: Problem instance (read only)
            rng: Optional master random generator (overrides ``config.seed``)

        Returns:
            SolveResult distinguishing FOUND, NOT_FOUND and INFEASIBLE_INSTANCE

        Raises:
            UnsupportedAlgorithmError: If the configured algorithm is not implemented
        """
        preprocessor: PreProcessor = create_preprocessor(self.config)
        try:
            preprocess_result = preprocessor.process(problem)
        except InfeasibleInstanceError as e:
            logger.changes(f"Instance infeasible: {e}")
            return SolveResult(status=SolveStatus.INFEASIBLE_INSTANCE, message=str(e))

        logger.debug(f"  Earliest finish: {preprocess_result.bounds.earliest_finish}")
        logger.debug(f"  Latest start: {preprocess_result.bounds.latest_start}")
        logger.debug(f"  CPRU: {preprocess_result.priorities.cpru}")

        algorithm: SchedulingAlgorithm = create_algorithm(
            self.config.algorithm.type,
            problem,
            config=self.config,
            preprocess_result=preprocess_result,
            rng=rng,
        )
        return algorithm.schedule()

    def schedule(self, problem: Problem, *, rng: random.Random | None = None) -> SchedulingResult:
        """Solve a problem, timing the computation and validating the schedule.

        Returns:
            SchedulingResult with the solve result, elapsed time and validity
        """
        started = time.perf_counter()
        result = self.solve(problem, rng=rng)
        elapsed_ms = int((time.perf_counter() - started) * 1000)

        warnings: list[str] = []
        valid: bool | None = None
        if result.found and result.finish_times is not None and self.config.validate_solution:
            report = validate_solution(problem, result.finish_times)
            valid = report.valid
            if not report.valid:
                warnings.append(f"Invalid solution: {report.describe()}")
            if checks_enabled():
                logger.checks(f"  Validation: {report.describe()}")

        if result.trials_abandoned:
            warnings.append(
                f"{result.trials_abandoned} of {self.config.passes} trials could not place "
                "every job within the horizon"
            )

        return SchedulingResult(
            solve=result,
            elapsed_ms=elapsed_ms,
            valid=valid,
            warnings=warnings,
        )


def solve(
    problem: Problem,
    config: SolverConfig | None = None,
    *,
    seed: int | None = None,
) -> SolveResult:
    """Solve an RCPSP/t instance with the tournament heuristic.

    Args:
        problem: Fully constructed problem instance
        config: Optional solver configuration
        seed: Optional seed for reproducible results (overrides ``config.seed``)

    Returns:
        SolveResult with the finish time of every job when a schedule was found
    """
    effective_config = config or SolverConfig()
    if seed is not None:
        effective_config = effective_config.model_copy(update={"seed": seed})
    return SchedulingService(effective_config).solve(problem)
