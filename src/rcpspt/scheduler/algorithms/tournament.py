"""Tournament-based serial schedule generation scheme for RCPSP/t."""

import bisect
import math
import random
from collections.abc import Iterable, Iterator
from concurrent.futures import ProcessPoolExecutor

from rcpspt.logger import checks_enabled, debug_enabled, get_logger
from rcpspt.models import Problem

from ..config import SolverConfig
from ..core import PreProcessResult, SolveResult, SolveStatus, TrialResult
from ..preprocessors import create_preprocessor
from ..resources import ResourceProfile

logger = get_logger()

MIN_TOURNAMENT_SIZE = 2


def tournament_size(eligible_count: int, tournament_factor: float) -> int:
    """Number of samples drawn from the eligible set (truncated, at least 2)."""
    return max(int(tournament_factor * eligible_count), MIN_TOURNAMENT_SIZE)


def select_winner(sampled: list[int], cpru: list[float]) -> int:
    """Pick the sampled job with the highest CPRU value.

    Ties go to the last equal maximum in the sampled sequence, so a later
    duplicate displaces an earlier job with the same score.
    """
    winner = -1
    best_priority = -math.inf
    for job in sampled:
        if cpru[job] >= best_priority:
            best_priority = cpru[job]
            winner = job
    return winner


def run_trial(
    problem: Problem,
    cpru: list[float],
    tournament_factor: float,
    index: int,
    seed: int,
) -> TrialResult:
    """Build one complete schedule with the serial SGS.

    Starting from the source at time 0, repeatedly runs a tournament among the
    eligible jobs and places the winner at its earliest precedence- and
    resource-feasible finish time.

    Args:
        problem: Problem instance
        cpru: Priority value per job
        tournament_factor: Fraction of the eligible set sampled per tournament
        index: Trial number (for reporting)
        seed: Seed of this trial's private random generator

    Returns:
        TrialResult with finish times, or with ``finish_times=None`` if some job
        could not be placed within the horizon or never became eligible
    """
    rng = random.Random(seed)
    durations = problem.durations
    finish = [-1] * problem.job_count
    available = ResourceProfile(problem.capacities, problem.horizon)

    finish[problem.source] = 0
    pending = [len(preds) for preds in problem.predecessors]
    for successor in problem.successors[problem.source]:
        pending[successor] -= 1
    eligible = [
        job for job in range(problem.job_count) if job != problem.source and pending[job] == 0
    ]

    for _ in range(problem.job_count - 1):
        if not eligible:
            # Remaining jobs wait on each other
            stuck = next(job for job in range(problem.job_count) if finish[job] < 0)
            return TrialResult(index=index, finish_times=None, abandoned_job=stuck)

        size = tournament_size(len(eligible), tournament_factor)
        sampled = [eligible[int(rng.random() * len(eligible))] for _ in range(size)]
        winner = select_winner(sampled, cpru)

        duration = durations[winner]
        tentative = max(
            (finish[pred] + duration for pred in problem.predecessors[winner]),
            default=duration,
        )
        placed = available.earliest_feasible_finish(problem.requests[winner], duration, tentative)
        if placed is None:
            return TrialResult(index=index, finish_times=None, abandoned_job=winner)

        finish[winner] = placed
        available.reserve(problem.requests[winner], duration, placed)
        if debug_enabled():
            logger.debug(
                f"    Trial {index}: placed job {winner} in [{placed - duration}, {placed}) "
                f"(sampled {sampled})"
            )

        eligible.remove(winner)
        for successor in problem.successors[winner]:
            pending[successor] -= 1
            if pending[successor] == 0 and successor != problem.source:
                bisect.insort(eligible, successor)

    return TrialResult(index=index, finish_times=finish, makespan=problem.makespan(finish))


# Per-process state for parallel trials, set once by the pool initializer
_worker_state: dict[str, object] = {}


def _init_worker(problem: Problem, cpru: list[float], tournament_factor: float) -> None:
    _worker_state["problem"] = problem
    _worker_state["cpru"] = cpru
    _worker_state["tournament_factor"] = tournament_factor


def _run_worker_trial(job: tuple[int, int]) -> TrialResult:
    index, seed = job
    problem = _worker_state["problem"]
    cpru = _worker_state["cpru"]
    factor = _worker_state["tournament_factor"]
    assert isinstance(problem, Problem)
    assert isinstance(cpru, list)
    assert isinstance(factor, float)
    return run_trial(problem, cpru, factor, index, seed)


class TournamentScheduler:
    """Randomized tournament heuristic with restarts.

    This scheduler:
    1. Computes feasibility bounds and CPRU priorities once (or reuses a
       pre-processor result)
    2. Draws one seed per trial from a single master generator
    3. Runs every trial as an independent serial SGS pass
    4. Keeps the first schedule reaching the lowest makespan
    """

    def __init__(
        self,
        problem: Problem,
        *,
        config: SolverConfig | None = None,
        preprocess_result: PreProcessResult | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize the scheduler.

        Args:
            problem: Problem instance (read only)
            config: Optional solver configuration
            preprocess_result: Optional bounds and priorities computed beforehand
            rng: Optional master random generator; defaults to one seeded from
                ``config.seed`` (system entropy when the seed is None)

        Raises:
            InfeasibleInstanceError: If no preprocess_result is given and the
                bound computation fails
        """
        self.problem = problem
        self.config = config or SolverConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.preprocess_result = preprocess_result or create_preprocessor(self.config).process(
            problem
        )

    def schedule(self) -> SolveResult:
        """Run all trials and keep the best schedule.

        Returns:
            SolveResult with FOUND and the best finish times, or NOT_FOUND
        """
        seeds = self.trial_seeds()
        logger.debug(
            f"Running {len(seeds)} trials on {self.problem.job_count} jobs "
            f"with {self.config.workers} worker(s)"
        )

        if self.config.workers > 1:
            with ProcessPoolExecutor(
                max_workers=self.config.workers,
                initializer=_init_worker,
                initargs=(self.problem, self._cpru, float(self.config.tournament_factor)),
            ) as executor:
                chunksize = max(1, len(seeds) // (self.config.workers * 4))
                return self._reduce(
                    executor.map(_run_worker_trial, enumerate(seeds), chunksize=chunksize)
                )

        return self._reduce(self._run_sequential(seeds))

    def trial_seeds(self) -> list[int]:
        """Draw one seed per trial from the master generator."""
        return [self.rng.getrandbits(64) for _ in range(self.config.passes)]

    @property
    def _cpru(self) -> list[float]:
        return self.preprocess_result.priorities.cpru

    def _run_sequential(self, seeds: list[int]) -> Iterator[TrialResult]:
        for index, seed in enumerate(seeds):
            yield run_trial(
                self.problem, self._cpru, self.config.tournament_factor, index, seed
            )

    def _reduce(self, trials: Iterable[TrialResult]) -> SolveResult:
        """Fold trial results in trial order, keeping the best makespan."""
        best: list[int] | None = None
        best_makespan: int | None = None
        history: list[int] = []
        completed = 0
        abandoned = 0

        for trial in trials:
            makespan = trial.makespan
            if trial.finish_times is None or makespan is None:
                abandoned += 1
                if checks_enabled():
                    logger.checks(
                        f"  Trial {trial.index} abandoned: job {trial.abandoned_job} "
                        f"could not be placed before horizon {self.problem.horizon}"
                    )
                if self.config.abort_on_infeasible_trial:
                    return SolveResult(
                        status=SolveStatus.NOT_FOUND,
                        trials_completed=completed,
                        trials_abandoned=abandoned,
                        best_makespan_history=history,
                        message=f"Trial {trial.index} could not place job {trial.abandoned_job}",
                        algorithm_metadata=self._metadata(),
                    )
                continue

            completed += 1
            if best_makespan is None or makespan < best_makespan:
                best_makespan = makespan
                best = list(trial.finish_times)
                logger.changes(f"  Trial {trial.index}: new best makespan {makespan}")
            history.append(best_makespan)

        if best is None or best_makespan is None or best_makespan > self.problem.horizon:
            return SolveResult(
                status=SolveStatus.NOT_FOUND,
                trials_completed=completed,
                trials_abandoned=abandoned,
                best_makespan_history=history,
                message="Found no feasible solution",
                algorithm_metadata=self._metadata(),
            )

        return SolveResult(
            status=SolveStatus.FOUND,
            finish_times=best,
            makespan=best_makespan,
            trials_completed=completed,
            trials_abandoned=abandoned,
            best_makespan_history=history,
            algorithm_metadata=self._metadata(),
        )

    def _metadata(self) -> dict[str, object]:
        return {
            "algorithm": "tournament",
            "passes": self.config.passes,
            "tournament_factor": self.config.tournament_factor,
            "workers": self.config.workers,
        }
