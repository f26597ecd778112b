"""Algorithm factory and exports."""

import random

from rcpspt.exceptions import UnsupportedAlgorithmError
from rcpspt.models import Problem

from ..config import AlgorithmType, SolverConfig
from ..core import PreProcessResult
from .tournament import TournamentScheduler, run_trial, select_winner, tournament_size


def create_algorithm(
    algorithm_type: AlgorithmType,
    problem: Problem,
    *,
    config: SolverConfig | None = None,
    preprocess_result: PreProcessResult | None = None,
    rng: random.Random | None = None,
) -> TournamentScheduler:
    """Create a scheduling algorithm instance.

    Args:
        algorithm_type: Type of algorithm to create
        problem: Problem instance to schedule
        config: Optional solver configuration
        preprocess_result: Optional result from pre-processor
        rng: Optional master random generator

    Returns:
        Algorithm instance ready to schedule

    Raises:
        UnsupportedAlgorithmError: For the genetic algorithm, which is declared
            but not implemented
    """
    if algorithm_type == AlgorithmType.TOURNAMENT:
        return TournamentScheduler(
            problem,
            config=config,
            preprocess_result=preprocess_result,
            rng=rng,
        )

    if algorithm_type == AlgorithmType.GENETIC:
        msg = "The genetic algorithm is not supported; use 'tournament'"
        raise UnsupportedAlgorithmError(msg)

    msg = f"Unknown algorithm type: {algorithm_type}"
    raise ValueError(msg)


__all__ = [
    "TournamentScheduler",
    "create_algorithm",
    "run_trial",
    "select_winner",
    "tournament_size",
]
