"""Configuration classes for the scheduling system."""

from enum import Enum

from pydantic import BaseModel, Field


class AlgorithmType(str, Enum):
    """Available scheduling algorithms."""

    TOURNAMENT = "tournament"
    GENETIC = "genetic"  # Declared only; not supported


class AlgorithmConfig(BaseModel):
    """Configuration for algorithm selection."""

    type: AlgorithmType = AlgorithmType.TOURNAMENT


class SolverConfig(BaseModel):
    """Configuration for the tournament heuristic and the scheduling service."""

    algorithm: AlgorithmConfig = AlgorithmConfig()

    # Number of independent randomized trials (serial SGS passes)
    passes: int = Field(default=1000, ge=1)
    # Fraction of the eligible set sampled per tournament (minimum 2 samples)
    tournament_factor: float = Field(default=0.5, gt=0.0)

    # Extended resource utilization weights: own demand vs successors' values
    omega1: float = 0.4
    omega2: float = 0.6

    seed: int | None = None  # None = seed from system entropy
    workers: int = Field(default=1, ge=1)  # >1 runs trials in a process pool

    # Abort the whole solve when a single trial cannot place a job
    abort_on_infeasible_trial: bool = False
    # Re-check the best schedule with the solution validator
    validate_solution: bool = True
