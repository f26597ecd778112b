"""rcpspt - tournament heuristic for RCPSP/t (time-dependent resource constrained project scheduling)."""

from .exceptions import InfeasibleInstanceError, RcpsptError
from .loader import load_problem, validate_problem
from .models import Problem
from .scheduler import SchedulingService, SolveResult, SolverConfig, SolveStatus, solve

__all__ = [
    "InfeasibleInstanceError",
    "Problem",
    "RcpsptError",
    "SchedulingService",
    "SolveResult",
    "SolveStatus",
    "SolverConfig",
    "load_problem",
    "solve",
    "validate_problem",
]
