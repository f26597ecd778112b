"""Scheduler package - RCPSP/t tournament heuristic.

This package provides:
- Pre-processors computing feasibility bounds and CPRU priorities
- The tournament-based serial schedule generation scheme
- A solution validator and a high-level SchedulingService

Main entry points:
- solve(): Solve a problem and return a SolveResult
- SchedulingService: Solve with timing and validation
- validate_solution(): Check a finish-time assignment

Configuration:
- SolverConfig: Main configuration (passes, weights, seed, workers)
- AlgorithmConfig: Algorithm selection
"""

# Algorithms
from .algorithms import TournamentScheduler, create_algorithm

# Configuration
from .config import AlgorithmConfig, AlgorithmType, SolverConfig

# Core dataclasses
from .core import (
    FeasibilityBounds,
    PreProcessResult,
    PriorityMetrics,
    SchedulingResult,
    SolveResult,
    SolveStatus,
    TrialResult,
)

# Pre-processors
from .preprocessors import (
    CpruPreProcessor,
    FeasibilityBoundCalculator,
    PriorityMetricCalculator,
    create_preprocessor,
)

# Protocols
from .protocols import PreProcessor, SchedulingAlgorithm

# Resource tracking
from .resources import ResourceProfile

# High-level service
from .service import SchedulingService, solve

# Solution validation
from .validator import SolutionReport, Violation, validate_solution

__all__ = [
    # Core dataclasses
    "FeasibilityBounds",
    "PriorityMetrics",
    "PreProcessResult",
    "TrialResult",
    "SolveResult",
    "SolveStatus",
    "SchedulingResult",
    # Configuration
    "SolverConfig",
    "AlgorithmConfig",
    "AlgorithmType",
    # Protocols
    "PreProcessor",
    "SchedulingAlgorithm",
    # High-level service
    "SchedulingService",
    "solve",
    # Validation
    "SolutionReport",
    "Violation",
    "validate_solution",
    # Resource tracking
    "ResourceProfile",
    # Algorithms
    "TournamentScheduler",
    "create_algorithm",
    # Pre-processors
    "CpruPreProcessor",
    "FeasibilityBoundCalculator",
    "PriorityMetricCalculator",
    "create_preprocessor",
]
