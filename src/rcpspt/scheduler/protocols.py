"""Protocol definitions for the scheduling system."""

from typing import Protocol

from rcpspt.models import Problem

from .core import PreProcessResult, SolveResult


class PreProcessor(Protocol):
    """Protocol for pre-processing steps (bounds and priority computation)."""

    def process(self, problem: Problem) -> PreProcessResult:
        """Process a problem and return computed bounds and priorities.

        Args:
            problem: Problem instance to analyse

        Returns:
            PreProcessResult with bounds, priorities, and metadata

        Raises:
            InfeasibleInstanceError: If some job cannot be placed within the horizon
        """
        ...


class SchedulingAlgorithm(Protocol):
    """Protocol for scheduling algorithms."""

    def schedule(self) -> SolveResult:
        """Run the scheduling algorithm.

        Returns:
            SolveResult with the best finish times found and metadata
        """
        ...
