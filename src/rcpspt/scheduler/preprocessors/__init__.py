"""Pre-processor factory and exports."""

from rcpspt.models import Problem

from ..config import SolverConfig
from ..core import PreProcessResult
from .feasibility_bounds import FeasibilityBoundCalculator
from .priority_metric import PriorityMetricCalculator


class CpruPreProcessor:
    """Computes feasibility bounds and then CPRU priorities for a problem."""

    def __init__(self, config: SolverConfig | None = None):
        """Initialize the pre-processor.

        Args:
            config: Optional solver configuration (supplies the RU weights)
        """
        self.config = config or SolverConfig()

    def process(self, problem: Problem) -> PreProcessResult:
        """Run the bound and priority calculators in order.

        Raises:
            InfeasibleInstanceError: If the bound computation fails
        """
        bounds = FeasibilityBoundCalculator(problem).compute()
        priorities = PriorityMetricCalculator(
            problem,
            bounds,
            omega1=self.config.omega1,
            omega2=self.config.omega2,
        ).compute()
        return PreProcessResult(
            bounds=bounds,
            priorities=priorities,
            metadata={"preprocessor": "cpru"},
        )


def create_preprocessor(config: SolverConfig | None = None) -> CpruPreProcessor:
    """Create the pre-processor used by the tournament heuristic."""
    return CpruPreProcessor(config)


__all__ = [
    "CpruPreProcessor",
    "FeasibilityBoundCalculator",
    "PriorityMetricCalculator",
    "create_preprocessor",
]
