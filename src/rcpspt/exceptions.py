"""Custom exceptions for rcpspt."""


class RcpsptError(Exception):
    """Base exception for all rcpspt errors."""

    pass


class ValidationError(RcpsptError):
    """Raised when a problem instance is structurally invalid."""

    pass


class CircularDependencyError(ValidationError):
    """Raised when the precedence graph contains a cycle."""

    pass


class MissingReferenceError(ValidationError):
    """Raised when a precedence relation references a job that does not exist."""

    pass


class ParseError(RcpsptError):
    """Raised when an instance file cannot be parsed."""

    pass


class InfeasibleInstanceError(RcpsptError):
    """Raised when a job cannot be placed within the horizon even in isolation."""

    def __init__(self, job: int, direction: str, message: str | None = None) -> None:
        self.job = job
        self.direction = direction
        super().__init__(
            message or f"Job {job} has no resource-feasible {direction} time within the horizon"
        )


class UnsupportedAlgorithmError(RcpsptError):
    """Raised when a declared but unimplemented algorithm is requested."""

    pass
