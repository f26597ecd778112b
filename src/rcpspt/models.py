"""Data models for rcpspt."""

from __future__ import annotations

from dataclasses import dataclass, field


def _default_predecessors() -> list[list[int]]:
    return []


@dataclass(frozen=True)
class Problem:
    """An RCPSP/t instance.

    Jobs are numbered ``0 .. job_count-1``. Job 0 is the dummy source and job
    ``job_count-1`` the dummy sink; both have zero duration.

    ``requests[job][resource][offset]`` is the demand of ``job`` on ``resource``
    ``offset`` time units after it starts, for ``offset`` in ``[0, duration)``.
    ``capacities[resource][t]`` is the supply of ``resource`` at absolute time
    ``t`` in ``[0, horizon)``.

    The model is never mutated after construction; solvers only read it.
    """

    job_count: int
    resource_count: int
    horizon: int
    durations: list[int]
    successors: list[list[int]]
    requests: list[list[list[int]]]
    capacities: list[list[int]]
    predecessors: list[list[int]] = field(default_factory=_default_predecessors)
    name: str = ""

    def __post_init__(self) -> None:
        # Derive predecessors from successor lists when not given explicitly
        if not self.predecessors:
            predecessors: list[list[int]] = [[] for _ in range(self.job_count)]
            for job, succs in enumerate(self.successors):
                for successor in succs:
                    if 0 <= successor < self.job_count:
                        predecessors[successor].append(job)
            object.__setattr__(self, "predecessors", predecessors)

    @classmethod
    def from_successors(  # noqa: PLR0913 - mirrors the instance data layout
        cls,
        horizon: int,
        durations: list[int],
        successors: list[list[int]],
        requests: list[list[list[int]]],
        capacities: list[list[int]],
        *,
        name: str = "",
    ) -> Problem:
        """Build a problem from successor lists, deriving counts and predecessors."""
        return cls(
            job_count=len(durations),
            resource_count=len(capacities),
            horizon=horizon,
            durations=list(durations),
            successors=[list(s) for s in successors],
            requests=requests,
            capacities=capacities,
            name=name,
        )

    @property
    def source(self) -> int:
        """Index of the dummy start activity."""
        return 0

    @property
    def sink(self) -> int:
        """Index of the dummy end activity."""
        return self.job_count - 1

    def successor_count(self, job: int) -> int:
        """Number of direct successors of a job."""
        return len(self.successors[job])

    def makespan(self, finish_times: list[int]) -> int:
        """Makespan of a finish-time assignment (finish time of the sink)."""
        return finish_times[self.sink]

    def start_time(self, job: int, finish_times: list[int]) -> int:
        """Start time of a job given its finish time."""
        return finish_times[job] - self.durations[job]
