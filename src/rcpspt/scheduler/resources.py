"""Time-indexed resource availability tracking."""


class ResourceProfile:
    """Remaining supply of every resource at every time step of the horizon.

    ``available[resource][t]`` starts as the resource capacity at ``t`` and is
    reduced as jobs are reserved. Jobs are placed by their finish time; a job
    finishing at ``finish`` occupies ``[finish - duration, finish)``.
    """

    def __init__(self, capacities: list[list[int]], horizon: int) -> None:
        """Initialize with a private copy of the capacities.

        Args:
            capacities: ``capacities[resource][t]`` for ``t`` in ``[0, horizon)``
            horizon: Number of discrete time steps
        """
        self.available: list[list[int]] = [list(row) for row in capacities]
        self.horizon = horizon

    def fits(self, job_requests: list[list[int]], duration: int, finish: int) -> bool:
        """Check if a job finishing at ``finish`` fits into the remaining supply.

        Args:
            job_requests: ``job_requests[resource][offset]`` demand of the job
            duration: Duration of the job
            finish: Candidate finish time (must satisfy duration <= finish <= horizon)

        Returns:
            True if every offset of every resource is within the remaining supply
        """
        start = finish - duration
        for resource, demand in enumerate(job_requests):
            available = self.available[resource]
            for offset in range(duration - 1, -1, -1):
                if demand[offset] > available[start + offset]:
                    return False
        return True

    def earliest_feasible_finish(
        self, job_requests: list[list[int]], duration: int, finish: int
    ) -> int | None:
        """Shift a tentative finish time later until the job fits.

        The finish time is moved one step at a time and the job is retested
        from scratch after each move.

        Returns:
            The first feasible finish time >= ``finish``, or None if it would
            exceed the horizon
        """
        finish = max(finish, duration)
        while finish <= self.horizon:
            if self.fits(job_requests, duration, finish):
                return finish
            finish += 1
        return None

    def latest_feasible_start(
        self, job_requests: list[list[int]], duration: int, start: int
    ) -> int | None:
        """Shift a tentative start time earlier until the job fits.

        Returns:
            The last feasible start time <= ``start``, or None if it would
            drop below zero
        """
        start = min(start, self.horizon - duration)
        while start >= 0:
            if self.fits(job_requests, duration, start + duration):
                return start
            start -= 1
        return None

    def reserve(self, job_requests: list[list[int]], duration: int, finish: int) -> None:
        """Subtract a job's demand over its occupied interval."""
        start = finish - duration
        for resource, demand in enumerate(job_requests):
            available = self.available[resource]
            for offset in range(duration):
                available[start + offset] -= demand[offset]

    def total_supply(self, window_start: int, window_end: int) -> int:
        """Sum of remaining supply over all resources in ``[window_start, window_end)``.

        The window is clamped to the horizon.
        """
        lo = max(window_start, 0)
        hi = min(window_end, self.horizon)
        if hi <= lo:
            return 0
        return sum(sum(row[lo:hi]) for row in self.available)
