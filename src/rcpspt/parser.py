"""Parser for RCPSP/t instance files (.smt)."""

from __future__ import annotations

import re
from pathlib import Path

from .exceptions import ParseError
from .models import Problem

SEPARATOR_RE = re.compile(r"^\s*\*{3,}\s*$")
DASH_RE = re.compile(r"^\s*-{3,}\s*$")
JOBS_RE = re.compile(r"jobs\s*\(incl\.\s*supersource/sink\s*\)\s*:\s*(\d+)", re.IGNORECASE)
HORIZON_RE = re.compile(r"^\s*horizon\s*:\s*(\d+)", re.IGNORECASE | re.MULTILINE)
RENEWABLE_RE = re.compile(r"-\s*renewable\s*:\s*(\d+)", re.IGNORECASE)

PRECEDENCE_SECTION = "PRECEDENCE RELATIONS"
REQUESTS_SECTION = "REQUESTS/DURATIONS"
AVAILABILITY_SECTION = "RESOURCEAVAILABILITIES"


def _to_ints(tokens: list[str], section: str) -> list[int]:
    try:
        return [int(token) for token in tokens]
    except ValueError as e:
        raise ParseError(f"{section}: expected integers ({e})") from e


class ProblemParser:
    """Parser for PSPLIB-style RCPSP/t instance files.

    Besides the usual PSPLIB header and precedence table, the time-dependent
    variant lists, per job, one request per resource and per time unit of its
    duration (resource-major), and one capacity per resource and per time step
    of the horizon. Job numbers in the file are 1-based.
    """

    def parse_file(self, file_path: Path | str) -> Problem:
        """Parse an instance file into a Problem."""
        path = Path(file_path)
        if not path.exists():
            raise ParseError(f"File not found: {file_path}")

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(f"Failed to read instance file: {e}") from e

        return self.parse_text(text, name=path.stem)

    def parse_text(self, text: str, *, name: str = "") -> Problem:
        """Parse instance text into a Problem."""
        job_count = self._header_value(JOBS_RE, text, "jobs (incl. supersource/sink )")
        horizon = self._header_value(HORIZON_RE, text, "horizon")
        resource_count = self._header_value(RENEWABLE_RE, text, "renewable resources")

        sections = self._split_sections(text)
        successors = self._parse_precedence(sections, job_count)
        durations, requests = self._parse_requests(sections, job_count, resource_count)
        capacities = self._parse_availabilities(sections, resource_count, horizon)

        return Problem.from_successors(
            horizon=horizon,
            durations=durations,
            successors=successors,
            requests=requests,
            capacities=capacities,
            name=name,
        )

    def _header_value(self, pattern: re.Pattern[str], text: str, label: str) -> int:
        match = pattern.search(text)
        if not match:
            raise ParseError(f"Missing header field: {label}")
        return int(match.group(1))

    def _split_sections(self, text: str) -> dict[str, list[str]]:
        """Collect the body lines of each named section up to the next separator."""
        sections: dict[str, list[str]] = {}
        current: str | None = None

        for line in text.splitlines():
            if SEPARATOR_RE.match(line):
                current = None
                continue
            stripped = line.strip()
            heading = stripped.rstrip(":").strip().upper()
            if heading in (PRECEDENCE_SECTION, REQUESTS_SECTION, AVAILABILITY_SECTION):
                current = heading
                sections[current] = []
                continue
            if current is not None and stripped and not DASH_RE.match(line):
                sections[current].append(stripped)

        for required in (PRECEDENCE_SECTION, REQUESTS_SECTION, AVAILABILITY_SECTION):
            if required not in sections:
                raise ParseError(f"Missing section: {required}")
        return sections

    def _parse_precedence(self, sections: dict[str, list[str]], job_count: int) -> list[list[int]]:
        successors: list[list[int]] = [[] for _ in range(job_count)]
        seen: set[int] = set()

        for line in sections[PRECEDENCE_SECTION]:
            if line.lower().startswith("jobnr"):
                continue
            row = _to_ints(line.split(), PRECEDENCE_SECTION)
            if len(row) < 3:
                raise ParseError(f"{PRECEDENCE_SECTION}: malformed row '{line}'")
            job, _modes, count = row[0], row[1], row[2]
            targets = row[3:]
            if len(targets) != count:
                raise ParseError(
                    f"{PRECEDENCE_SECTION}: job {job} declares {count} successors "
                    f"but lists {len(targets)}"
                )
            if not 1 <= job <= job_count:
                raise ParseError(f"{PRECEDENCE_SECTION}: job number {job} out of range")
            successors[job - 1] = [t - 1 for t in targets]
            seen.add(job)

        if len(seen) != job_count:
            raise ParseError(
                f"{PRECEDENCE_SECTION}: expected {job_count} jobs, found {len(seen)}"
            )
        return successors

    def _parse_requests(
        self, sections: dict[str, list[str]], job_count: int, resource_count: int
    ) -> tuple[list[int], list[list[list[int]]]]:
        lines = [
            line for line in sections[REQUESTS_SECTION] if not line.lower().startswith("jobnr")
        ]
        tokens = _to_ints(" ".join(lines).split(), REQUESTS_SECTION)

        durations = [0] * job_count
        requests: list[list[list[int]]] = [[] for _ in range(job_count)]
        pos = 0
        for _ in range(job_count):
            if pos + 3 > len(tokens):
                raise ParseError(f"{REQUESTS_SECTION}: unexpected end of data")
            job, _mode, duration = tokens[pos], tokens[pos + 1], tokens[pos + 2]
            pos += 3
            if not 1 <= job <= job_count:
                raise ParseError(f"{REQUESTS_SECTION}: job number {job} out of range")
            end = pos + resource_count * duration
            if end > len(tokens):
                raise ParseError(f"{REQUESTS_SECTION}: job {job} has too few requests")
            durations[job - 1] = duration
            requests[job - 1] = [
                tokens[pos + k * duration : pos + (k + 1) * duration]
                for k in range(resource_count)
            ]
            pos = end

        if pos != len(tokens):
            raise ParseError(f"{REQUESTS_SECTION}: {len(tokens) - pos} trailing values")
        return durations, requests

    def _parse_availabilities(
        self, sections: dict[str, list[str]], resource_count: int, horizon: int
    ) -> list[list[int]]:
        # The first line names the resources ("R 1  R 2 ..."); the rest are numbers
        lines = [line for line in sections[AVAILABILITY_SECTION] if not re.search(r"[A-Za-z]", line)]
        tokens = _to_ints(" ".join(lines).split(), AVAILABILITY_SECTION)

        if len(tokens) != resource_count * horizon:
            raise ParseError(
                f"{AVAILABILITY_SECTION}: expected {resource_count * horizon} values "
                f"({resource_count} resources x horizon {horizon}), found {len(tokens)}"
            )
        return [tokens[k * horizon : (k + 1) * horizon] for k in range(resource_count)]
