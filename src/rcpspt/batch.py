"""Solving every instance file under a directory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .loader import load_problem
from .logger import get_logger
from .scheduler import SchedulingResult, SchedulingService

logger = get_logger()


@dataclass
class BatchEntry:
    """Result of solving one instance of a batch."""

    path: Path
    result: SchedulingResult


def find_instances(directory: Path, extension: str = ".smt") -> list[Path]:
    """Recursively find instance files, sorted by path."""
    return sorted(p for p in directory.rglob(f"*{extension}") if p.is_file())


def format_result_block(path: Path, result: SchedulingResult) -> str:
    """Format one result block of the batch output file.

    Example:
        path/to/instance.smt
        makespan 42
        cpu_milis 130
    """
    lines = [str(path)]
    if result.found:
        lines.append(f"makespan {result.makespan}")
    else:
        lines.append("nosolution")
    lines.append(f"cpu_milis {result.elapsed_ms}")
    return "\n".join(lines) + "\n\n"


def solve_all(
    paths: list[Path],
    output: TextIO,
    service: SchedulingService,
    *,
    progress_steps: int = 100,
) -> list[BatchEntry]:
    """Solve each instance in order and write a result block per instance.

    Args:
        paths: Instance files to solve
        output: Stream receiving the result blocks
        service: Scheduling service used for every instance
        progress_steps: Number of progress messages over the whole batch

    Returns:
        List of BatchEntry in input order
    """
    entries: list[BatchEntry] = []
    step = max(1, len(paths) // progress_steps)

    for i, path in enumerate(paths):
        problem = load_problem(path)
        result = service.schedule(problem)
        output.write(format_result_block(path, result))
        entries.append(BatchEntry(path=path, result=result))

        if i % step == 0:
            logger.changes(f"{100 * i // len(paths)}%")

    return entries
