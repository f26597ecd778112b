"""Command-line interface for rcpspt."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from .batch import find_instances, solve_all
from .exceptions import RcpsptError
from .loader import discover_config, load_problem
from .logger import setup_logger
from .scheduler import (
    AlgorithmConfig,
    AlgorithmType,
    SchedulingResult,
    SchedulingService,
    SolverConfig,
    SolveStatus,
)
from .unified_config import UnifiedConfig

app = typer.Typer(
    name="rcpspt",
    help="Tournament heuristic for resource constrained project scheduling with "
    "time-dependent capacities and requests (RCPSP/t)",
    add_completion=False,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show improvements, 2=show checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: rcpspt_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for rcpspt commands."""
    setup_logger(verbose)
    ctx.obj = config


def _load_config(ctx: typer.Context, path: Path) -> UnifiedConfig:
    """Load the unified config for an instance file or directory."""
    config_path: Path | None = ctx.obj
    try:
        unified = discover_config(path, config_path)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: Invalid configuration: {e}", err=True)
        raise typer.Exit(1) from None
    return unified or UnifiedConfig()


def _apply_overrides(
    config: SolverConfig,
    *,
    seed: int | None,
    passes: int | None,
    workers: int | None,
    algorithm: str | None,
) -> SolverConfig:
    """Apply CLI options on top of the configured solver settings."""
    updates: dict[str, object] = {}
    if seed is not None:
        updates["seed"] = seed
    if passes is not None:
        updates["passes"] = passes
    if workers is not None:
        updates["workers"] = workers
    if algorithm:
        try:
            updates["algorithm"] = AlgorithmConfig(type=AlgorithmType(algorithm))
        except ValueError:
            typer.echo(
                f"Error: Invalid algorithm '{algorithm}'. "
                f"Available: {', '.join(a.value for a in AlgorithmType)}",
                err=True,
            )
            raise typer.Exit(1) from None
    return config.model_copy(update=updates)


def _write_json(path: Path, instance: Path, result: SchedulingResult) -> None:
    payload = {
        "instance": str(instance),
        "status": result.solve.status.value,
        "makespan": result.makespan,
        "finish_times": result.finish_times,
        "elapsed_ms": result.elapsed_ms,
        "valid": result.valid,
    }
    path.write_text(json.dumps(payload, indent=2) + "\n")


@app.command()
def solve(  # noqa: PLR0913 - CLI command needs multiple options
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="Path to the instance file")],
    *,
    seed: Annotated[
        int | None, typer.Option("--seed", "-s", help="Random seed for reproducible results")
    ] = None,
    passes: Annotated[
        int | None, typer.Option("--passes", "-p", help="Number of randomized trials", min=1)
    ] = None,
    workers: Annotated[
        int | None, typer.Option("--workers", "-w", help="Worker processes for trials", min=1)
    ] = None,
    algorithm: Annotated[
        str | None,
        typer.Option(
            "--algorithm",
            "-a",
            help="Scheduling algorithm to use. Overrides config. Available: 'tournament'",
        ),
    ] = None,
    output_json: Annotated[
        Path | None,
        typer.Option("--output-json", help="Write the schedule to a JSON file"),
    ] = None,
) -> None:
    """Solve a single instance and report makespan, time and validity."""
    unified = _load_config(ctx, file)
    config = _apply_overrides(
        unified.solver, seed=seed, passes=passes, workers=workers, algorithm=algorithm
    )

    typer.echo(f"File: {file}\n")
    try:
        problem = load_problem(file)
        result = SchedulingService(config).schedule(problem)
    except RcpsptError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    if result.found:
        typer.echo(f"Makespan: {result.makespan}\n")
    else:
        if result.solve.status == SolveStatus.INFEASIBLE_INSTANCE:
            typer.echo(f"Instance is infeasible: {result.solve.message}")
        typer.echo("Found no feasible solution.")
    typer.echo(f"Took {result.elapsed_ms} ms")
    if result.valid is not None:
        typer.echo(f"Valid? {'yes' if result.valid else 'no'}")

    if output_json:
        _write_json(output_json, file, result)
        typer.echo(f"Schedule written to {output_json}")

    if result.warnings:
        typer.echo("\nWarnings:", err=True)
        for warning in result.warnings:
            typer.echo(f"  - {warning}", err=True)


@app.command()
def batch(  # noqa: PLR0913 - CLI command needs multiple options
    ctx: typer.Context,
    directory: Annotated[Path, typer.Argument(help="Directory searched recursively")],
    output: Annotated[Path, typer.Argument(help="File receiving the results")],
    *,
    seed: Annotated[
        int | None, typer.Option("--seed", "-s", help="Random seed for reproducible results")
    ] = None,
    passes: Annotated[
        int | None, typer.Option("--passes", "-p", help="Number of randomized trials", min=1)
    ] = None,
    workers: Annotated[
        int | None, typer.Option("--workers", "-w", help="Worker processes for trials", min=1)
    ] = None,
) -> None:
    """Solve every instance file under a directory and write all results to a file."""
    if not directory.is_dir():
        typer.echo(f"Error: Not a directory: {directory}", err=True)
        raise typer.Exit(1)

    unified = _load_config(ctx, directory)
    config = _apply_overrides(
        unified.solver, seed=seed, passes=passes, workers=workers, algorithm=None
    )

    typer.echo(f"Test data directory: {directory}")
    paths = find_instances(directory, unified.batch.file_extension)
    typer.echo(f"Solving {len(paths)} problems...")

    try:
        with output.open("w") as out:
            entries = solve_all(
                paths,
                out,
                SchedulingService(config),
                progress_steps=unified.batch.progress_steps,
            )
    except OSError as e:
        typer.echo(f"Error: Can't create or open output file: {e}", err=True)
        raise typer.Exit(1) from None
    except RcpsptError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    for entry in entries:
        if entry.result.valid is False:
            typer.echo(f"Invalid solution: {entry.path}", err=True)

    solved = sum(1 for entry in entries if entry.result.found)
    typer.echo(f"\nSolved {solved} of {len(entries)} problems")
    typer.echo(f"Results written to output file: {output}")


def main() -> int:
    """Main entry point."""
    # Typer handles sys.exit() internally
    app()
    return 0


if __name__ == "__main__":
    main()
