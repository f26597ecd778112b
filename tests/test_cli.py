"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from rcpspt.cli import app
from tests.conftest import INFEASIBLE_SMT, SAMPLE_SMT

runner = CliRunner()


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.smt"
    path.write_text(SAMPLE_SMT)
    return path


@pytest.fixture
def infeasible_file(tmp_path: Path) -> Path:
    path = tmp_path / "infeasible.smt"
    path.write_text(INFEASIBLE_SMT)
    return path


class TestSolveCommand:
    """Test the solve CLI command."""

    def test_solve_reports_makespan(self, sample_file: Path) -> None:
        result = runner.invoke(app, ["solve", str(sample_file), "--seed", "1", "--passes", "20"])

        assert result.exit_code == 0
        assert f"File: {sample_file}" in result.stdout
        assert "Makespan: 3" in result.stdout
        assert "Took " in result.stdout
        assert "Valid? yes" in result.stdout

    def test_solve_infeasible_instance(self, infeasible_file: Path) -> None:
        result = runner.invoke(app, ["solve", str(infeasible_file), "--seed", "1"])

        assert result.exit_code == 0
        assert "Instance is infeasible" in result.stdout
        assert "Found no feasible solution." in result.stdout
        assert "Makespan" not in result.stdout

    def test_solve_writes_json(self, sample_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "schedule.json"
        result = runner.invoke(
            app,
            ["solve", str(sample_file), "-s", "3", "-p", "10", "--output-json", str(output)],
        )

        assert result.exit_code == 0
        assert f"Schedule written to {output}" in result.stdout
        payload = json.loads(output.read_text())
        assert payload["status"] == "found"
        assert payload["makespan"] == 3
        assert payload["finish_times"][0] == 0
        assert len(payload["finish_times"]) == 4
        assert payload["valid"] is True

    def test_solve_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["solve", str(tmp_path / "absent.smt")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_solve_genetic_not_supported(self, sample_file: Path) -> None:
        result = runner.invoke(app, ["solve", str(sample_file), "--algorithm", "genetic"])

        assert result.exit_code == 1
        assert "not supported" in result.output

    def test_solve_unknown_algorithm(self, sample_file: Path) -> None:
        result = runner.invoke(app, ["solve", str(sample_file), "-a", "annealing"])

        assert result.exit_code == 1
        assert "Invalid algorithm 'annealing'" in result.output

    def test_solve_with_config_file(self, sample_file: Path, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("solver:\n  passes: 5\n  seed: 7\n")

        result = runner.invoke(app, ["-c", str(config_file), "solve", str(sample_file)])

        assert result.exit_code == 0
        assert "Makespan: 3" in result.stdout

    def test_solve_invalid_config(self, sample_file: Path, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("solver:\n  passes: -1\n")

        result = runner.invoke(app, ["-c", str(config_file), "solve", str(sample_file)])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_solve_malformed_config(self, sample_file: Path, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("solver: [passes: 3\n")

        result = runner.invoke(app, ["-c", str(config_file), "solve", str(sample_file)])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert "Malformed YAML" in result.output

    def test_solve_verbose_logs_improvements(self, sample_file: Path) -> None:
        result = runner.invoke(app, ["-v", "1", "solve", str(sample_file), "-s", "1", "-p", "5"])

        assert result.exit_code == 0
        assert "new best makespan" in result.output


class TestBatchCommand:
    """Test the batch CLI command."""

    def test_batch_solves_directory(
        self, tmp_path: Path, sample_file: Path, infeasible_file: Path
    ) -> None:
        nested = tmp_path / "nested"
        nested.mkdir()
        (nested / "copy.smt").write_text(SAMPLE_SMT)
        (tmp_path / "notes.txt").write_text("ignored")
        output = tmp_path / "results" / "out.txt"
        output.parent.mkdir()

        result = runner.invoke(
            app, ["batch", str(tmp_path), str(output), "--seed", "1", "--passes", "10"]
        )

        assert result.exit_code == 0
        assert "Solving 3 problems..." in result.stdout
        assert "Solved 2 of 3 problems" in result.stdout
        assert f"Results written to output file: {output}" in result.stdout

        blocks = output.read_text().split("\n\n")
        assert blocks[-1] == ""
        assert blocks[0].splitlines()[0] == str(infeasible_file)
        assert blocks[0].splitlines()[1] == "nosolution"
        assert blocks[1].splitlines()[0] == str(nested / "copy.smt")
        assert blocks[1].splitlines()[1] == "makespan 3"
        assert blocks[2].splitlines()[0] == str(sample_file)
        assert blocks[2].splitlines()[2].startswith("cpu_milis ")

    def test_batch_not_a_directory(self, sample_file: Path, tmp_path: Path) -> None:
        result = runner.invoke(app, ["batch", str(sample_file), str(tmp_path / "out.txt")])

        assert result.exit_code == 1
        assert "Not a directory" in result.output

    def test_batch_unwritable_output(self, tmp_path: Path, sample_file: Path) -> None:
        output = tmp_path / "missing" / "out.txt"

        result = runner.invoke(app, ["batch", str(tmp_path), str(output)])

        assert result.exit_code == 1
        assert "Can't create or open output file" in result.output

    def test_batch_uses_configured_extension(self, tmp_path: Path) -> None:
        (tmp_path / "a.rcp").write_text(SAMPLE_SMT)
        (tmp_path / "b.smt").write_text(SAMPLE_SMT)
        (tmp_path / "rcpspt_config.yaml").write_text(
            "solver:\n  passes: 5\n  seed: 1\nbatch:\n  file_extension: .rcp\n"
        )
        output = tmp_path / "out.txt"

        result = runner.invoke(app, ["batch", str(tmp_path), str(output)])

        assert result.exit_code == 0
        assert "Solving 1 problems..." in result.stdout
        assert str(tmp_path / "a.rcp") in output.read_text()
        assert "b.smt" not in output.read_text()
