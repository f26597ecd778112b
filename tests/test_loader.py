"""Tests for problem loading, structural validation and config discovery."""

from pathlib import Path

import pytest

from rcpspt.exceptions import (
    CircularDependencyError,
    MissingReferenceError,
    ParseError,
    ValidationError,
)
from rcpspt.loader import discover_config, load_problem, validate_problem
from rcpspt.models import Problem
from tests.conftest import SAMPLE_SMT, make_problem


class TestLoadProblem:
    """Loading instance files."""

    def test_load_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "sample.smt"
        path.write_text(SAMPLE_SMT)

        problem = load_problem(path)

        assert problem.name == "sample"
        assert problem.sink == 3

    def test_parse_errors_propagate(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.smt"
        path.write_text("not an instance\n")

        with pytest.raises(ParseError):
            load_problem(path)


class TestValidateProblem:
    """Structural checks made once at construction time."""

    def test_fixtures_are_valid(self, project_problem: Problem, chain_problem: Problem) -> None:
        validate_problem(project_problem)
        validate_problem(chain_problem)

    def test_cycle_detected(self) -> None:
        problem = make_problem(
            horizon=10,
            durations=[0, 1, 1, 1, 0],
            successors=[[1], [2], [1, 3], [4], []],
            requests=[[[]], [[1]], [[1]], [[1]], [[]]],
            capacities=[[2] * 10],
        )

        with pytest.raises(CircularDependencyError):
            validate_problem(problem)

    def test_unknown_successor(self) -> None:
        problem = make_problem(
            horizon=10,
            durations=[0, 1, 0],
            successors=[[1], [5], []],
            requests=[[[]], [[1]], [[]]],
            capacities=[[2] * 10],
        )

        with pytest.raises(MissingReferenceError, match="unknown successor 5"):
            validate_problem(problem)

    def test_second_source_rejected(self) -> None:
        problem = make_problem(
            horizon=10,
            durations=[0, 1, 1, 0],
            successors=[[1], [3], [3], []],
            requests=[[[]], [[1]], [[1]], [[]]],
            capacities=[[2] * 10],
        )

        with pytest.raises(ValidationError, match="only job 0 may be a source"):
            validate_problem(problem)

    def test_source_must_have_zero_duration(self) -> None:
        problem = make_problem(
            horizon=10,
            durations=[1, 1, 0],
            successors=[[1], [2], []],
            requests=[[[0]], [[1]], [[]]],
            capacities=[[2] * 10],
        )

        with pytest.raises(ValidationError, match="zero-duration source"):
            validate_problem(problem)

    def test_capacity_row_length(self) -> None:
        problem = make_problem(
            horizon=10,
            durations=[0, 1, 0],
            successors=[[1], [2], []],
            requests=[[[]], [[1]], [[]]],
            capacities=[[2] * 9],
        )

        with pytest.raises(ValidationError, match="expected 10"):
            validate_problem(problem)

    def test_negative_request(self) -> None:
        problem = make_problem(
            horizon=10,
            durations=[0, 1, 0],
            successors=[[1], [2], []],
            requests=[[[]], [[-1]], [[]]],
            capacities=[[2] * 10],
        )

        with pytest.raises(ValidationError, match="negative request"):
            validate_problem(problem)

    def test_job_longer_than_horizon(self) -> None:
        problem = make_problem(
            horizon=2,
            durations=[0, 3, 0],
            successors=[[1], [2], []],
            requests=[[[]], [[1, 1, 1]], [[]]],
            capacities=[[2] * 2],
        )

        with pytest.raises(ValidationError, match="longer than the horizon"):
            validate_problem(problem)


class TestDiscoverConfig:
    """Config file lookup."""

    def test_explicit_path(self, tmp_path: Path) -> None:
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("solver:\n  passes: 7\n")

        config = discover_config(None, config_file)

        assert config is not None
        assert config.solver.passes == 7

    def test_instance_directory(self, tmp_path: Path) -> None:
        (tmp_path / "rcpspt_config.yaml").write_text("solver:\n  seed: 5\n")
        instance = tmp_path / "a.smt"
        instance.write_text(SAMPLE_SMT)

        config = discover_config(instance)
        assert config is not None
        assert config.solver.seed == 5

        config = discover_config(tmp_path)
        assert config is not None
        assert config.solver.seed == 5

    def test_current_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "rcpspt_config.yaml").write_text("batch:\n  file_extension: .txt\n")
        elsewhere = tmp_path / "instances"
        elsewhere.mkdir()
        monkeypatch.chdir(tmp_path)

        config = discover_config(elsewhere / "a.smt")

        assert config is not None
        assert config.batch.file_extension == ".txt"

    def test_no_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)

        assert discover_config(tmp_path / "a.smt") is None
