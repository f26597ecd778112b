"""Unified configuration loader for solver and batch settings.

A single configuration file (rcpspt_config.yaml) holds the solver settings
and the batch driver settings:

    solver:
      passes: 1000
      seed: 42
      workers: 4
    batch:
      file_extension: .smt
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from .scheduler import SolverConfig

DEFAULT_CONFIG_NAME = "rcpspt_config.yaml"


class BatchConfig(BaseModel):
    """Configuration for solving every instance under a directory."""

    file_extension: str = ".smt"
    progress_steps: int = Field(default=100, ge=1)  # Progress messages per batch


class UnifiedConfig(BaseModel):
    """Unified configuration containing solver and batch settings."""

    solver: SolverConfig = Field(default_factory=SolverConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)


def load_unified_config(config_path: Path | str) -> UnifiedConfig:
    """Load unified configuration from YAML file.

    Args:
        config_path: Path to rcpspt_config.yaml file

    Returns:
        UnifiedConfig with solver and batch settings

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is malformed YAML or invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open() as f:
            data: dict[str, Any] | None = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Malformed YAML in {config_path}: {e}") from e

    if not data:
        raise ValueError("Empty configuration file")

    if not isinstance(data, dict):
        raise ValueError("Configuration must be a mapping at the root level")

    unknown = set(data) - {"solver", "batch"}
    if unknown:
        raise ValueError(f"Unknown configuration sections: {', '.join(sorted(unknown))}")

    solver_config = SolverConfig.model_validate(data.get("solver") or {})
    batch_config = BatchConfig.model_validate(data.get("batch") or {})

    return UnifiedConfig(solver=solver_config, batch=batch_config)
