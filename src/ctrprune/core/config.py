"""Configuration loading utilities.

Supports YAML and JSON configuration files with schema validation.
"""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from ctrprune.core.schemas import CliConfig

SAMPLE_CONFIG = """\
# ctrprune configuration

# Namespace used when --namespace is not given
namespace: default

# Container label holding a container's namespace.
# Containers without this label belong to the "default" namespace.
namespace_label: ctrprune.namespace

# Docker daemon URL (omit to use DOCKER_HOST / the default socket)
# host: unix:///var/run/docker.sock

# Docker API request timeout (seconds)
timeout_seconds: 60

# Logging
log_level: INFO
# log_file: ./ctrprune.log
json_logs: false
"""


def load_config(path: Path | str | None = None) -> CliConfig:
    """Load and validate a configuration file.

    Args:
        path: Path to YAML or JSON configuration file, or None for defaults

    Returns:
        Validated CliConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is unsupported
        pydantic.ValidationError: If config is invalid
    """
    if path is None:
        return CliConfig()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()
    with open(path, encoding="utf-8") as f:
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {suffix}. Use .yaml, .yml, or .json")

    # An empty YAML document means "all defaults"
    return CliConfig.model_validate(data or {})


def write_sample_config(output: Path) -> Path:
    """Write the sample configuration to ``output``."""
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(SAMPLE_CONFIG, encoding="utf-8")
    return output
