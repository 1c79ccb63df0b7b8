"""Core module - configuration and schemas."""

from __future__ import annotations

from ctrprune.core.config import load_config, write_sample_config
from ctrprune.core.constants import (
    DEFAULT_NAMESPACE,
    DEFAULT_NAMESPACE_LABEL,
    PRUNE_REPORT_HEADER,
    PRUNE_WARNING,
)
from ctrprune.core.schemas import (
    CliConfig,
    ContainerHandle,
    ContainerState,
    PruneOptions,
    PruneOutcome,
    PruneReport,
)

__all__ = [
    "CliConfig",
    "ContainerHandle",
    "ContainerState",
    "DEFAULT_NAMESPACE",
    "DEFAULT_NAMESPACE_LABEL",
    "load_config",
    "PRUNE_REPORT_HEADER",
    "PRUNE_WARNING",
    "PruneOptions",
    "PruneOutcome",
    "PruneReport",
    "write_sample_config",
]
