"""ctrprune - container maintenance CLI."""

from __future__ import annotations

from ctrprune.core.schemas import (
    CliConfig,
    ContainerHandle,
    ContainerState,
    PruneOptions,
    PruneOutcome,
    PruneReport,
)
from ctrprune.prune import prune_containers

__version__ = "0.1.0"

__all__ = [
    "CliConfig",
    "ContainerHandle",
    "ContainerState",
    "PruneOptions",
    "PruneOutcome",
    "PruneReport",
    "prune_containers",
    "__version__",
]
