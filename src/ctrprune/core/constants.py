"""Shared constants for ctrprune."""

from __future__ import annotations

# Namespace a container belongs to when it carries no namespace label.
DEFAULT_NAMESPACE = "default"

# Container label holding the namespace a container belongs to.
DEFAULT_NAMESPACE_LABEL = "ctrprune.namespace"

# Prompt shown before a bulk prune unless --force is given.
PRUNE_WARNING = (
    "WARNING! This will remove all stopped containers.\n"
    "Are you sure you want to continue? [y/N] "
)

# Header printed above the ids of pruned containers.
PRUNE_REPORT_HEADER = "Deleted Containers:"
