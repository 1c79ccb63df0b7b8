"""Runtime module - container runtime clients and their errors."""

from __future__ import annotations

from ctrprune.runtime.client import DockerRuntimeClient, RuntimeClient
from ctrprune.runtime.errors import (
    ContainerNotFoundError,
    ContainerStatusError,
    RuntimeClientError,
)

__all__ = [
    "ContainerNotFoundError",
    "ContainerStatusError",
    "DockerRuntimeClient",
    "RuntimeClient",
    "RuntimeClientError",
]
