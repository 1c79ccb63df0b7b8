"""Error types raised by runtime clients.

Callers classify failures by type, never by message text:

- ``ContainerStatusError``: removal was rejected because of the container's
  current state (running, paused, ...). Expected during bulk pruning.
- ``ContainerNotFoundError``: the container no longer exists.
- ``RuntimeClientError``: anything else (daemon unreachable, permission, I/O).
"""

from __future__ import annotations


class RuntimeClientError(Exception):
    """Base error for runtime client failures."""


class ContainerNotFoundError(RuntimeClientError):
    """Raised when a container does not exist (anymore)."""

    def __init__(self, container_id: str) -> None:
        super().__init__(f"no such container: {container_id}")
        self.container_id = container_id


class ContainerStatusError(RuntimeClientError):
    """Raised when a container cannot be removed in its current state."""

    def __init__(self, container_id: str, state: str, message: str | None = None) -> None:
        super().__init__(
            message
            or f"container {container_id} is {state}, stop it first or use force"
        )
        self.container_id = container_id
        self.state = state
