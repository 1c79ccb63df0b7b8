"""Runtime clients for listing and removing containers.

``RuntimeClient`` is the boundary the prune workflow talks to.
``DockerRuntimeClient`` implements it on top of the Docker SDK and maps SDK
errors onto the classified errors in ``ctrprune.runtime.errors``.

Namespaces are expressed as a container label: a container belongs to the
namespace named by its ``namespace_label`` label, or to the default
namespace when it carries no such label.
"""

from __future__ import annotations

import contextlib
import logging
from typing import TYPE_CHECKING, Any, Protocol

import docker
from docker.errors import APIError, DockerException, NotFound

from ctrprune.core.constants import DEFAULT_NAMESPACE, DEFAULT_NAMESPACE_LABEL
from ctrprune.core.schemas import ContainerHandle, ContainerState
from ctrprune.runtime.errors import (
    ContainerNotFoundError,
    ContainerStatusError,
    RuntimeClientError,
)

if TYPE_CHECKING:
    from docker.models.containers import Container

logger = logging.getLogger(__name__)

# HTTP status the Docker daemon answers with when a container's state
# forbids the requested operation.
_CONFLICT = 409


class RuntimeClient(Protocol):
    """Operations the workflows need from a container runtime."""

    def list_containers(self, namespace: str) -> list[ContainerHandle]:
        """Return every container of ``namespace``, whatever its state."""
        ...

    def get(self, container_id: str, namespace: str) -> ContainerHandle:
        """Look up a container by id or name within ``namespace``."""
        ...

    def remove(
        self,
        container: ContainerHandle,
        namespace: str,
        force: bool = False,
        remove_volumes: bool = True,
    ) -> None:
        """Remove ``container``.

        Raises:
            ContainerStatusError: If the container's state forbids removal
            ContainerNotFoundError: If the container no longer exists
            RuntimeClientError: On any other failure
        """
        ...

    def close(self) -> None: ...


class DockerRuntimeClient:
    """RuntimeClient backed by the Docker Engine API.

    Example:
        ```python
        client = DockerRuntimeClient(base_url="unix:///var/run/docker.sock")
        for container in client.list_containers("default"):
            print(container.id, container.status.value)
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        namespace_label: str = DEFAULT_NAMESPACE_LABEL,
        timeout_seconds: int = 60,
        raw_client: Any | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Docker daemon URL; None uses DOCKER_HOST / default socket
            namespace_label: Label that carries a container's namespace
            timeout_seconds: API request timeout
            raw_client: Pre-built docker.DockerClient (mainly for tests)

        Raises:
            RuntimeClientError: If the Docker client cannot be created
        """
        self.namespace_label = namespace_label
        if raw_client is not None:
            self._client = raw_client
            return

        try:
            if base_url:
                self._client = docker.DockerClient(base_url=base_url, timeout=timeout_seconds)
            else:
                self._client = docker.from_env(timeout=timeout_seconds)
        except DockerException as e:
            logger.debug(f"Docker client init failed (base_url={base_url}): {e}")
            raise RuntimeClientError(f"cannot connect to Docker: {e}") from e

    def namespace_of(self, labels: dict[str, str] | None) -> str:
        """Namespace a container with ``labels`` belongs to."""
        return (labels or {}).get(self.namespace_label) or DEFAULT_NAMESPACE

    def list_containers(self, namespace: str) -> list[ContainerHandle]:
        try:
            # Containers removed between listing and inspection are skipped
            containers = self._client.containers.list(all=True, ignore_removed=True)
        except DockerException as e:
            raise RuntimeClientError(f"failed to list containers: {e}") from e

        handles = []
        for container in containers:
            handle = self._to_handle(container)
            if handle.namespace == namespace:
                handles.append(handle)

        logger.debug(
            f"Found {len(handles)} containers in namespace {namespace} "
            f"({len(containers)} total)"
        )
        return handles

    def get(self, container_id: str, namespace: str) -> ContainerHandle:
        """Look up a container by id or name within ``namespace``.

        Raises:
            ContainerNotFoundError: If no such container exists in the namespace
            RuntimeClientError: On any other failure
        """
        try:
            container = self._client.containers.get(container_id)
        except NotFound as e:
            raise ContainerNotFoundError(container_id) from e
        except DockerException as e:
            raise RuntimeClientError(f"failed to inspect container {container_id}: {e}") from e

        handle = self._to_handle(container)
        if handle.namespace != namespace:
            raise ContainerNotFoundError(container_id)
        return handle

    def remove(
        self,
        container: ContainerHandle,
        namespace: str,
        force: bool = False,
        remove_volumes: bool = True,
    ) -> None:
        if container.namespace != namespace:
            raise ContainerNotFoundError(container.id)

        if not force and container.status.is_active:
            raise ContainerStatusError(container.id, container.status.value)

        try:
            self._client.api.remove_container(container.id, v=remove_volumes, force=force)
        except NotFound as e:
            raise ContainerNotFoundError(container.id) from e
        except APIError as e:
            # The state may have changed since enumeration
            if e.status_code == _CONFLICT:
                raise ContainerStatusError(
                    container.id, container.status.value, message=str(e.explanation or e)
                ) from e
            raise RuntimeClientError(f"failed to remove container {container.id}: {e}") from e
        except DockerException as e:
            raise RuntimeClientError(f"failed to remove container {container.id}: {e}") from e

        logger.debug(f"Removed container {container.short_id}")

    def close(self) -> None:
        """Release the underlying HTTP session."""
        with contextlib.suppress(Exception):
            self._client.close()

    def _to_handle(self, container: Container) -> ContainerHandle:
        attrs = getattr(container, "attrs", None) or {}
        labels = getattr(container, "labels", None) or {}
        return ContainerHandle(
            id=container.id,
            name=getattr(container, "name", None) or "",
            image=(attrs.get("Config") or {}).get("Image") or "",
            status=ContainerState.parse(getattr(container, "status", None)),
            namespace=self.namespace_of(labels),
            labels=labels,
        )
