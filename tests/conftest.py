"""Shared fixtures for ctrprune tests."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from ctrprune.core.schemas import ContainerHandle, ContainerState
from ctrprune.runtime.errors import ContainerNotFoundError, ContainerStatusError


class FakeRuntimeClient:
    """In-memory RuntimeClient recording every call."""

    def __init__(
        self,
        containers: list[ContainerHandle] | None = None,
        failures: dict[str, Exception] | None = None,
        list_error: Exception | None = None,
    ) -> None:
        self.containers = list(containers or [])
        self.failures = failures or {}
        self.list_error = list_error
        self.calls: list[tuple] = []
        self.closed = False

    def list_containers(self, namespace: str) -> list[ContainerHandle]:
        self.calls.append(("list", namespace))
        if self.list_error is not None:
            raise self.list_error
        return [c for c in self.containers if c.namespace == namespace]

    def get(self, container_id: str, namespace: str) -> ContainerHandle:
        self.calls.append(("get", container_id, namespace))
        for c in self.containers:
            if c.namespace == namespace and container_id in (c.id, c.name):
                return c
        raise ContainerNotFoundError(container_id)

    def remove(
        self,
        container: ContainerHandle,
        namespace: str,
        force: bool = False,
        remove_volumes: bool = True,
    ) -> None:
        self.calls.append(("remove", container.id, namespace, force, remove_volumes))
        if container.id in self.failures:
            raise self.failures[container.id]
        if not force and container.status.is_active:
            raise ContainerStatusError(container.id, container.status.value)
        self.containers = [c for c in self.containers if c.id != container.id]

    def close(self) -> None:
        self.closed = True

    @property
    def removed_ids(self) -> list[str]:
        return [call[1] for call in self.calls if call[0] == "remove"]


def make_container(
    container_id: str,
    status: ContainerState = ContainerState.EXITED,
    namespace: str = "default",
    name: str | None = None,
) -> ContainerHandle:
    return ContainerHandle(
        id=container_id,
        name=name or f"name-{container_id}",
        image="alpine:latest",
        status=status,
        namespace=namespace,
    )


@pytest.fixture
def console() -> Console:
    """Console writing into a string buffer."""
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def mixed_client() -> FakeRuntimeClient:
    """Two stopped containers around a running one."""
    return FakeRuntimeClient(
        containers=[
            make_container("aaa111"),
            make_container("bbb222", status=ContainerState.RUNNING),
            make_container("ccc333", status=ContainerState.CREATED),
        ]
    )

