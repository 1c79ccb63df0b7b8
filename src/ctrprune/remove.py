"""Removal of explicitly named containers (``container rm``)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ctrprune.runtime.client import RuntimeClient
from ctrprune.runtime.errors import RuntimeClientError

logger = logging.getLogger(__name__)


@dataclass
class RemoveResult:
    """Result of removing a list of containers."""

    removed: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.errors


def remove_containers(
    client: RuntimeClient,
    targets: list[str],
    namespace: str,
    force: bool = False,
    remove_volumes: bool = False,
) -> RemoveResult:
    """Remove each container named in ``targets`` (id, id prefix or name).

    Every target is attempted; a failure is recorded and the next target is
    processed.
    """
    result = RemoveResult()
    for target in targets:
        try:
            container = client.get(target, namespace)
            client.remove(container, namespace, force=force, remove_volumes=remove_volumes)
        except RuntimeClientError as e:
            logger.debug(f"Removing {target} failed: {e}")
            result.errors[target] = str(e)
            continue
        result.removed.append(target)
    return result
