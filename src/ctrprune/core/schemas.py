"""Pydantic schemas for ctrprune.

This module defines the data contracts shared by the runtime client, the
prune workflow and the CLI: container snapshots, per-container outcomes and
the report of a prune run.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from ctrprune.core.constants import DEFAULT_NAMESPACE, DEFAULT_NAMESPACE_LABEL


class ContainerState(str, Enum):
    """Lifecycle state of a container as reported by the runtime."""

    CREATED = "created"
    RUNNING = "running"
    PAUSED = "paused"
    RESTARTING = "restarting"
    REMOVING = "removing"
    EXITED = "exited"
    DEAD = "dead"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> ContainerState:
        """Map a runtime status string onto a state, ``UNKNOWN`` if unrecognized."""
        if not value:
            return cls.UNKNOWN
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_active(self) -> bool:
        """Whether a container in this state must be stopped before removal."""
        return self in (
            ContainerState.RUNNING,
            ContainerState.PAUSED,
            ContainerState.RESTARTING,
            ContainerState.REMOVING,
        )


class ContainerHandle(BaseModel):
    """Read-only snapshot of a runtime container taken at enumeration time.

    Attributes:
        id: Full, stable container identifier
        name: Container name (without leading slash)
        image: Image reference the container was created from
        status: Lifecycle state at enumeration time
        namespace: Namespace the container belongs to
        labels: Container labels
    """

    id: str = Field(..., min_length=1)
    name: str = Field(default="")
    image: str = Field(default="")
    status: ContainerState = Field(default=ContainerState.UNKNOWN)
    namespace: str = Field(default=DEFAULT_NAMESPACE)
    labels: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def strip_leading_slash(cls, v: str) -> str:
        """Docker reports names as '/name'."""
        return v.lstrip("/")

    @property
    def short_id(self) -> str:
        return self.id[:12]


class PruneOutcome(str, Enum):
    """Result of attempting to remove one container during a prune."""

    DELETED = "deleted"
    SKIPPED_EXPECTED = "skipped_expected"
    FAILED_UNEXPECTED = "failed_unexpected"


class PruneOptions(BaseModel):
    """Explicit inputs of a prune run."""

    namespace: str = Field(default=DEFAULT_NAMESPACE, min_length=1)
    force: bool = Field(default=False, description="Do not prompt for confirmation")


class PruneReport(BaseModel):
    """Outcome of one prune invocation.

    ``deleted`` holds exactly the ids whose removal succeeded, in the order
    removal was attempted.
    """

    namespace: str = Field(default=DEFAULT_NAMESPACE)
    aborted: bool = Field(default=False, description="User declined the confirmation")
    deleted: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    failed: dict[str, str] = Field(default_factory=dict)

    def record(self, container_id: str, outcome: PruneOutcome, error: str | None = None) -> None:
        """Record the outcome of one removal attempt."""
        if outcome is PruneOutcome.DELETED:
            self.deleted.append(container_id)
        elif outcome is PruneOutcome.SKIPPED_EXPECTED:
            self.skipped.append(container_id)
        else:
            self.failed[container_id] = error or ""

    def outcome_of(self, container_id: str) -> PruneOutcome | None:
        if container_id in self.deleted:
            return PruneOutcome.DELETED
        if container_id in self.skipped:
            return PruneOutcome.SKIPPED_EXPECTED
        if container_id in self.failed:
            return PruneOutcome.FAILED_UNEXPECTED
        return None

    @property
    def attempted(self) -> int:
        return len(self.deleted) + len(self.skipped) + len(self.failed)


class CliConfig(BaseModel):
    """Configuration of the ctrprune command line.

    Attributes:
        namespace: Namespace selected when --namespace is not given
        namespace_label: Container label that carries the namespace
        host: Docker daemon URL (None = environment / default socket)
        timeout_seconds: Docker API request timeout
        log_level: Logging level name
        log_file: Optional file to write logs to
        json_logs: Emit logs as JSON lines
    """

    namespace: str = Field(default=DEFAULT_NAMESPACE, min_length=1)
    namespace_label: str = Field(default=DEFAULT_NAMESPACE_LABEL, min_length=1)
    host: str | None = Field(default=None, description="Docker base URL, e.g. unix:///var/run/docker.sock")
    timeout_seconds: int = Field(default=60, ge=1, description="Docker API timeout")
    log_level: str = Field(default="INFO")
    log_file: Path | None = Field(default=None)
    json_logs: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level
