"""Tests for ctrprune schemas."""

import pytest
from pydantic import ValidationError

from ctrprune.core.schemas import (
    CliConfig,
    ContainerHandle,
    ContainerState,
    PruneOptions,
    PruneOutcome,
    PruneReport,
)


class TestContainerState:
    """Tests for ContainerState."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("running", ContainerState.RUNNING),
            ("Exited", ContainerState.EXITED),
            (" paused ", ContainerState.PAUSED),
            ("created", ContainerState.CREATED),
            ("", ContainerState.UNKNOWN),
            (None, ContainerState.UNKNOWN),
            ("Up 3 hours", ContainerState.UNKNOWN),
        ],
    )
    def test_parse(self, raw, expected):
        assert ContainerState.parse(raw) is expected

    def test_active_states(self):
        active = {s for s in ContainerState if s.is_active}
        assert active == {
            ContainerState.RUNNING,
            ContainerState.PAUSED,
            ContainerState.RESTARTING,
            ContainerState.REMOVING,
        }


class TestContainerHandle:
    """Tests for ContainerHandle."""

    def test_defaults(self):
        handle = ContainerHandle(id="0123456789abcdef")
        assert handle.short_id == "0123456789ab"
        assert handle.status is ContainerState.UNKNOWN
        assert handle.namespace == "default"

    def test_name_slash_stripped(self):
        assert ContainerHandle(id="c1", name="/web").name == "web"

    def test_frozen(self):
        handle = ContainerHandle(id="c1")
        with pytest.raises(ValidationError):
            handle.id = "c2"

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            ContainerHandle(id="")


class TestPruneReport:
    """Tests for PruneReport."""

    def test_record_outcomes(self):
        report = PruneReport()
        report.record("a", PruneOutcome.DELETED)
        report.record("b", PruneOutcome.SKIPPED_EXPECTED)
        report.record("c", PruneOutcome.FAILED_UNEXPECTED, "boom")
        report.record("d", PruneOutcome.DELETED)

        assert report.deleted == ["a", "d"]
        assert report.skipped == ["b"]
        assert report.failed == {"c": "boom"}
        assert report.attempted == 4
        assert report.outcome_of("c") is PruneOutcome.FAILED_UNEXPECTED
        assert report.outcome_of("zzz") is None


class TestPruneOptions:
    """Tests for PruneOptions."""

    def test_defaults(self):
        options = PruneOptions()
        assert options.namespace == "default"
        assert options.force is False

    def test_empty_namespace_rejected(self):
        with pytest.raises(ValidationError):
            PruneOptions(namespace="")


class TestCliConfig:
    """Tests for CliConfig."""

    def test_defaults(self):
        config = CliConfig()
        assert config.namespace == "default"
        assert config.namespace_label == "ctrprune.namespace"
        assert config.host is None
        assert config.log_level == "INFO"

    def test_log_level_normalized(self):
        assert CliConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            CliConfig(log_level="verbose")

    def test_timeout_bounds(self):
        with pytest.raises(ValidationError):
            CliConfig(timeout_seconds=0)
