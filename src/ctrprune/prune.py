"""Bulk removal of stopped containers.

The prune workflow is strictly linear and single-threaded:

1. Confirmation gate: proceed when forced, otherwise ask the operator
2. Enumeration: list every container of the namespace (failure is fatal)
3. Removal: try each container in order; status errors are skipped
   silently, other errors are logged and the batch continues
4. Report: print the ids that were actually deleted
"""

from __future__ import annotations

import logging
from typing import TextIO

from rich.console import Console

from ctrprune.core.constants import PRUNE_REPORT_HEADER, PRUNE_WARNING
from ctrprune.core.schemas import PruneOptions, PruneOutcome, PruneReport
from ctrprune.runtime.client import RuntimeClient
from ctrprune.runtime.errors import ContainerStatusError

logger = logging.getLogger(__name__)


def read_token(stream: TextIO) -> str:
    """Read one line from ``stream`` and return its first whitespace-delimited token.

    Returns an empty string on EOF or a blank line.
    """
    line = stream.readline()
    tokens = line.split()
    return tokens[0] if tokens else ""


def confirm(force: bool, input_stream: TextIO, console: Console) -> bool:
    """Decide whether the prune may proceed.

    Anything but ``y``/``Y`` declines, including empty input.
    """
    if force:
        return True

    console.out(PRUNE_WARNING, end="", highlight=False)
    return read_token(input_stream).lower() == "y"


def print_report(report: PruneReport, console: Console) -> None:
    """Print the deleted ids under a header, or nothing if none were deleted."""
    if not report.deleted:
        return

    console.out(PRUNE_REPORT_HEADER, highlight=False)
    for container_id in report.deleted:
        console.out(container_id, highlight=False)


def prune_containers(
    client: RuntimeClient,
    options: PruneOptions,
    *,
    input_stream: TextIO,
    console: Console,
) -> PruneReport:
    """Remove all stopped containers of ``options.namespace``.

    Args:
        client: Runtime client used to list and remove containers
        options: Namespace and force flag of this run
        input_stream: Stream the confirmation token is read from
        console: Console the prompt and report are written to

    Returns:
        The report of this run; ``aborted`` is set when the operator declined

    Raises:
        RuntimeClientError: If the containers cannot be enumerated. No
            removal has been attempted in that case.
    """
    report = PruneReport(namespace=options.namespace)

    if not confirm(options.force, input_stream, console):
        logger.debug("Prune declined by user")
        report.aborted = True
        return report

    containers = client.list_containers(options.namespace)
    logger.debug(f"Pruning {len(containers)} containers in namespace {options.namespace}")

    for container in containers:
        try:
            client.remove(container, options.namespace, force=False, remove_volumes=True)
        except ContainerStatusError:
            report.record(container.id, PruneOutcome.SKIPPED_EXPECTED)
            continue
        except Exception as e:
            logger.warning(f"failed to remove container {container.id}: {e}")
            report.record(container.id, PruneOutcome.FAILED_UNEXPECTED, str(e))
            continue
        report.record(container.id, PruneOutcome.DELETED)

    print_report(report, console)
    return report
