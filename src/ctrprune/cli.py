"""CLI for ctrprune.

Provides a command-line interface using Typer for:
- Pruning stopped containers
- Removing named containers
- Listing containers of a namespace
- Generating a sample configuration
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ctrprune.core.config import load_config, write_sample_config
from ctrprune.core.schemas import CliConfig, ContainerHandle, ContainerState, PruneOptions
from ctrprune.prune import prune_containers
from ctrprune.remove import remove_containers
from ctrprune.runtime.client import DockerRuntimeClient
from ctrprune.runtime.errors import RuntimeClientError
from ctrprune.utils.logging import get_logger, setup_logging

app = typer.Typer(
    name="ctrprune",
    help="Container maintenance: prune, remove and list containers",
    add_completion=False,
)
container_app = typer.Typer(help="Manage containers", no_args_is_help=True)
app.add_typer(container_app, name="container")

console = Console()
err_console = Console(stderr=True)

logger = get_logger(__name__)


def create_client(settings: CliConfig) -> DockerRuntimeClient:
    """Build the runtime client for the resolved settings."""
    return DockerRuntimeClient(
        base_url=settings.host,
        namespace_label=settings.namespace_label,
        timeout_seconds=settings.timeout_seconds,
    )


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[bold red]Error:[/] {escape(message)}")
    return typer.Exit(1)


def _settings(ctx: typer.Context) -> CliConfig:
    if isinstance(ctx.obj, CliConfig):
        return ctx.obj
    return CliConfig()


def _open_client(settings: CliConfig) -> DockerRuntimeClient:
    try:
        return create_client(settings)
    except RuntimeClientError as e:
        raise _fail(str(e)) from e


@app.callback()
def main(
    ctx: typer.Context,
    namespace: str | None = typer.Option(
        None, "--namespace", "-n", envvar="CTRPRUNE_NAMESPACE", help="Namespace to operate in"
    ),
    host: str | None = typer.Option(
        None, "--host", "-H", envvar="DOCKER_HOST", help="Docker daemon URL"
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", envvar="CTRPRUNE_CONFIG", help="Configuration file (YAML/JSON)"
    ),
    log_level: str | None = typer.Option(None, "--log-level", "-l", help="Logging level"),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file in addition to console"
    ),
    json_logs: bool = typer.Option(False, "--json-logs", help="Output logs in JSON format"),
) -> None:
    """Resolve global options into the settings every command receives."""
    # Command-line options win over the configuration file
    overrides = {
        "namespace": namespace,
        "host": host,
        "log_level": log_level,
        "log_file": log_file,
        "json_logs": json_logs or None,
    }

    try:
        settings = load_config(config)
        settings = CliConfig.model_validate(
            {**settings.model_dump(), **{k: v for k, v in overrides.items() if v is not None}}
        )
    except Exception as e:
        raise _fail(f"loading config: {e}") from e

    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        json_format=settings.json_logs,
        rich_console=not settings.json_logs,
    )

    logger.debug(f"Using namespace {settings.namespace} (host={settings.host or 'default'})")
    ctx.obj = settings


@container_app.command("prune")
def prune(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", "-f", help="Do not prompt for confirmation"),
) -> None:
    """Remove all stopped containers."""
    settings = _settings(ctx)
    options = PruneOptions(namespace=settings.namespace, force=force)

    client = _open_client(settings)
    try:
        prune_containers(client, options, input_stream=sys.stdin, console=console)
    except RuntimeClientError as e:
        raise _fail(str(e)) from e
    finally:
        client.close()


@container_app.command("rm")
def rm(
    ctx: typer.Context,
    containers: list[str] = typer.Argument(..., help="Container ids or names"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Force the removal of running containers"
    ),
    volumes: bool = typer.Option(
        False, "--volumes", "-v", help="Remove anonymous volumes associated with the container"
    ),
) -> None:
    """Remove one or more containers."""
    settings = _settings(ctx)

    client = _open_client(settings)
    try:
        result = remove_containers(
            client, containers, settings.namespace, force=force, remove_volumes=volumes
        )
    finally:
        client.close()

    for target in result.removed:
        console.out(target, highlight=False)
    for target, error in result.errors.items():
        err_console.print(f"[bold red]Error:[/] {escape(target)}: {escape(error)}")

    if not result.success:
        raise typer.Exit(1)


@container_app.command("ls")
def ls(
    ctx: typer.Context,
    show_all: bool = typer.Option(
        False, "--all", "-a", help="Show all containers (default shows just running)"
    ),
) -> None:
    """List containers of the current namespace."""
    settings = _settings(ctx)

    client = _open_client(settings)
    try:
        containers = client.list_containers(settings.namespace)
    except RuntimeClientError as e:
        raise _fail(str(e)) from e
    finally:
        client.close()

    if not show_all:
        containers = [c for c in containers if c.status is ContainerState.RUNNING]

    _show_containers_table(containers, settings.namespace)


@app.command()
def init_config(
    output: Path = typer.Option(
        Path("ctrprune.yaml"), "--output", "-o", help="Output configuration file"
    ),
) -> None:
    """Generate a sample configuration file."""
    write_sample_config(output)
    console.print(f"[bold green]Sample configuration written to {escape(str(output))}[/]")


def _show_containers_table(containers: list[ContainerHandle], namespace: str) -> None:
    """Display containers as a table."""
    table = Table(title=f"Containers ({namespace})")
    table.add_column("Container ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Image", style="white")
    table.add_column("Status", style="green")

    for c in containers:
        status_style = "green" if c.status is ContainerState.RUNNING else "dim"
        table.add_row(
            c.short_id,
            escape(c.name),
            escape(c.image),
            f"[{status_style}]{c.status.value}[/]",
        )

    console.print(table)


if __name__ == "__main__":
    app()
