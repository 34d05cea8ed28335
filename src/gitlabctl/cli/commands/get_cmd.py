"""gitlabctl get <resource> - Report deployed commits per environment."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gitlabctl.cli.options import (
    ConfigOption,
    NamespaceOption,
    OutputFormat,
    OutputOption,
    VerboseOption,
    WorkersOption,
)
from gitlabctl.config.settings import ConfigError, load_settings
from gitlabctl.core.environment_store import EnvironmentStore
from gitlabctl.core.gitlab_client import GitlabClient, GitlabClientError
from gitlabctl.core.pipeline import build_report
from gitlabctl.output.formatters import output_report

logger = logging.getLogger(__name__)
err_console = Console(stderr=True)


def _print_progress(message: str, elapsed: float) -> None:
    err_console.print(f"{message:<30} [{elapsed:.2f}s]", style="dim", markup=False, highlight=False)


def get(
    resource: str = typer.Argument(help="The resource to get, e.g. environment."),
    namespace: Optional[str] = NamespaceOption,
    output: OutputFormat = OutputOption,
    config: Optional[Path] = ConfigOption,
    workers: Optional[int] = WorkersOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show the deployed commit of every environment and flag drifting projects."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        settings = load_settings(config)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    logger.debug("Building %s report against %s", resource, settings.server)
    client = GitlabClient(settings)
    store = EnvironmentStore(client, max_workers=workers or settings.max_workers)
    try:
        client.connect()
        report = build_report(store, namespace=namespace or "", on_progress=_print_progress)
    except GitlabClientError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    output_report(report, output.value)

    if report.skipped and output == OutputFormat.TABLE:
        err_console.print(
            f"Skipped {len(report.skipped)} fetch(es) after errors; rerun with --verbose for details",
            style="dim",
            highlight=False,
        )
