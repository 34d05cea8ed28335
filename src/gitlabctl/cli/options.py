"""Shared CLI options."""

from __future__ import annotations

import enum

import typer


class OutputFormat(str, enum.Enum):
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


OutputOption = typer.Option(OutputFormat.TABLE, "--output", "-o", help="Output format: table, json, yaml")
NamespaceOption = typer.Option(None, "--namespace", "-n", help="Filters the resources to the given namespace/group.")
ConfigOption = typer.Option(None, "--config", help="Config file (default: ~/.config/gitlab.toml)")
WorkersOption = typer.Option(None, "--workers", "-w", min=1, help="Concurrent API requests per stage")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Log API activity to stderr")
