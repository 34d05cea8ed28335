"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="gitlabctl",
    help="gitlabctl controls gitlab from the command line.",
)

HINT = "Why don't you try the get command?"


@app.callback(invoke_without_command=True)
def root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(HINT)


def _register_commands() -> None:
    from gitlabctl.cli.commands.get_cmd import get

    app.command(name="get", help="Get resources from gitlab")(get)


_register_commands()


def main() -> None:
    app()
