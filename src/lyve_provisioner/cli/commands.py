"""CLI command implementations."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from lyve_provisioner.cli import app
from lyve_provisioner.cli.errors import handle_error

ConfigPath = Annotated[
    Path,
    typer.Option("--config", "-c", help="Path to the configuration file."),
]

NoColor = Annotated[
    bool,
    typer.Option("--no-color", help="Disable colored output."),
]


def _use_color(no_color: bool) -> bool:
    """Determine whether to use color output."""
    return not (no_color or os.environ.get("NO_COLOR"))


@app.command()
def validate(
    config: ConfigPath = Path("lyve-provisioner.yaml"),
    no_color: NoColor = False,
) -> None:
    """Validate the configuration file."""
    from lyve_provisioner.cli.formatting import styler
    from lyve_provisioner.config import load
    from lyve_provisioner.config import validate as validate_fn

    color = _use_color(no_color)
    try:
        cfg = load(config)
        validate_fn(cfg)
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=color)) from exc

    typer.echo(styler(color)("Configuration is valid.", fg="green"))


@app.command()
def show(
    config: ConfigPath = Path("lyve-provisioner.yaml"),
    no_color: NoColor = False,
) -> None:
    """Show the declared resources with their resolved bucket scope."""
    from lyve_provisioner.cli.formatting import format_resources
    from lyve_provisioner.config import load

    color = _use_color(no_color)
    try:
        cfg = load(config)
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=color)) from exc

    typer.echo(format_resources(cfg.resources, color=color))
