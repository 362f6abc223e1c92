"""Command-line entry point: ``lyve-provisioner validate|show``.

Handlers log through the ``lyve_provisioner`` logger hierarchy. Nothing is
printed unless ``-v``/``-vv`` or ``LYVECLOUD_LOG`` asks for it, so library
hosts embedding the handlers keep control of their own logging.
"""

from __future__ import annotations

import logging
import os

import typer

from lyve_provisioner import __version__

LOG_ENV_VAR = "LYVECLOUD_LOG"

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_VERBOSITY = {1: logging.INFO, 2: logging.DEBUG}

app = typer.Typer(
    name="lyve-provisioner",
    help="Manage Lyve Cloud bucket permissions and service accounts from YAML.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"lyve-provisioner {__version__}")
        raise typer.Exit


def _level_from_env() -> int | None:
    """Level named by ``LYVECLOUD_LOG``; unknown names fall back to INFO."""
    name = os.environ.get(LOG_ENV_VAR, "").strip().upper()
    if not name:
        return None
    if name not in _LEVEL_NAMES:
        typer.echo(
            f"WARNING: invalid {LOG_ENV_VAR} level '{name}', "
            f"expected one of {', '.join(_LEVEL_NAMES)}; defaulting to INFO",
            err=True,
        )
        return logging.INFO
    return logging.getLevelName(name)


def _configure_logging(verbose: int) -> None:
    """Route ``lyve_provisioner`` records to stderr at the requested level.

    ``LYVECLOUD_LOG`` wins over ``-v`` flags. Without either, logging is
    left untouched.
    """
    level = _level_from_env()
    if level is None and verbose:
        level = _VERBOSITY[min(verbose, 2)]
    if level is None:
        return
    # Third-party loggers stay at WARNING; only ours follows the flag.
    logging.basicConfig(level=logging.WARNING, format=_LOG_FORMAT, force=True)
    logging.getLogger("lyve_provisioner").setLevel(level)


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help=f"Log handler activity (-v info, -vv debug). Overridden by {LOG_ENV_VAR}.",
    ),
) -> None:
    """Terraform-style provisioning for Lyve Cloud permissions and service accounts."""
    _ = version
    _configure_logging(verbose)


# commands import ``app``
from lyve_provisioner.cli import commands as _commands  # noqa: E402, F401
