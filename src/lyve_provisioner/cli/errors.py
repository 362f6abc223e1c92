"""Map exceptions to clean stderr messages and exit codes."""

from __future__ import annotations

import typer


def _err(msg: str, *, fg: str | None) -> None:
    """Print a styled message to stderr."""
    typer.echo(typer.style(msg, fg=fg), err=True)


def handle_error(exc: Exception, *, color: bool = True) -> int:
    """Print a clean error message to stderr and return an exit code.

    All errors map to exit code 1.  No tracebacks are printed.
    """
    from lyve_provisioner.config.loader import ConfigError
    from lyve_provisioner.engine.errors import CredentialError, RemoteError, ValidationError

    fg = typer.colors.RED if color else None

    if isinstance(exc, ConfigError):
        _err(f"Configuration error: {exc}", fg=fg)
    elif isinstance(exc, ValidationError):
        _err("Validation failed:", fg=fg)
        for e in exc.errors:
            _err(f"  - {e}", fg=fg)
    elif isinstance(exc, CredentialError):
        _err(f"Credential error: {exc}", fg=fg)
    elif isinstance(exc, RemoteError):
        _err(f"Account API error: {exc}", fg=fg)
    else:
        _err(f"Error: {exc}", fg=fg)

    return 1
