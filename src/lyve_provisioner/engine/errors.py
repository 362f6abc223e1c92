"""Engine error types."""

from __future__ import annotations


class EngineError(Exception):
    """Base exception for engine errors."""


class UnknownResourceTypeError(EngineError):
    """Raised when a resource type has no registration/handler."""

    def __init__(self, resource_type: str) -> None:
        super().__init__(f"Unknown resource type: {resource_type}")
        self.resource_type = resource_type


class CredentialError(EngineError):
    """Raised when account API credentials are not configured.

    Checked before any remote call is attempted.
    """

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or "credentials for account api(client_id, client_secret) are missing"
        )


class ValidationError(EngineError):
    """One or more resources failed validation before any remote call."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        msg = "Validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(msg)


class RemoteError(EngineError):
    """Raised when an account API call fails.

    ``operation`` names the failed step (e.g. "creating permission"). The
    original exception is chained via ``__cause__``.
    """

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        super().__init__(f"error {operation}: {message}")
