"""YAML configuration loading and convenience wiring API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lyve_provisioner.config.loader import ConfigError, load_config
from lyve_provisioner.config.registry import default_registry
from lyve_provisioner.config.schema import Config, ProviderConfig
from lyve_provisioner.core.provider import LyveProvider
from lyve_provisioner.engine.errors import ValidationError

if TYPE_CHECKING:
    from pathlib import Path

    from lyve_provisioner.core.client import AccountAPIClient
    from lyve_provisioner.engine.registry import ResourceTypeRegistry

__all__ = [
    "Config",
    "ConfigError",
    "ProviderConfig",
    "load",
    "load_config",
    "provider_from_config",
    "registry_from_config",
    "validate",
]


def load(path: Path | str) -> Config:
    """Load a YAML configuration file."""
    return load_config(path)


def provider_from_config(config: Config, client: AccountAPIClient | None = None) -> LyveProvider:
    """Build a ``LyveProvider`` from a ``Config`` instance.

    Without *client* the provider can validate but not reach the account API.
    """
    if client is None:
        return LyveProvider(
            client_id=config.provider.client_id,
            client_secret=config.provider.client_secret,
        )
    return LyveProvider.from_client(
        client,
        client_id=config.provider.client_id,
        client_secret=config.provider.client_secret,
    )


def registry_from_config(
    config: Config, client: AccountAPIClient | None = None
) -> ResourceTypeRegistry:
    """Build the default handler registry for a ``Config`` instance."""
    return default_registry(provider_from_config(config, client))


def validate(config: Config) -> None:
    """Run every handler's validation over the declared resources.

    Raises:
        ValidationError: Listing every problem found. No API calls are made.
    """
    registry = registry_from_config(config)
    errors: list[str] = []
    for registration in registry:
        for resource in config.resources:
            if resource.resource_type == registration.resource_type:
                errors.extend(registration.handler.validate(resource))
    if errors:
        raise ValidationError(errors)
