"""Configuration models for YAML-based provisioning."""

from __future__ import annotations

from typing import Annotated, Any, Self

from pydantic import BaseModel, BeforeValidator, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lyve_provisioner.resources.base import Resource  # noqa: TC001 (needed at runtime by pydantic)
from lyve_provisioner.resources.permission import (
    PermissionResource,  # noqa: TC001 (needed at runtime by pydantic)
)
from lyve_provisioner.resources.service_account import (
    ServiceAccountResource,  # noqa: TC001 (needed at runtime by pydantic)
)


class ProviderConfig(BaseSettings):
    """Account API credentials.

    Fields can be set via YAML (constructor kwargs) or environment variables
    with the ``LYVECLOUD_`` prefix.  Constructor kwargs take precedence.

    ``client_secret`` is typically provided via the ``LYVECLOUD_CLIENT_SECRET``
    environment variable rather than YAML to avoid committing secrets to
    version control.
    """

    model_config = SettingsConfigDict(env_prefix="LYVECLOUD_")

    client_id: str | None = None
    client_secret: str | None = None


def _none_to_list(v: Any) -> Any:
    return v if v is not None else []


class Config(BaseModel):
    """Provisioning configuration, validated straight from the YAML structure."""

    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    permissions: Annotated[list[PermissionResource], BeforeValidator(_none_to_list)] = []
    service_accounts: Annotated[
        list[ServiceAccountResource],
        BeforeValidator(_none_to_list),
    ] = []

    @model_validator(mode="after")
    def _number_permissions(self) -> Self:
        for i, p in enumerate(self.permissions):
            p._position = i  # noqa: SLF001
        return self

    @property
    def resources(self) -> list[Resource]:
        """All declared resources. Ordering is not significant."""
        return [*self.permissions, *self.service_accounts]
