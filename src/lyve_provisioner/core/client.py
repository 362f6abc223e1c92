"""Account API client interface and wire records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from collections.abc import Mapping


class PermissionRecord(BaseModel):
    """A permission as returned by the account API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str = ""
    description: str = ""
    type: str = ""
    actions: str = ""
    prefix: str = ""
    buckets: list[str] = Field(default_factory=list)
    ready_state: bool = Field(default=False, alias="readyState")


class ServiceAccountRecord(BaseModel):
    """A service account as returned by the account API.

    ``access_key``/``access_secret`` are only populated in the create
    response; later reads never return the secret.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str = ""
    description: str = ""
    permissions: list[str] = Field(default_factory=list)
    access_key: str = Field(default="", alias="accessKey")
    access_secret: str = Field(default="", alias="secret")


class AccountAPIClient(Protocol):
    """Authenticated client for the Lyve Cloud account API.

    Transport, authentication and retries live in the implementation; the
    handlers only rely on these calls. Responses may be records or the raw
    JSON mappings they are parsed from.
    """

    def create_permission(self, payload: Mapping[str, Any]) -> PermissionRecord | Mapping[str, Any]:
        ...

    def get_permission(self, permission_id: str) -> PermissionRecord | Mapping[str, Any]:
        ...

    def update_permission(self, permission_id: str, payload: Mapping[str, Any]) -> Any:
        ...

    def delete_permission(self, permission_id: str) -> Any:
        ...

    def create_service_account(
        self, payload: Mapping[str, Any]
    ) -> ServiceAccountRecord | Mapping[str, Any]:
        ...

    def get_service_account(
        self, service_account_id: str
    ) -> ServiceAccountRecord | Mapping[str, Any]:
        ...

    def update_service_account(self, service_account_id: str, payload: Mapping[str, Any]) -> Any:
        ...

    def delete_service_account(self, service_account_id: str) -> Any:
        ...
