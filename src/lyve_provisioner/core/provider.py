"""Lyve Provider - account credentials and API client for a Lyve Cloud account."""

from functools import cached_property
from typing import TYPE_CHECKING, Any, Self

from pydantic import BaseModel, ConfigDict, SecretStr

if TYPE_CHECKING:
    from lyve_provisioner.core.client import AccountAPIClient
    from lyve_provisioner.engine.permission_handler import PermissionHandler
    from lyve_provisioner.engine.service_account_handler import ServiceAccountHandler


class LyveProvider(BaseModel):
    """Account-level configuration shared by every handler.

    The provider carries the account API credentials and the client that
    talks to the account API. The client is always injected: transport and
    session handling belong to the embedding host.

    Examples:
        provider = LyveProvider.from_client(
            client,
            client_id="my-client-id",
            client_secret="my-client-secret",
        )
        attrs = provider.permissions.create(PermissionResource(...))
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    client_id: str | None = None
    client_secret: SecretStr | None = None

    _injected_client: Any = None

    @classmethod
    def from_client(
        cls,
        client: "AccountAPIClient",
        *,
        client_id: str | None = None,
        client_secret: str | SecretStr | None = None,
    ) -> Self:
        """Create a provider around a pre-configured account API client.

        Args:
            client: Object implementing ``AccountAPIClient``
            client_id: Account API client id
            client_secret: Account API client secret
        """
        if isinstance(client_secret, str):
            client_secret = SecretStr(client_secret)
        provider = cls(client_id=client_id, client_secret=client_secret)
        provider._injected_client = client
        return provider

    def has_credentials(self) -> bool:
        """Return True when both account API credentials are configured."""
        if not self.client_id or self.client_secret is None:
            return False
        return bool(self.client_secret.get_secret_value())

    @cached_property
    def client(self) -> "AccountAPIClient":
        """Get the account API client."""
        if self._injected_client is None:
            raise ValueError(
                "No account API client configured; use LyveProvider.from_client() "
                "to inject one"
            )
        return self._injected_client

    # Handlers for each resource type
    @cached_property
    def permissions(self) -> "PermissionHandler":
        from lyve_provisioner.engine.permission_handler import PermissionHandler

        return PermissionHandler(self)

    @cached_property
    def service_accounts(self) -> "ServiceAccountHandler":
        from lyve_provisioner.engine.service_account_handler import ServiceAccountHandler

        return ServiceAccountHandler(self)
