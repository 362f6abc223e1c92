"""Handler interface shared by all resource types."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from lyve_provisioner.engine.errors import CredentialError, ValidationError
from lyve_provisioner.resources.base import Resource

if TYPE_CHECKING:
    from lyve_provisioner.core import LyveProvider
    from lyve_provisioner.core.client import AccountAPIClient
    from lyve_provisioner.core.state import ResourceInstance

R = TypeVar("R", bound=Resource)


class ResourceHandler(Generic[R]):
    """Base class for resource handlers.

    Handlers are responsible for translating resources into account API
    calls. The provider (credentials + client) is injected at construction.
    Subclass and override the CRUD methods. Validation is optional.
    """

    def __init__(self, provider: LyveProvider) -> None:
        self.provider = provider

    def _client(self) -> AccountAPIClient:
        """Return the API client, failing fast if credentials are missing."""
        if not self.provider.has_credentials():
            raise CredentialError
        return self.provider.client

    def _check(self, desired: R) -> None:
        errors = self.validate(desired)
        if errors:
            raise ValidationError(errors)

    def validate(self, desired: R) -> list[str]:
        """Single-resource validation. Must not contact the API.

        Return list of error messages (empty = valid).
        """
        _ = desired
        return []

    def read(self, prior: ResourceInstance) -> dict[str, Any]:
        """Read the resource from the account API. Return stored attributes."""
        raise NotImplementedError

    def create(self, desired: R) -> dict[str, Any]:
        """Create the resource. Return stored attributes (including ``id``)."""
        raise NotImplementedError

    def update(self, desired: R, prior: ResourceInstance) -> dict[str, Any]:
        """Update the resource. Return stored attributes."""
        raise NotImplementedError

    def delete(self, prior: ResourceInstance) -> None:
        """Delete the resource."""
        raise NotImplementedError
