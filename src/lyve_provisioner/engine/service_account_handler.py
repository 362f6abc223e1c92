"""Service account handler implementing CRUD via the account API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from lyve_provisioner.core.client import ServiceAccountRecord
from lyve_provisioner.engine.errors import RemoteError
from lyve_provisioner.engine.handlers import ResourceHandler

if TYPE_CHECKING:
    from lyve_provisioner.core.state import ResourceInstance
    from lyve_provisioner.resources.service_account import ServiceAccountResource

logger = logging.getLogger(__name__)


class ServiceAccountHandler(ResourceHandler["ServiceAccountResource"]):
    """CRUD handler for Lyve Cloud service accounts.

    The account API returns the access key pair only in the create response
    and cannot modify an existing service account. Read and update therefore
    work from the recorded attributes and never contact the API.
    """

    def validate(self, desired: ServiceAccountResource) -> list[str]:
        errors: list[str] = []
        if not desired.permissions:
            errors.append(f"{desired.address}: at least one permission is required")
        elif any(not p.strip() for p in desired.permissions):
            errors.append(f"{desired.address}: permission ids must not be blank")
        return errors

    def create(self, desired: ServiceAccountResource) -> dict[str, Any]:
        """Create a service account and capture its one-time credentials."""
        client = self._client()
        self._check(desired)
        payload = {
            "name": desired.name,
            "description": desired.description,
            "permissions": list(desired.permissions),
        }

        logger.debug(
            "Creating service account %s with %d permission(s)",
            desired.name,
            len(desired.permissions),
        )
        try:
            record = ServiceAccountRecord.model_validate(client.create_service_account(payload))
        except Exception as exc:
            raise RemoteError("creating service account", str(exc)) from exc
        logger.info("Created service account %s with id %s", desired.name, record.id)

        return {
            "id": record.id,
            "name": desired.name,
            "description": desired.description,
            "permissions": list(desired.permissions),
            "access_key": record.access_key,
            "access_secret": record.access_secret,
        }

    def read(self, prior: ResourceInstance) -> dict[str, Any]:
        """Re-affirm the recorded id. Remote state is not re-fetched."""
        attrs = dict(prior.attributes)
        attrs["id"] = prior.id
        return attrs

    def update(self, desired: ServiceAccountResource, prior: ResourceInstance) -> dict[str, Any]:
        """Record the desired configuration without contacting the API.

        Changes are not propagated; delete and recreate the service account
        to change its permissions.
        """
        logger.warning(
            "%s: service accounts cannot be modified; change recorded but not applied",
            desired.address,
        )
        attrs = dict(prior.attributes)
        attrs.update(
            name=desired.name,
            description=desired.description,
            permissions=list(desired.permissions),
            id=prior.id,
        )
        return attrs

    def delete(self, prior: ResourceInstance) -> None:
        client = self._client()
        logger.debug("Deleting service account %s", prior.id)
        try:
            client.delete_service_account(prior.id)
        except Exception as exc:
            raise RemoteError("deleting service account", str(exc)) from exc
        logger.info("Deleted service account %s", prior.id)
