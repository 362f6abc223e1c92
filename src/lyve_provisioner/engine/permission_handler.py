"""Permission handler implementing CRUD via the account API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from lyve_provisioner.core.client import PermissionRecord
from lyve_provisioner.engine.errors import RemoteError
from lyve_provisioner.engine.handlers import ResourceHandler
from lyve_provisioner.resources.naming import name_with_suffix
from lyve_provisioner.resources.permission import (
    ACTIONS,
    AllBuckets,
    BucketNames,
    BucketPrefix,
    resolve_scope,
)

if TYPE_CHECKING:
    from lyve_provisioner.core.client import AccountAPIClient
    from lyve_provisioner.core.state import ResourceInstance
    from lyve_provisioner.resources.permission import PermissionResource, PermissionScope

logger = logging.getLogger(__name__)


def _scope_payload(scope: PermissionScope) -> dict[str, Any]:
    match scope:
        case BucketPrefix(prefix=prefix):
            return {"type": scope.type, "prefix": prefix, "buckets": [prefix]}
        case BucketNames(buckets=buckets):
            return {"type": scope.type, "prefix": "", "buckets": list(buckets)}
        case AllBuckets():
            return {"type": scope.type, "prefix": "", "buckets": []}
    raise TypeError(f"Unsupported permission scope: {scope!r}")


class PermissionHandler(ResourceHandler["PermissionResource"]):
    """CRUD handler for Lyve Cloud bucket permissions."""

    def validate(self, desired: PermissionResource) -> list[str]:
        errors: list[str] = []
        if desired.actions not in ACTIONS:
            errors.append(
                f"{desired.address}: invalid actions '{desired.actions}', "
                f"expected one of {', '.join(ACTIONS)}"
            )
        if not desired.scope_fields_set():
            errors.append(
                f"{desired.address}: one of all_buckets, buckets_prefix or buckets must be set"
            )
        return errors

    def _payload(self, desired: PermissionResource, *, name: str | None = None) -> dict[str, Any]:
        """Build the full request body. Update re-sends everything."""
        scope = resolve_scope(desired)
        if scope is None:
            # validate() already rejects this
            raise TypeError("permission scope is unresolved")
        return {
            "name": name_with_suffix(desired.name or name, desired.name_prefix),
            "description": desired.description,
            "actions": desired.actions,
            **_scope_payload(scope),
        }

    def _fetch(self, client: AccountAPIClient, permission_id: str) -> dict[str, Any]:
        logger.debug("Reading permission %s", permission_id)
        try:
            record = PermissionRecord.model_validate(client.get_permission(permission_id))
        except Exception as exc:
            raise RemoteError("reading permission", str(exc)) from exc
        # A prefix scope is echoed back in ``buckets`` too; report it once.
        prefixed = record.type == "bucket-prefix"
        return {
            "id": record.id,
            "name": record.name,
            "description": record.description,
            "type": record.type,
            "actions": record.actions,
            "all_buckets": record.type == "all-buckets",
            "buckets_prefix": (record.prefix or None) if prefixed else None,
            "buckets": [] if prefixed else list(record.buckets),
            "ready_state": record.ready_state,
        }

    def create(self, desired: PermissionResource) -> dict[str, Any]:
        """Create a permission and read back its computed fields."""
        client = self._client()
        self._check(desired)
        payload = self._payload(desired)

        logger.debug("Creating permission %s (%s)", payload["name"], payload["type"])
        try:
            record = PermissionRecord.model_validate(client.create_permission(payload))
        except Exception as exc:
            raise RemoteError("creating permission", str(exc)) from exc
        logger.info("Created permission %s with id %s", payload["name"], record.id)

        attrs = self._fetch(client, record.id)
        attrs["name_prefix"] = desired.name_prefix
        return attrs

    def read(self, prior: ResourceInstance) -> dict[str, Any]:
        """Read a permission by id.

        A missing permission raises ``RemoteError``; deciding whether that
        means the permission was deleted is left to the caller.
        """
        client = self._client()
        attrs = self._fetch(client, prior.id)
        attrs["name_prefix"] = prior.attributes.get("name_prefix")
        return attrs

    def update(self, desired: PermissionResource, prior: ResourceInstance) -> dict[str, Any]:
        """Re-send the full permission definition and read it back."""
        client = self._client()
        self._check(desired)
        # A name generated from name_prefix is kept, not regenerated.
        payload = self._payload(desired, name=prior.attributes.get("name"))

        logger.debug("Updating permission %s (%s)", prior.id, payload["type"])
        try:
            client.update_permission(prior.id, payload)
        except Exception as exc:
            raise RemoteError("updating permission", str(exc)) from exc
        logger.info("Updated permission %s", prior.id)

        attrs = self._fetch(client, prior.id)
        attrs["name_prefix"] = desired.name_prefix
        return attrs

    def delete(self, prior: ResourceInstance) -> None:
        client = self._client()
        logger.debug("Deleting permission %s", prior.id)
        try:
            client.delete_permission(prior.id)
        except Exception as exc:
            raise RemoteError("deleting permission", str(exc)) from exc
        logger.info("Deleted permission %s", prior.id)
