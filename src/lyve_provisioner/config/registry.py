"""Default resource type registry factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lyve_provisioner.engine.permission_handler import PermissionHandler
from lyve_provisioner.engine.registry import ResourceTypeRegistry
from lyve_provisioner.engine.service_account_handler import ServiceAccountHandler
from lyve_provisioner.resources.permission import PermissionResource
from lyve_provisioner.resources.service_account import ServiceAccountResource

if TYPE_CHECKING:
    from lyve_provisioner.core import LyveProvider


def default_registry(provider: LyveProvider) -> ResourceTypeRegistry:
    """Create a fresh registry with all built-in resource types and handlers."""
    registry = ResourceTypeRegistry()

    registry.register(PermissionResource, PermissionHandler(provider))
    registry.register(ServiceAccountResource, ServiceAccountHandler(provider))

    return registry
