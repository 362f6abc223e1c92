"""Core infrastructure components for Lyve Provisioner."""

from lyve_provisioner.core.client import AccountAPIClient, PermissionRecord, ServiceAccountRecord
from lyve_provisioner.core.provider import LyveProvider
from lyve_provisioner.core.state import ResourceInstance

__all__ = [
    "AccountAPIClient",
    "LyveProvider",
    "PermissionRecord",
    "ResourceInstance",
    "ServiceAccountRecord",
]
