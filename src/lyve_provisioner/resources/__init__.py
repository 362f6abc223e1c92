"""Lyve Cloud resource definitions."""

from lyve_provisioner.resources.base import Resource
from lyve_provisioner.resources.naming import name_with_suffix
from lyve_provisioner.resources.permission import (
    ACTIONS,
    AllBuckets,
    BucketNames,
    BucketPrefix,
    PermissionResource,
    PermissionScope,
    resolve_scope,
)
from lyve_provisioner.resources.service_account import ServiceAccountResource

__all__ = [
    "ACTIONS",
    "AllBuckets",
    "BucketNames",
    "BucketPrefix",
    "PermissionResource",
    "PermissionScope",
    "Resource",
    "ServiceAccountResource",
    "name_with_suffix",
    "resolve_scope",
]
