"""Resource handlers and their registry."""

from lyve_provisioner.engine.errors import (
    CredentialError,
    EngineError,
    RemoteError,
    UnknownResourceTypeError,
    ValidationError,
)
from lyve_provisioner.engine.handlers import ResourceHandler
from lyve_provisioner.engine.permission_handler import PermissionHandler
from lyve_provisioner.engine.registry import ResourceTypeRegistration, ResourceTypeRegistry
from lyve_provisioner.engine.service_account_handler import ServiceAccountHandler

__all__ = [
    "CredentialError",
    "EngineError",
    "PermissionHandler",
    "RemoteError",
    "ResourceHandler",
    "ResourceTypeRegistration",
    "ResourceTypeRegistry",
    "ServiceAccountHandler",
    "UnknownResourceTypeError",
    "ValidationError",
]
