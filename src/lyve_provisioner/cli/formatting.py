"""Resource output rendering (Terraform-style)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import typer

from lyve_provisioner.resources.permission import PermissionResource, resolve_scope
from lyve_provisioner.resources.service_account import ServiceAccountResource

if TYPE_CHECKING:
    from collections.abc import Callable

    from lyve_provisioner.resources.base import Resource


def styler(color: bool) -> Callable[..., str]:
    """Return ``typer.style`` when *color* is True, otherwise a passthrough."""
    if color:
        return typer.style
    return lambda text, **_kw: text


def _align_values(items: dict[str, str]) -> list[tuple[str, str]]:
    """Right-pad keys so ``=`` signs align."""
    if not items:
        return []
    max_key = max(len(k) for k in items)
    return [(k.ljust(max_key), v) for k, v in items.items()]


def _format_value(value: Any) -> str:
    """Format a value for display in a resource block."""
    if isinstance(value, str):
        return f'"{value}"'
    if value is None:
        return "null"
    if isinstance(value, list | tuple):
        return "[" + ", ".join(_format_value(v) for v in value) + "]"
    return str(value)


def _permission_attrs(resource: PermissionResource) -> dict[str, Any]:
    attrs: dict[str, Any] = {}
    if resource.name:
        attrs["name"] = resource.name
    else:
        attrs["name_prefix"] = resource.name_prefix
    attrs["description"] = resource.description
    attrs["actions"] = resource.actions
    scope = resolve_scope(resource)
    attrs["type"] = scope.type if scope is not None else None
    if scope is not None and scope.type == "bucket-prefix":
        attrs["buckets_prefix"] = resource.buckets_prefix
    elif scope is not None and scope.type == "bucket-names":
        attrs["buckets"] = list(resource.buckets)
    return attrs


def _service_account_attrs(resource: ServiceAccountResource) -> dict[str, Any]:
    return {
        "name": resource.name,
        "description": resource.description,
        "permissions": list(resource.permissions),
    }


def resource_attrs(resource: Resource) -> dict[str, Any]:
    """Displayable attributes of a declared resource. Makes no API calls."""
    if isinstance(resource, PermissionResource):
        return _permission_attrs(resource)
    if isinstance(resource, ServiceAccountResource):
        return _service_account_attrs(resource)
    return resource.model_dump()


def format_resource(resource: Resource, *, color: bool = True) -> str:
    """Render a declared resource as a Terraform-style block."""
    style = styler(color)
    attrs = {k: _format_value(v) for k, v in resource_attrs(resource).items()}
    lines = [
        style(f"  # {resource.address}", bold=True),
        f'  resource "{resource.resource_type}" "{resource.label}" {{',
        *[f"      {k} = {v}" for k, v in _align_values(attrs)],
        "    }",
    ]
    return "\n".join(lines)


def format_resources(resources: list[Resource], *, color: bool = True) -> str:
    """Render every declared resource, separated by blank lines."""
    if not resources:
        return "No resources declared."
    return "\n\n".join(format_resource(r, color=color) for r in resources)
