"""Tracked resource instances handed to handlers by the host."""

from typing import Any

from pydantic import BaseModel, Field


class ResourceInstance(BaseModel):
    """A resource instance as last recorded by the host.

    Attributes:
        address: Unique resource address (e.g., "lyvecloud_permission.readers")
        resource_type: Type of the resource (e.g., "lyvecloud_permission")
        name: Resource name as configured
        id: Remote identifier assigned at creation
        attributes: Attribute values returned by the last create/read/update
    """

    address: str
    resource_type: str
    name: str
    id: str
    attributes: dict[str, Any] = Field(default_factory=dict)
