"""Base resource class for Lyve Cloud resources."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class Resource(BaseModel):
    """Base class for all Lyve Cloud resources.

    Resources are pure data - they define the desired state.
    Handlers know how to CRUD resources.
    """

    model_config = ConfigDict(extra="forbid")

    resource_type: ClassVar[str]

    description: str = ""

    @property
    def label(self) -> str:
        """Name used in addresses and uniqueness checks."""
        raise NotImplementedError

    @property
    def address(self) -> str:
        """Unique address for this resource (e.g., 'lyvecloud_permission.readers')."""
        return f"{self.resource_type}.{self.label}"
