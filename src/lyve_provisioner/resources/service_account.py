"""Service account resource model."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from lyve_provisioner.resources.base import Resource


class ServiceAccountResource(Resource):
    """A Lyve Cloud service account.

    ``permissions`` lists permission ids in the order they are submitted.
    The account API offers no way to change an existing service account, so
    changing any field means delete and recreate.
    """

    resource_type: ClassVar[str] = "lyvecloud_service_account"

    name: str = Field(min_length=1)
    permissions: list[str] = Field(min_length=1)

    @property
    def label(self) -> str:
        return self.name
