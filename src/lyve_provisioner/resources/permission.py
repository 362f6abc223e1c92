"""Permission resource model and bucket scope variants."""

from __future__ import annotations

import logging
from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field, PrivateAttr

from lyve_provisioner.resources.base import Resource

logger = logging.getLogger(__name__)

ACTIONS: tuple[str, ...] = ("all-operations", "read-only", "write-only")


class AllBuckets(BaseModel):
    """Permission applies to every bucket in the account."""

    model_config = ConfigDict(frozen=True)

    type: Literal["all-buckets"] = "all-buckets"


class BucketPrefix(BaseModel):
    """Permission applies to buckets whose name starts with ``prefix``."""

    model_config = ConfigDict(frozen=True)

    type: Literal["bucket-prefix"] = "bucket-prefix"
    prefix: str = Field(min_length=1)


class BucketNames(BaseModel):
    """Permission applies to an explicit list of buckets."""

    model_config = ConfigDict(frozen=True)

    type: Literal["bucket-names"] = "bucket-names"
    buckets: tuple[str, ...] = Field(min_length=1)


PermissionScope = Annotated[AllBuckets | BucketPrefix | BucketNames, Discriminator("type")]


class PermissionResource(Resource):
    """A Lyve Cloud bucket permission.

    Exactly one of ``all_buckets``, ``buckets_prefix`` and ``buckets`` selects
    the scope. Exactly one of ``name`` and ``name_prefix`` selects the name;
    with ``name_prefix`` a unique suffix is generated at create time.
    """

    resource_type: ClassVar[str] = "lyvecloud_permission"

    name: str | None = Field(default=None, min_length=1)
    name_prefix: str | None = Field(default=None, min_length=1)
    actions: str
    all_buckets: bool = False
    buckets_prefix: str | None = None
    buckets: list[str] = Field(default_factory=list)

    _position: int | None = PrivateAttr(default=None)

    @property
    def label(self) -> str:
        """``name``, or ``name_prefix`` plus its position in the config file.

        Generated names are unique per create, so two entries may share a
        prefix; the position keeps their addresses apart.
        """
        if self.name:
            return self.name
        if self.name_prefix and self._position is not None:
            return f"{self.name_prefix}[{self._position}]"
        return self.name_prefix or ""

    def scope_fields_set(self) -> list[str]:
        """Names of the scope fields that carry a value."""
        fields = {
            "all_buckets": self.all_buckets,
            "buckets_prefix": self.buckets_prefix,
            "buckets": self.buckets,
        }
        return [k for k, v in fields.items() if v]

    def scope(self) -> PermissionScope | None:
        """Resolve the scope variant (see ``resolve_scope``)."""
        return resolve_scope(self)


def resolve_scope(resource: PermissionResource) -> PermissionScope | None:
    """Pick the scope variant of a permission in fixed priority order.

    ``all_buckets`` beats ``buckets_prefix`` which beats ``buckets``. Returns
    None when no scope field is set.
    """
    fields_set = resource.scope_fields_set()
    if len(fields_set) > 1:
        logger.warning(
            "%s sets conflicting scope fields %s; using %s",
            resource.address,
            ", ".join(fields_set),
            fields_set[0],
        )

    if resource.all_buckets:
        return AllBuckets()
    if resource.buckets_prefix:
        return BucketPrefix(prefix=resource.buckets_prefix)
    if resource.buckets:
        return BucketNames(buckets=tuple(resource.buckets))
    return None
