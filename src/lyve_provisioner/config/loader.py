"""YAML configuration file loader."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import dotenv_values
from pydantic import ValidationError
from ruamel.yaml import YAML

from lyve_provisioner.config.schema import Config

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from lyve_provisioner.resources.base import Resource


class ConfigError(Exception):
    """Raised for configuration loading / validation errors."""


# Field name → environment variable.
_PROVIDER_ENV_MAP: dict[str, str] = {
    "client_id": "LYVECLOUD_CLIENT_ID",
    "client_secret": "LYVECLOUD_CLIENT_SECRET",
}


def _resolve_provider(raw_provider: dict[str, Any], config_dir: Path) -> dict[str, Any]:
    """Resolve provider fields from YAML, env vars, and ``.env`` file.

    Priority (highest wins): YAML value > env var > ``.env`` file.
    """
    env_file = config_dir / ".env"
    dotenv_vals = dotenv_values(env_file, encoding="utf-8-sig") if env_file.is_file() else {}

    resolved: dict[str, Any] = {}
    for field, env_key in _PROVIDER_ENV_MAP.items():
        val = raw_provider.get(field)
        if val is None:
            val = os.environ.get(env_key)
        if val is None:
            val = dotenv_vals.get(env_key)
        if val is not None:
            resolved[field] = val

    return resolved


def _validate_unique_names(resources: list[Resource]) -> list[str]:
    """Check that no two resources of the same type share an explicit name.

    Permissions named by ``name_prefix`` get a fresh suffix on every create,
    so they are never duplicates.
    """
    groups: dict[str, dict[str, str]] = {}  # resource_type → {name: first_address}
    errors: list[str] = []
    for r in resources:
        name = getattr(r, "name", None)
        if not name:
            continue
        seen = groups.setdefault(r.resource_type, {})
        if name in seen:
            errors.append(f"Duplicate {r.resource_type} name '{name}' in {r.address}")
        else:
            seen[name] = r.address
    return errors


def _validate_conflicts(config: Config) -> list[str]:
    """Reject mutually exclusive permission fields that are set together."""
    errors: list[str] = []
    for p in config.permissions:
        if p.name and p.name_prefix:
            errors.append(f"{p.address}: 'name' conflicts with 'name_prefix'")
        fields_set = p.scope_fields_set()
        if len(fields_set) > 1:
            errors.append(f"{p.address}: {', '.join(repr(f) for f in fields_set)} conflict")
    return errors


def load_config(path: Path | str) -> Config:
    """Load a YAML configuration file and return a ``Config`` object.

    Raises:
        ConfigError: On YAML parse errors, conflicting fields, or validation failures.
    """
    path = Path(path)

    try:
        raw = YAML(typ="safe").load(path)
    except Exception as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")

    try:
        raw["provider"] = _resolve_provider(raw.get("provider") or {}, path.parent)
        config = Config.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc

    errors = _validate_conflicts(config) + _validate_unique_names(config.resources)
    if errors:
        raise ConfigError("\n".join(errors))

    logger.info("Loaded config from %s (%d resources)", path, len(config.resources))
    return config
