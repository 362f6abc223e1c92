"""Tests for YAML configuration loader."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from lyve_provisioner.config.loader import (
    ConfigError,
    _resolve_provider,
    _validate_unique_names,
    load_config,
)
from lyve_provisioner.config.schema import Config
from lyve_provisioner.resources.permission import PermissionResource
from lyve_provisioner.resources.service_account import ServiceAccountResource

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

_FULL_YAML = """\
provider:
  client_id: my-client

permissions:
  - name: readers
    description: read logs
    actions: read-only
    buckets: [logs, backups]
  - name_prefix: writers-
    actions: write-only
    buckets_prefix: ingest-
  - name: admins
    actions: all-operations
    all_buckets: true

service_accounts:
  - name: etl
    description: nightly jobs
    permissions: [perm-1, perm-2]
"""


class TestLoadConfig:
    def test_full_config(self, make_config: Callable[..., Config]) -> None:
        config = make_config(_FULL_YAML)

        assert config.provider.client_id == "my-client"
        assert [p.label for p in config.permissions] == ["readers", "writers-[1]", "admins"]
        assert config.permissions[0].buckets == ["logs", "backups"]
        assert config.permissions[1].buckets_prefix == "ingest-"
        assert config.permissions[2].all_buckets is True
        assert config.service_accounts[0].permissions == ["perm-1", "perm-2"]
        assert len(config.resources) == 4

    def test_empty_sections(self, make_config: Callable[..., Config]) -> None:
        config = make_config("permissions:\nservice_accounts:\n")
        assert config.permissions == []
        assert config.service_accounts == []
        assert config.resources == []

    def test_empty_file(self, make_config: Callable[..., Config]) -> None:
        config = make_config("")
        assert config.resources == []
        assert config.provider.client_id is None

    def test_top_level_must_be_mapping(self, make_config: Callable[..., Config]) -> None:
        with pytest.raises(ConfigError, match="mapping"):
            make_config("- a\n- b\n")

    def test_invalid_yaml(self, make_config: Callable[..., Config]) -> None:
        with pytest.raises(ConfigError, match="Failed to read"):
            make_config("permissions: [unclosed\n")

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Failed to read"):
            load_config(tmp_path / "nope.yaml")

    def test_unknown_field(self, make_config: Callable[..., Config]) -> None:
        yaml_str = """\
permissions:
  - name: readers
    actions: read-only
    bucket_names: [logs]
"""
        with pytest.raises(ConfigError, match="bucket_names"):
            make_config(yaml_str)

    def test_service_account_without_permissions(
        self, make_config: Callable[..., Config]
    ) -> None:
        with pytest.raises(ConfigError, match="permissions"):
            make_config("service_accounts:\n  - name: etl\n")

    def test_name_conflicts_with_prefix(self, make_config: Callable[..., Config]) -> None:
        yaml_str = """\
permissions:
  - name: readers
    name_prefix: readers-
    actions: read-only
    all_buckets: true
"""
        with pytest.raises(ConfigError, match="'name' conflicts with 'name_prefix'"):
            make_config(yaml_str)

    def test_scope_fields_conflict(self, make_config: Callable[..., Config]) -> None:
        yaml_str = """\
permissions:
  - name: readers
    actions: read-only
    all_buckets: true
    buckets: [logs]
"""
        with pytest.raises(ConfigError, match="'all_buckets', 'buckets' conflict"):
            make_config(yaml_str)

    def test_duplicate_names(self, make_config: Callable[..., Config]) -> None:
        yaml_str = """\
permissions:
  - name: readers
    actions: read-only
    all_buckets: true
  - name: readers
    actions: write-only
    all_buckets: true
"""
        with pytest.raises(ConfigError, match="Duplicate lyvecloud_permission name 'readers'"):
            make_config(yaml_str)

    def test_same_name_across_types_is_allowed(
        self, make_config: Callable[..., Config]
    ) -> None:
        yaml_str = """\
permissions:
  - name: etl
    actions: read-only
    all_buckets: true
service_accounts:
  - name: etl
    permissions: [perm-1]
"""
        config = make_config(yaml_str)
        assert len(config.resources) == 2

    def test_shared_name_prefix_is_allowed(self, make_config: Callable[..., Config]) -> None:
        yaml_str = """\
permissions:
  - name_prefix: writers-
    actions: write-only
    buckets_prefix: ingest-
  - name_prefix: writers-
    actions: all-operations
    buckets: [staging]
"""
        config = make_config(yaml_str)

        assert [p.address for p in config.permissions] == [
            "lyvecloud_permission.writers-[0]",
            "lyvecloud_permission.writers-[1]",
        ]

    def test_name_matching_another_prefix_is_allowed(
        self, make_config: Callable[..., Config]
    ) -> None:
        yaml_str = """\
permissions:
  - name: writers
    actions: write-only
    all_buckets: true
  - name_prefix: writers
    actions: write-only
    all_buckets: true
"""
        config = make_config(yaml_str)

        assert len({p.address for p in config.permissions}) == 2


class TestResolveProvider:
    def test_yaml_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LYVECLOUD_CLIENT_ID", "from-env")
        (tmp_path / ".env").write_text("LYVECLOUD_CLIENT_ID=from-dotenv\n")

        resolved = _resolve_provider({"client_id": "from-yaml"}, tmp_path)
        assert resolved["client_id"] == "from-yaml"

    def test_env_beats_dotenv(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LYVECLOUD_CLIENT_SECRET", "from-env")
        (tmp_path / ".env").write_text("LYVECLOUD_CLIENT_SECRET=from-dotenv\n")

        resolved = _resolve_provider({}, tmp_path)
        assert resolved["client_secret"] == "from-env"

    def test_dotenv_fallback(self, make_config: Callable[..., Config]) -> None:
        config = make_config(
            "provider: {}\n",
            dotenv="LYVECLOUD_CLIENT_ID=cid\nLYVECLOUD_CLIENT_SECRET=secret\n",
        )
        assert config.provider.client_id == "cid"
        assert config.provider.client_secret == "secret"

    def test_unset_fields_omitted(self, tmp_path: Path) -> None:
        assert _resolve_provider({}, tmp_path) == {}


class TestValidateUniqueNames:
    def test_unnamed_permissions_are_skipped(self) -> None:
        resources = [
            PermissionResource(actions="read-only", all_buckets=True),
            PermissionResource(actions="read-only", all_buckets=True),
        ]
        assert _validate_unique_names(resources) == []

    def test_reports_each_duplicate(self) -> None:
        resources = [
            ServiceAccountResource(name="etl", permissions=["p"]),
            ServiceAccountResource(name="etl", permissions=["q"]),
            ServiceAccountResource(name="etl", permissions=["r"]),
        ]
        assert len(_validate_unique_names(resources)) == 2

    def test_prefix_named_permissions_are_skipped(self) -> None:
        resources = [
            PermissionResource(name_prefix="writers-", actions="write-only", all_buckets=True),
            PermissionResource(name_prefix="writers-", actions="read-only", all_buckets=True),
        ]
        assert _validate_unique_names(resources) == []
