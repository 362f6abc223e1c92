"""Shared fixtures for unit tests."""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING, Any

import pytest

from lyve_provisioner.config import load
from lyve_provisioner.core import LyveProvider

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from pathlib import Path

    from lyve_provisioner.config.schema import Config

_LYVE_ENV_VARS = ("LYVECLOUD_CLIENT_ID", "LYVECLOUD_CLIENT_SECRET", "LYVECLOUD_LOG")


@pytest.fixture(autouse=True)
def _clean_lyve_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove LYVECLOUD_* env vars so unit tests don't leak host config."""
    for var in _LYVE_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., Config]:
    """Factory fixture: write YAML + optional .env, return loaded Config."""

    def _make(yaml_str: str, *, dotenv: str | None = None) -> Config:
        (tmp_path / "config.yaml").write_text(yaml_str)
        if dotenv is not None:
            (tmp_path / ".env").write_text(dotenv)
        return load(tmp_path / "config.yaml")

    return _make


class FakeAccountAPI:
    """In-memory account API that records every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.permissions: dict[str, dict[str, Any]] = {}
        self.service_accounts: dict[str, dict[str, Any]] = {}
        self.next_ids: list[str] = []
        self._seq = itertools.count(1)

    def _new_id(self, kind: str) -> str:
        if self.next_ids:
            return self.next_ids.pop(0)
        return f"{kind}-{next(self._seq)}"

    def create_permission(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        self.calls.append(("create_permission", (dict(payload),)))
        permission_id = self._new_id("perm")
        self.permissions[permission_id] = {"id": permission_id, "readyState": True, **payload}
        return {"id": permission_id}

    def get_permission(self, permission_id: str) -> dict[str, Any]:
        self.calls.append(("get_permission", (permission_id,)))
        if permission_id not in self.permissions:
            raise LookupError(f"permission {permission_id} not found")
        return dict(self.permissions[permission_id])

    def update_permission(self, permission_id: str, payload: Mapping[str, Any]) -> None:
        self.calls.append(("update_permission", (permission_id, dict(payload))))
        if permission_id not in self.permissions:
            raise LookupError(f"permission {permission_id} not found")
        self.permissions[permission_id].update(payload)

    def delete_permission(self, permission_id: str) -> None:
        self.calls.append(("delete_permission", (permission_id,)))
        if self.permissions.pop(permission_id, None) is None:
            raise LookupError(f"permission {permission_id} not found")

    def create_service_account(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        self.calls.append(("create_service_account", (dict(payload),)))
        sa_id = self._new_id("sa")
        n = len(self.service_accounts) + 1
        self.service_accounts[sa_id] = {"id": sa_id, **payload}
        return {"id": sa_id, "accessKey": f"AK{n}", "secret": f"SK{n}"}

    def get_service_account(self, service_account_id: str) -> dict[str, Any]:
        self.calls.append(("get_service_account", (service_account_id,)))
        if service_account_id not in self.service_accounts:
            raise LookupError(f"service account {service_account_id} not found")
        return dict(self.service_accounts[service_account_id])

    def update_service_account(self, service_account_id: str, payload: Mapping[str, Any]) -> None:
        self.calls.append(("update_service_account", (service_account_id, dict(payload))))
        raise NotImplementedError("service accounts cannot be updated")

    def delete_service_account(self, service_account_id: str) -> None:
        self.calls.append(("delete_service_account", (service_account_id,)))
        if self.service_accounts.pop(service_account_id, None) is None:
            raise LookupError(f"service account {service_account_id} not found")


@pytest.fixture
def fake_api() -> FakeAccountAPI:
    return FakeAccountAPI()


@pytest.fixture
def fake_provider(fake_api: FakeAccountAPI) -> LyveProvider:
    return LyveProvider.from_client(fake_api, client_id="cid", client_secret="csecret")
