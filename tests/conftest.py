"""Shared fixtures for npm-publish-config tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from npm_publish_config.models import PackageManifest, PublishConfig


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast, isolated tests")


@pytest.fixture
def unscoped_manifest() -> PackageManifest:
    return PackageManifest(name="left-pad", version="1.3.0")


@pytest.fixture
def scoped_manifest() -> PackageManifest:
    return PackageManifest(name="@acme/widgets", version="2.0.0", scope="@acme")


@pytest.fixture
def publish_config_manifest() -> PackageManifest:
    return PackageManifest(
        name="@acme/widgets",
        version="2.0.0",
        scope="@acme",
        publish_config=PublishConfig(
            tag="next",
            registry="https://npm.pkg.github.com/",
            access="restricted",
            provenance=True,
        ),
    )


@pytest.fixture
def write_package_json(tmp_path: Path):
    """Write a package.json under tmp_path and return its directory."""

    def _write(data: Any) -> Path:
        path = tmp_path / "package.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return tmp_path

    return _write
