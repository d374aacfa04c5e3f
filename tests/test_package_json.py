from __future__ import annotations

from pathlib import Path

import pytest

from npm_publish_config import errors
from npm_publish_config.models import PublishConfig
from npm_publish_config.parsers import manifest_from_dict, read_manifest
from npm_publish_config.parsers.semver import is_valid

pytestmark = pytest.mark.unit


def test_read_manifest_from_directory(write_package_json) -> None:
    root = write_package_json(
        {
            "name": "@acme/widgets",
            "version": "1.2.3",
            "publishConfig": {"tag": "next", "access": "public", "provenance": True},
        }
    )

    manifest = read_manifest(root)

    assert manifest.name == "@acme/widgets"
    assert manifest.version == "1.2.3"
    assert manifest.scope == "@acme"
    assert manifest.publish_config == PublishConfig(tag="next", access="public", provenance=True)


def test_read_manifest_from_file_path(write_package_json) -> None:
    root = write_package_json({"name": "left-pad", "version": "1.3.0"})

    manifest = read_manifest(root / "package.json")

    assert manifest.scope is None
    assert manifest.publish_config is None


def test_missing_file_raises_read_error(tmp_path: Path) -> None:
    with pytest.raises(errors.PackageJsonReadError):
        read_manifest(tmp_path)


def test_invalid_json_raises_read_error(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(errors.PackageJsonReadError, match="invalid JSON"):
        read_manifest(tmp_path)


@pytest.mark.parametrize("name", [None, "", 42])
def test_invalid_name(name: object) -> None:
    with pytest.raises(errors.InvalidPackageNameError):
        manifest_from_dict({"name": name, "version": "1.0.0"})


@pytest.mark.parametrize("version", [None, "1.0", "latest", 1])
def test_invalid_version(version: object) -> None:
    with pytest.raises(errors.InvalidPackageVersionError):
        manifest_from_dict({"name": "pkg", "version": version})


def test_publish_config_must_be_an_object() -> None:
    with pytest.raises(errors.InvalidPackageError, match="publishConfig"):
        manifest_from_dict({"name": "pkg", "version": "1.0.0", "publishConfig": "nope"})


def test_non_object_document() -> None:
    with pytest.raises(errors.InvalidPackageError):
        manifest_from_dict(["name", "version"])


@pytest.mark.parametrize(
    "version", ["1.0.0", "0.0.1-alpha.1", "1.2.3+build.5", "v2.0.0", "=3.1.4-rc.1+sha.abc"]
)
def test_semver_accepts_valid_versions(version: str) -> None:
    assert is_valid(version)


@pytest.mark.parametrize("version", ["01.0.0", "1.0", "1.0.0-", "1.0.0+", "1.0.0-01", "", None])
def test_semver_rejects_invalid_versions(version: object) -> None:
    assert not is_valid(version)
