"""Read package.json into a PackageManifest."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from .. import errors
from ..models import PackageManifest, PublishConfig
from . import semver

MANIFEST_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["name", "version"],
    "properties": {
        "name": {"type": "string"},
        "version": {"type": "string"},
        "publishConfig": {
            "type": "object",
            "properties": {
                "tag": {"type": "string"},
                "registry": {"type": "string"},
                "access": {"type": "string"},
                "provenance": {"type": "boolean"},
            },
        },
    },
}

_VALIDATOR = Draft202012Validator(MANIFEST_SCHEMA)


def _format_errors(errors_: Iterable) -> str:
    messages = []
    for error in errors_:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"{pointer or '<root>'}: {error.message}")
    return "; ".join(messages)


def manifest_from_dict(data: Any) -> PackageManifest:
    """Validate parsed package.json data and build a PackageManifest."""
    if not isinstance(data, dict):
        raise errors.InvalidPackageError("package.json must contain a JSON object")

    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise errors.InvalidPackageNameError(name)

    version = data.get("version")
    if not semver.is_valid(version):
        raise errors.InvalidPackageVersionError(version)

    problems = sorted(_VALIDATOR.iter_errors(data), key=lambda e: list(e.path))
    if problems:
        raise errors.InvalidPackageError(f"Invalid package.json: {_format_errors(problems)}")

    publish_config = None
    raw_publish_config = data.get("publishConfig")
    if raw_publish_config is not None:
        publish_config = PublishConfig(
            tag=raw_publish_config.get("tag"),
            registry=raw_publish_config.get("registry"),
            access=raw_publish_config.get("access"),
            provenance=raw_publish_config.get("provenance"),
        )

    return PackageManifest(
        name=name,
        version=version,
        scope=PackageManifest.scope_of(name),
        publish_config=publish_config,
    )


def read_manifest(path: Path | str) -> PackageManifest:
    """Read a package.json file, or the package.json inside a directory."""
    path = Path(path)
    if path.is_dir():
        path = path / "package.json"

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise errors.PackageJsonReadError(path, str(exc)) from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise errors.PackageJsonReadError(path, f"invalid JSON ({exc.msg})") from exc

    return manifest_from_dict(data)
