"""Semver validation for package.json versions, built atop the semver package.

A leading ``v`` or ``=`` is tolerated, as npm does when cleaning versions.
"""

from __future__ import annotations

from semver import Version


def _strip_prefix(version: str) -> str:
    version = version.strip()
    if version.startswith("="):
        version = version[1:]
    if version.startswith("v"):
        version = version[1:]
    return version


def is_valid(version: object) -> bool:
    if not isinstance(version, str):
        return False
    return Version.is_valid(_strip_prefix(version))
