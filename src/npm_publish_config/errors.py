"""Error taxonomy for publish configuration.

Every error raised by this package derives from :class:`NpmPublishError` so a
caller (the CLI, an Action wrapper) can catch a single type and render the
message. Input-validation errors also derive from :class:`TypeError`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class NpmPublishError(Exception):
    """Base error for all npm-publish-config failures."""


# ---- Option validation --------------------------------------------------------------------


class InvalidTokenError(NpmPublishError, TypeError):
    """Raised when the auth token is missing or empty."""

    def __init__(self) -> None:
        super().__init__("Token must be a non-empty string.")


class InvalidRegistryUrlError(NpmPublishError, TypeError):
    """Raised when the registry is not an absolute URL."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Registry URL invalid: {value!r}")
        self.value = value


class InvalidTagError(NpmPublishError, TypeError):
    """Raised when the dist-tag is empty or needs URL-encoding."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Tag must be a non-empty, URL-safe string; received {value!r}")
        self.value = value


class InvalidAccessError(NpmPublishError, TypeError):
    def __init__(self, value: Any) -> None:
        super().__init__(f"Access must be 'public' or 'restricted'; received {value!r}")
        self.value = value


class InvalidStrategyError(NpmPublishError, TypeError):
    def __init__(self, value: Any) -> None:
        super().__init__(f"Strategy must be 'all' or 'upgrade'; received {value!r}")
        self.value = value


class InvalidActionInputError(NpmPublishError, TypeError):
    """Raised when a GitHub Action input cannot be coerced."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"Input '{name}' must be a boolean; received {value!r}")
        self.name = name
        self.value = value


class UnknownOptionError(NpmPublishError, TypeError):
    """Raised when an options mapping contains a key no option is named after."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown option: {key!r}")
        self.key = key


# ---- Manifest reading ---------------------------------------------------------------------


class PackageJsonReadError(NpmPublishError):
    """Raised when package.json is missing or is not valid JSON."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not read package.json at {path}: {reason}")
        self.path = path


class InvalidPackageError(NpmPublishError, TypeError):
    """Raised when package.json does not match the expected shape."""


class InvalidPackageNameError(InvalidPackageError):
    def __init__(self, value: Any) -> None:
        super().__init__(f"Package name must be a non-empty string; received {value!r}")
        self.value = value


class InvalidPackageVersionError(InvalidPackageError):
    def __init__(self, value: Any) -> None:
        super().__init__(f"Package version must be a valid semver string; received {value!r}")
        self.value = value
