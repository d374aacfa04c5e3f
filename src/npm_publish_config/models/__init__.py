"""Data models for publish configuration."""

from __future__ import annotations

from .manifest import PackageManifest, PublishConfig
from .normalized import ConfigValue, NormalizedOptions

__all__ = [
    "ConfigValue",
    "NormalizedOptions",
    "PackageManifest",
    "PublishConfig",
]
