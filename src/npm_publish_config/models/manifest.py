"""Package manifest model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PublishConfig:
    """The ``publishConfig`` section of package.json; absent keys are None."""

    tag: Any = None
    registry: Any = None
    access: Any = None
    provenance: Any = None


@dataclass(frozen=True)
class PackageManifest:
    """Package metadata relevant to publishing."""

    name: str = ""
    version: str = ""
    scope: str | None = None
    publish_config: PublishConfig | None = None

    @staticmethod
    def scope_of(name: str) -> str | None:
        """Return ``@owner`` for ``@owner/pkg`` names, else None."""
        if name.startswith("@") and "/" in name:
            return name.split("/", 1)[0]
        return None
