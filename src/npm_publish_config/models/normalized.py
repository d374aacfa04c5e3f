"""Normalized, validated publish configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ..options import Access, Logger, Strategy

T = TypeVar("T")


@dataclass(frozen=True)
class ConfigValue(Generic[T]):
    """A config value, and whether the caller left it unsupplied."""

    value: T
    is_default: bool

    def to_dict(self) -> dict[str, object]:
        return {"value": self.value, "isDefault": self.is_default}


@dataclass(frozen=True)
class NormalizedOptions:
    """Auth, publish and runtime configuration handed to the publish pipeline."""

    registry: str
    token: str
    tag: ConfigValue[str]
    access: ConfigValue[Access | None]
    provenance: ConfigValue[bool]
    ignore_scripts: ConfigValue[bool]
    dry_run: ConfigValue[bool]
    strategy: ConfigValue[Strategy]
    logger: Logger | None
    temporary_directory: str

    def config_values(self) -> dict[str, ConfigValue[Any]]:
        """Return the default-tracked fields keyed by their camelCase name."""
        return {
            "tag": self.tag,
            "access": self.access,
            "provenance": self.provenance,
            "ignoreScripts": self.ignore_scripts,
            "dryRun": self.dry_run,
            "strategy": self.strategy,
        }

    def to_dict(self) -> dict[str, object]:
        # The token is a secret; the logger is not serializable.
        data: dict[str, object] = {
            "registry": self.registry,
            "token": "***",
        }
        for name, config_value in self.config_values().items():
            data[name] = config_value.to_dict()
        data["temporaryDirectory"] = self.temporary_directory
        return data
