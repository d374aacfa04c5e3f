"""Raw, user-supplied publish options and their enumerated domains."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Final, Literal, Protocol, TypeAlias

from .errors import UnknownOptionError

ACCESS_PUBLIC: Final = "public"
ACCESS_RESTRICTED: Final = "restricted"
STRATEGY_ALL: Final = "all"
STRATEGY_UPGRADE: Final = "upgrade"

Access: TypeAlias = Literal["public", "restricted"]
Strategy: TypeAlias = Literal["all", "upgrade"]


class _Unset:
    """Marker for an option the caller did not supply at all."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset()


class Logger(Protocol):
    """Anything with debug/info/error methods; ``logging.Logger`` qualifies."""

    def debug(self, msg: str, *args: Any) -> None: ...

    def info(self, msg: str, *args: Any) -> None: ...

    def error(self, msg: str, *args: Any) -> None: ...


# JSON config files use the npm-publish camelCase spelling.
_CAMEL_CASE_KEYS = {
    "ignoreScripts": "ignore_scripts",
    "dryRun": "dry_run",
    "temporaryDirectory": "temporary_directory",
    "forceCommandLineOptions": "force_command_line_options",
}


@dataclass(frozen=True)
class Options:
    """Untyped publish options as supplied by the user.

    Fields left as ``UNSET`` fall back to a default and are reported as such.
    ``None`` is a supplied value: it still falls back to the default, but
    ``is_default`` is false for it.
    """

    token: Any = UNSET
    registry: Any = UNSET
    tag: Any = UNSET
    access: Any = UNSET
    provenance: Any = UNSET
    ignore_scripts: Any = UNSET
    dry_run: Any = UNSET
    strategy: Any = UNSET
    logger: Any = UNSET
    temporary_directory: Any = UNSET
    force_command_line_options: Any = UNSET

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Options:
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in known:
                raise UnknownOptionError(key)
            kwargs[name] = value
        return cls(**kwargs)
