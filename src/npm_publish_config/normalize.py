"""Normalize user options and manifest metadata into one publish configuration.

The manifest's ``publishConfig`` supplies defaults, which explicit options
override. ``force_command_line_options`` disables the manifest defaults
entirely so only explicit options and hard-coded fallbacks apply.

This module performs no I/O. The only ambient value it needs, the temporary
directory, comes from an injectable provider.
"""

from __future__ import annotations

import logging
import re
import tempfile
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar
from urllib.parse import ParseResult, SplitResult, quote, urlsplit, urlunsplit

from . import errors
from .models import ConfigValue, NormalizedOptions, PackageManifest
from .options import (
    ACCESS_PUBLIC,
    ACCESS_RESTRICTED,
    STRATEGY_ALL,
    STRATEGY_UPGRADE,
    UNSET,
    Access,
    Options,
    Strategy,
)

logger = logging.getLogger(__name__)

REGISTRY_NPM = "https://registry.npmjs.org/"
TAG_LATEST = "latest"

# Characters encodeURIComponent leaves alone, beyond letters, digits and "-_.~".
_URI_COMPONENT_SAFE = "!*'()"
# Whitespace and line terminators removed by ECMAScript String.prototype.trim.
_TRIM_CHARS = (
    "\t\n\v\f\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}
_SPECIAL_SCHEMES = set(_DEFAULT_PORTS)
_FORBIDDEN_HOST_RE = re.compile(r"[\x00-\x20\x7f#%/:<>?@\[\\\]^|]")

T = TypeVar("T")


@dataclass(frozen=True)
class ResolvedDefaults:
    """Fallback values used for options the caller left unset."""

    tag: str
    registry: str
    access: Access | None
    provenance: bool


def resolve_defaults(
    manifest: PackageManifest, force_command_line_options: Any = False
) -> ResolvedDefaults:
    """Compute defaults from the manifest's publishConfig and hard-coded fallbacks."""
    tag: str = TAG_LATEST
    registry: str = REGISTRY_NPM
    access: Access | None = ACCESS_PUBLIC if manifest.scope is None else None
    provenance: bool = False

    publish_config = manifest.publish_config
    if not force_command_line_options and publish_config is not None:
        if publish_config.tag is not None:
            tag = publish_config.tag
        if publish_config.registry is not None:
            registry = publish_config.registry
        if publish_config.access is not None:
            access = publish_config.access
        if publish_config.provenance is not None:
            provenance = publish_config.provenance

    return ResolvedDefaults(tag=tag, registry=registry, access=access, provenance=provenance)


# ---- Field validators ---------------------------------------------------------------------


def validate_token(value: Any) -> str:
    if isinstance(value, str) and len(value) > 0:
        return value

    raise errors.InvalidTokenError()


def validate_registry(value: Any) -> str:
    """Return the normalized form of an absolute registry URL.

    Accepts a string or an already-parsed ``urllib.parse`` result. The scheme
    and host are lower-cased, the scheme's default port is dropped and an
    empty path becomes ``/``.
    """
    raw = value.geturl() if isinstance(value, (SplitResult, ParseResult)) else value
    if not isinstance(raw, str):
        raise errors.InvalidRegistryUrlError(value)

    try:
        parts = urlsplit(raw.strip())
        parts.port  # noqa: B018 - raises ValueError on a malformed port
    except ValueError as exc:
        raise errors.InvalidRegistryUrlError(value) from exc

    scheme = parts.scheme.lower()
    if not scheme or not _SCHEME_RE.match(scheme):
        raise errors.InvalidRegistryUrlError(value)

    userinfo, at, hostport = parts.netloc.rpartition("@")
    host, colon, port_text = hostport.rpartition(":")
    if not colon or "]" in port_text:
        host = hostport
    host = host.lower()

    if scheme in _SPECIAL_SCHEMES:
        if not host:
            raise errors.InvalidRegistryUrlError(value)
        # Bracketed IPv6 literals are checked by urlsplit.
        if not host.startswith("[") and _FORBIDDEN_HOST_RE.search(host):
            raise errors.InvalidRegistryUrlError(value)

    port = parts.port
    if port is None or port == _DEFAULT_PORTS.get(scheme):
        netloc = f"{userinfo}{at}{host}"
    else:
        netloc = f"{userinfo}{at}{host}:{port}"
    path = parts.path
    if not path and scheme in _SPECIAL_SCHEMES:
        path = "/"

    return urlunsplit((scheme, netloc, path, parts.query, parts.fragment))


def validate_tag(value: Any) -> str:
    """Accept a tag whose trimmed form survives URI-component encoding.

    The original, untrimmed value is returned.
    """
    if isinstance(value, str):
        trimmed = value.strip(_TRIM_CHARS)
        try:
            encoded = quote(trimmed, safe=_URI_COMPONENT_SAFE)
        except UnicodeEncodeError:
            encoded = None

        if len(trimmed) > 0 and trimmed == encoded:
            return value

    raise errors.InvalidTagError(value)


def validate_access(value: Any) -> Access | None:
    if value is None or value == ACCESS_PUBLIC or value == ACCESS_RESTRICTED:
        return value

    raise errors.InvalidAccessError(value)


def validate_strategy(value: Any) -> Strategy:
    if value == STRATEGY_ALL or value == STRATEGY_UPGRADE:
        return value

    raise errors.InvalidStrategyError(value)


# ---- Assembly -----------------------------------------------------------------------------


def _pick(value: Any, default: Any) -> Any:
    return default if value is UNSET or value is None else value


def set_value(value: Any, default: Any, validate: Callable[[Any], T]) -> ConfigValue[T]:
    """Validate ``value`` (or ``default`` when absent) and record whether it was supplied."""
    return ConfigValue(value=validate(_pick(value, default)), is_default=value is UNSET)


def normalize_options(
    manifest: PackageManifest,
    options: Options,
    *,
    default_temporary_directory: Callable[[], str] = tempfile.gettempdir,
) -> NormalizedOptions:
    """Normalize and validate options, filling in any default values.

    Params:
        manifest: package metadata, typically from package.json
        options: user-supplied options
        default_temporary_directory: provider used when no temporary
            directory was supplied

    Returns: the validated auth and publish configuration

    Raises the first validation error found, checking token, registry, tag,
    access, provenance, ignore_scripts, dry_run and strategy in that order.
    """
    defaults = resolve_defaults(manifest, options.force_command_line_options)

    token = validate_token(_pick(options.token, None))
    registry = validate_registry(_pick(options.registry, defaults.registry))
    tag = set_value(options.tag, defaults.tag, validate_tag)
    access = set_value(options.access, defaults.access, validate_access)
    provenance = set_value(options.provenance, defaults.provenance, bool)
    ignore_scripts = set_value(options.ignore_scripts, True, bool)
    dry_run = set_value(options.dry_run, False, bool)
    strategy = set_value(options.strategy, STRATEGY_ALL, validate_strategy)

    temporary_directory = options.temporary_directory
    if temporary_directory is UNSET or temporary_directory is None:
        temporary_directory = default_temporary_directory()

    normalized = NormalizedOptions(
        registry=registry,
        token=token,
        tag=tag,
        access=access,
        provenance=provenance,
        ignore_scripts=ignore_scripts,
        dry_run=dry_run,
        strategy=strategy,
        logger=None if options.logger is UNSET else options.logger,
        temporary_directory=temporary_directory,
    )

    logger.debug("registry=%s", registry)
    for name, config_value in normalized.config_values().items():
        logger.debug(
            "%s=%r (%s)", name, config_value.value, "default" if config_value.is_default else "input"
        )

    return normalized
