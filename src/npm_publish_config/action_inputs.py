"""Load publish options from GitHub Action inputs.

The Actions runner exposes each ``with:`` input as an ``INPUT_<NAME>``
environment variable, upper-cased, with hyphens preserved. Empty inputs are
treated as unsupplied so the normalizer can fall back to its defaults.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from . import errors
from .options import UNSET, Options

_TRUE_VALUES = {"1", "true", "yes", "y"}
_FALSE_VALUES = {"0", "false", "no", "n"}

DEFAULT_PACKAGE = "package.json"


def get_input(environ: Mapping[str, str], name: str) -> Any:
    """Return the trimmed input value, or UNSET when missing or empty."""
    key = name.upper()
    for candidate in (f"INPUT_{key}", f"INPUT_{key.replace('-', '_')}"):
        value = environ.get(candidate, "").strip()
        if value:
            return value
    return UNSET


def get_boolean_input(environ: Mapping[str, str], name: str) -> Any:
    value = get_input(environ, name)
    if value is UNSET:
        return UNSET

    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise errors.InvalidActionInputError(name, value)


def load_action_options(environ: Mapping[str, str] | None = None) -> tuple[str, Options]:
    """Return ``(package_path, options)`` built from the Action's inputs."""
    if environ is None:
        environ = os.environ

    package = get_input(environ, "package")
    temporary_directory = environ.get("RUNNER_TEMP", "").strip() or UNSET

    options = Options(
        token=get_input(environ, "token"),
        registry=get_input(environ, "registry"),
        tag=get_input(environ, "tag"),
        access=get_input(environ, "access"),
        provenance=get_boolean_input(environ, "provenance"),
        ignore_scripts=get_boolean_input(environ, "ignore-scripts"),
        dry_run=get_boolean_input(environ, "dry-run"),
        strategy=get_input(environ, "strategy"),
        temporary_directory=temporary_directory,
    )
    return (DEFAULT_PACKAGE if package is UNSET else package), options
