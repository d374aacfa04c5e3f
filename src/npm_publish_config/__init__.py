"""npm-publish-config core package.

Turns user-supplied publish options and package.json metadata into one
validated, defaulted configuration for an npm publish pipeline.
"""

from .normalize import REGISTRY_NPM, TAG_LATEST, normalize_options
from .options import (
    ACCESS_PUBLIC,
    ACCESS_RESTRICTED,
    STRATEGY_ALL,
    STRATEGY_UPGRADE,
    UNSET,
    Options,
)

__all__ = [
    "ACCESS_PUBLIC",
    "ACCESS_RESTRICTED",
    "REGISTRY_NPM",
    "STRATEGY_ALL",
    "STRATEGY_UPGRADE",
    "TAG_LATEST",
    "UNSET",
    "Options",
    "normalize_options",
]
