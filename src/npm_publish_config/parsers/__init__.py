"""Parsers for package metadata."""

from .package_json import manifest_from_dict, read_manifest

__all__ = [
    "manifest_from_dict",
    "read_manifest",
]
