"""CLI entrypoint that prints the normalized publish configuration.

Usage:
  npm-publish-config --package path/to/pkg --token "$NODE_AUTH_TOKEN" [--tag next]
  npm-publish-config --action   # read GitHub Action INPUT_* variables instead
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from .action_inputs import load_action_options
from .errors import NpmPublishError
from .normalize import normalize_options
from .options import UNSET, Options
from .parsers.package_json import read_manifest
from .summary import render_summary


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Normalize npm publish options.")
    parser.add_argument(
        "--package",
        default=".",
        help="Path to package.json or the directory containing it",
    )
    parser.add_argument(
        "--action",
        action="store_true",
        help="Read options from GitHub Action INPUT_* environment variables",
    )
    parser.add_argument("--token", default=UNSET, help="Registry auth token (default: $NODE_AUTH_TOKEN)")
    parser.add_argument("--registry", default=UNSET)
    parser.add_argument("--tag", default=UNSET)
    parser.add_argument("--access", default=UNSET)
    parser.add_argument("--strategy", default=UNSET)
    parser.add_argument("--provenance", action=argparse.BooleanOptionalAction, default=UNSET)
    parser.add_argument("--ignore-scripts", action=argparse.BooleanOptionalAction, default=UNSET)
    parser.add_argument("--dry-run", action=argparse.BooleanOptionalAction, default=UNSET)
    parser.add_argument("--temporary-directory", default=UNSET)
    parser.add_argument(
        "--force-command-line-options",
        action="store_true",
        help="Ignore publishConfig defaults from package.json",
    )
    parser.add_argument("--summary", action="store_true", help="Print a Markdown summary instead of JSON")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args(argv)


def _options_from_args(args: argparse.Namespace) -> Options:
    token = args.token
    if token is UNSET:
        token = os.getenv("NODE_AUTH_TOKEN") or UNSET

    return Options(
        token=token,
        registry=args.registry,
        tag=args.tag,
        access=args.access,
        provenance=args.provenance,
        ignore_scripts=args.ignore_scripts,
        dry_run=args.dry_run,
        strategy=args.strategy,
        temporary_directory=args.temporary_directory,
        force_command_line_options=args.force_command_line_options,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.action:
            package, options = load_action_options()
        else:
            package, options = args.package, _options_from_args(args)
        manifest = read_manifest(package)
        normalized = normalize_options(manifest, options)
    except NpmPublishError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.summary:
        print(render_summary(normalized), end="")
    else:
        print(json.dumps(normalized.to_dict(), indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
