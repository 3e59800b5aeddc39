"""Check that a site directory can be served with the current configuration."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from .site_config import (
    ConfigurationError,
    SiteConfiguration,
    load_site_configuration,
    site_root,
)


def validate_site_root(configuration: SiteConfiguration, root: Path) -> list[str]:
    """Return the deployment problems found under ``root``."""

    errors: list[str] = []

    if not root.is_dir():
        return [f"site root {root} is not a directory"]

    if not (root / "index.html").is_file():
        errors.append("index.html is missing from the site root")

    catalog_dir = root / configuration.catalog_directory
    for code in configuration.translated_languages:
        if not (catalog_dir / f"{code}.json").is_file():
            errors.append(
                f"catalogue for {code!r} missing: "
                f"{configuration.catalog_directory}/{code}.json"
            )

    return errors


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate the site configuration against a deployable site directory."
    )
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        help="Site directory to check (defaults to the served site root)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)

    try:
        configuration = load_site_configuration()
    except (ConfigurationError, FileNotFoundError) as error:
        print(f"failed to load configuration: {error}")
        return 1

    root = args.root or site_root()
    issues = validate_site_root(configuration, root)
    if issues:
        print(f"[{root}] {len(issues)} issue(s) detected:")
        for issue in issues:
            print(f"  - {issue}")
        return 1

    print(f"[{root}] OK")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
