"""Project version lookup for the health endpoint."""

from __future__ import annotations

import re
from functools import lru_cache
from importlib import metadata
from pathlib import Path

DISTRIBUTION = "photoness"
PYPROJECT = Path(__file__).resolve().parents[3] / "pyproject.toml"

_PROJECT_VERSION = re.compile(
    r'^\[project\]\s*$.*?^version\s*=\s*"(?P<version>[^"]+)"', re.MULTILINE | re.DOTALL
)


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Return the installed distribution version, or the checkout's declared one."""

    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return _declared_version(PYPROJECT)


def _declared_version(pyproject: Path) -> str:
    if not pyproject.is_file():
        raise RuntimeError(f"No package metadata and no {pyproject}")

    match = _PROJECT_VERSION.search(pyproject.read_text(encoding="utf-8"))
    if match is None:
        raise RuntimeError(f"No [project] version declared in {pyproject}")
    return match.group("version")


__all__ = ["get_project_version"]
