"""Installed version of the simple-masonry distribution."""

from __future__ import annotations

from importlib import metadata as importlib_metadata

DISTRIBUTION_NAME = "simple-masonry"
UNKNOWN_VERSION = "0+unknown"


def resolve_project_version() -> str:
    """Return the installed version, or a placeholder when running from src."""
    try:
        return importlib_metadata.version(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        return UNKNOWN_VERSION
