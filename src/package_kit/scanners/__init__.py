"""Manifest scanners.

This module provides scanners for extracting dependency pins from lock
files.
"""

from pathlib import Path

from package_kit.scanners.base import BaseScanner
from package_kit.scanners.resolved import PackageResolvedScanner

__all__ = [
    "BaseScanner",
    "PackageResolvedScanner",
    "get_scanner",
]


def get_scanner(path: Path) -> BaseScanner:
    """Get the scanner for a manifest path.

    Args:
        path: Path to the manifest file.

    Returns:
        Scanner instance configured for the given file.

    Raises:
        ValueError: If the file is not a Package.resolved manifest.
    """
    if not PackageResolvedScanner.can_handle(path):
        raise ValueError(
            f"No scanner available for '{path.name}'. "
            f"Supported files: Package.resolved"
        )
    return PackageResolvedScanner(path)
