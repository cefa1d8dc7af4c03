"""Package Kit - License file discovery for Swift package dependencies.

This package reads a SwiftPM Package.resolved manifest and finds a publicly
hosted license file for each pinned dependency.
"""

__version__ = "0.1.0"

from package_kit.catalog import PackageCatalog, display_name, get_packages
from package_kit.models import (
    Branch,
    Package,
    ResolutionState,
    ResolvedDependency,
    Unresolved,
    Version,
)

__all__ = [
    "__version__",
    "Branch",
    "Package",
    "PackageCatalog",
    "ResolutionState",
    "ResolvedDependency",
    "Unresolved",
    "Version",
    "display_name",
    "get_packages",
]
