"""Scanner for Swift Package Manager Package.resolved files.

This module parses the JSON lock file written by SwiftPM and turns each
pin into a ResolvedDependency.
"""

import json
import logging
from pathlib import Path
from typing import Any

from package_kit.models import (
    Branch,
    ResolutionState,
    ResolvedDependency,
    Unresolved,
    Version,
)
from package_kit.scanners.base import BaseScanner

logger = logging.getLogger(__name__)


class PackageResolvedScanner(BaseScanner):
    """Scanner for SwiftPM Package.resolved files.

    Supports both manifest layouts::

        # version 2 and later
        {"pins": [{"identity": "swift-log", "kind": "remoteSourceControl",
                   "location": "https://github.com/apple/swift-log.git",
                   "state": {"revision": "...", "version": "1.5.3"}}],
         "version": 2}

        # version 1
        {"object": {"pins": [{"package": "swift-log",
                              "repositoryURL": "https://github.com/apple/swift-log.git",
                              "state": {"branch": null, "revision": "...",
                                        "version": "1.5.3"}}]},
         "version": 1}
    """

    @classmethod
    def can_handle(cls, path: Path) -> bool:
        """Check if this scanner can handle the given file.

        Args:
            path: Path to check.

        Returns:
            True if the file is named "Package.resolved" (case-sensitive).
        """
        return path.name == "Package.resolved"

    @property
    def source_name(self) -> str:
        """Return the human-readable name for this scanner's source type.

        Returns:
            "Package.resolved"
        """
        return "Package.resolved"

    def scan(self) -> list[ResolvedDependency]:
        """Scan Package.resolved and extract dependency records.

        Returns:
            List of ResolvedDependency objects in the order they appear.

        Raises:
            FileNotFoundError: If the manifest does not exist.
            ValueError: If source_path is not set, the file cannot be read,
                the JSON is invalid, or the manifest does not have the
                expected structure.
        """
        if self.source_path is None:
            raise ValueError("source_path must be set before calling scan()")

        if not self.source_path.exists():
            raise FileNotFoundError(f"Package.resolved not found: {self.source_path}")

        try:
            with open(self.source_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {self.source_path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ValueError(f"Could not read {self.source_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Unexpected top-level JSON value in {self.source_path}")

        if "pins" in data:
            pins = data["pins"]
            identity_key, location_key = "identity", "location"
        else:
            # Version 1 nests pins under "object" and uses different key names
            container = data.get("object", {})
            if not isinstance(container, dict):
                raise ValueError(
                    f"Field 'object' must be an object in {self.source_path}"
                )
            pins = container.get("pins", [])
            identity_key, location_key = "package", "repositoryURL"

        if not isinstance(pins, list):
            raise ValueError(f"Field 'pins' must be a list in {self.source_path}")

        dependencies = [
            self._parse_pin(pin, identity_key, location_key) for pin in pins
        ]
        logger.debug(
            "Read %d pins from %s (format version %s)",
            len(dependencies),
            self.source_path,
            data.get("version"),
        )
        return dependencies

    def _parse_pin(
        self, pin: Any, identity_key: str, location_key: str
    ) -> ResolvedDependency:
        """Convert one pin object into a ResolvedDependency.

        Args:
            pin: Pin object from the manifest.
            identity_key: Key holding the dependency name.
            location_key: Key holding the repository URL.

        Returns:
            The parsed ResolvedDependency.

        Raises:
            ValueError: If the pin is not an object, or a required field is
                missing or has the wrong type.
        """
        if not isinstance(pin, dict):
            raise ValueError(f"Pin must be an object in {self.source_path}")

        for key in (identity_key, location_key, "state"):
            if key not in pin:
                raise ValueError(
                    f"Pin missing required field '{key}' in {self.source_path}"
                )

        state = pin["state"]
        if not isinstance(state, dict):
            raise ValueError(f"Field 'state' must be an object in {self.source_path}")
        if "revision" not in state:
            raise ValueError(
                f"Pin missing required field 'revision' in {self.source_path}"
            )

        for key, value in (
            (identity_key, pin[identity_key]),
            (location_key, pin[location_key]),
            ("revision", state["revision"]),
        ):
            if not isinstance(value, str):
                raise ValueError(
                    f"Field '{key}' must be a string in {self.source_path}"
                )

        for key in ("branch", "version"):
            if not isinstance(state.get(key), (str, type(None))):
                raise ValueError(
                    f"Field '{key}' must be a string or null in {self.source_path}"
                )

        kind = pin.get("kind")
        return ResolvedDependency(
            identity=pin[identity_key],
            location=pin[location_key],
            state=self._parse_state(state),
            revision=state["revision"],
            kind=kind if isinstance(kind, str) else None,
        )

    @staticmethod
    def _parse_state(state: dict[str, Any]) -> ResolutionState:
        """Map a pin's state object to a resolution state.

        A branch wins over a version when both are present.
        """
        if state.get("branch") is not None:
            return Branch(state["branch"])
        if state.get("version") is not None:
            return Version(state["version"])
        return Unresolved()
