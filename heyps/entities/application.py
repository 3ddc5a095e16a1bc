"""
Application domain entities: installed instances and the resolved target.
"""

import os
import re
from dataclasses import dataclass
from typing import Optional

_YEAR_RE = re.compile(r"\b(20\d{2})\b")
_BETA_RE = re.compile(r"\bbeta\b", re.IGNORECASE)


class Application:
    """
    An installed application instance as reported by discovery.
    """

    def __init__(
        self,
        path: str,
        name: Optional[str] = None,
        bundle_id: Optional[str] = None,
        year: Optional[int] = None,
        beta: bool = False,
    ):
        """
        Initialize the Application entity.

        Args:
            path: Path to the .app bundle
            name: Name of the application (defaults to the bundle name without ".app")
            bundle_id: macOS bundle identifier (e.g., com.adobe.Photoshop)
            year: Release year of the product, when known
            beta: Whether this instance is a pre-release build
        """
        if not path:
            raise ValueError("'path' is required")

        self.path = os.path.abspath(os.path.expanduser(path))
        self.name = name or os.path.splitext(os.path.basename(self.path))[0]
        self.bundle_id = bundle_id or None
        self.year = year
        self.beta = beta

    @classmethod
    def from_bundle_path(
        cls, path: str, bundle_id: Optional[str] = None
    ) -> "Application":
        """
        Build an instance from a bundle path such as
        "/Applications/Adobe Photoshop 2023/Adobe Photoshop 2023.app".

        The year and beta flag are read from the bundle name.
        """
        name = os.path.splitext(os.path.basename(path.rstrip("/")))[0]
        match = _YEAR_RE.search(name)
        year = int(match.group(1)) if match else None
        return cls(
            path=path,
            name=name,
            bundle_id=bundle_id,
            year=year,
            beta=bool(_BETA_RE.search(name)),
        )

    @property
    def version_label(self) -> str:
        if self.beta:
            return f"{self.year}-beta" if self.year else "beta"
        return str(self.year) if self.year else "unknown"

    def selection_key(self) -> tuple[bool, int]:
        """Ordering used to pick the latest instance: releases first, then year."""
        return (not self.beta, self.year or 0)

    def get_details(self) -> dict[str, Optional[str]]:
        return {
            "path": self.path,
            "name": self.name,
            "bundle_id": self.bundle_id,
            "version": self.version_label,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Application):
            return NotImplemented
        return self.get_details() == other.get_details()

    def __hash__(self) -> int:
        return hash(self.path)

    def __str__(self) -> str:
        """String representation of the Application."""
        parts = [f"name='{self.name}'"]
        if self.bundle_id:
            parts.append(f"bundle_id='{self.bundle_id}'")
        parts.append(f"path='{self.path}'")
        parts.append(f"version='{self.version_label}'")
        return f"Application({', '.join(parts)})"

    __repr__ = __str__


@dataclass(frozen=True)
class ResolvedApp:
    """The single installed instance chosen for one invocation."""

    bundle_identifier_or_path: str
    name: str
    version_label: str

    @classmethod
    def from_application(cls, app: Application) -> "ResolvedApp":
        return cls(
            bundle_identifier_or_path=app.path,
            name=app.name,
            version_label=app.version_label,
        )
