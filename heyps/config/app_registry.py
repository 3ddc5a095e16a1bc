"""
Static registry of the application families heyps can drive.
"""

from types import MappingProxyType
from typing import Iterable, Mapping

from heyps.entities.app_family import AppFamily
from heyps.exceptions import UnknownAppError

DEFAULT_FAMILIES: tuple[AppFamily, ...] = (
    AppFamily(
        abbreviation="ps",
        display_name="Photoshop",
        bundle_prefix="com.adobe.Photoshop",
        script_extensions=(".psjs", ".jsx", ".js"),
    ),
    AppFamily(
        abbreviation="ai",
        display_name="Illustrator",
        bundle_prefix="com.adobe.illustrator",
    ),
    AppFamily(
        abbreviation="ae",
        display_name="After Effects",
        bundle_prefix="com.adobe.AfterEffects",
        script_verb="DoScriptFile",
    ),
)


class AppRegistry:
    """Read-only lookup from abbreviation to AppFamily."""

    def __init__(self, families: Iterable[AppFamily] = DEFAULT_FAMILIES) -> None:
        table: dict[str, AppFamily] = {}
        for family in families:
            key = family.abbreviation.lower()
            if key in table:
                raise ValueError(f"Duplicate application abbreviation: {key}")
            table[key] = family
        self._families: Mapping[str, AppFamily] = MappingProxyType(table)

    def lookup(self, abbreviation: str) -> AppFamily:
        """
        Find the family registered under an abbreviation (case-insensitive).

        Raises:
            UnknownAppError: If the abbreviation is not registered
        """
        key = (abbreviation or "").strip().lower()
        family = self._families.get(key)
        if family is None:
            raise UnknownAppError(
                f"Unsupported application '{abbreviation}'. "
                f"Choose one of: {', '.join(self.abbreviations())}"
            )
        return family

    def abbreviations(self) -> list[str]:
        return sorted(self._families)

    def families(self) -> list[AppFamily]:
        return [self._families[k] for k in self.abbreviations()]
