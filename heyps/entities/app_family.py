"""
Application family domain entity.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AppFamily:
    """
    A scriptable application product line, independent of installed versions.

    Attributes:
        abbreviation: Short user-facing key (e.g. "ps")
        display_name: Product name without vendor or year (e.g. "Photoshop")
        bundle_prefix: macOS bundle identifier shared by installed versions
        script_extensions: Lower-case script file extensions the app can run
        script_verb: AppleScript command that runs a script file in the app
    """

    abbreviation: str
    display_name: str
    bundle_prefix: str
    script_extensions: tuple[str, ...] = (".jsx", ".js")
    script_verb: str = "do javascript of file"

    def supports(self, extension: str) -> bool:
        return extension.lower() in self.script_extensions

    def __str__(self) -> str:
        return f"{self.display_name} ({self.abbreviation})"
