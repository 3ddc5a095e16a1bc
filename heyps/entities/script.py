"""
Script request entities.
"""

import os
from dataclasses import dataclass
from enum import Enum

from heyps.entities.app_family import AppFamily
from heyps.entities.application import ResolvedApp
from heyps.exceptions import UnsupportedScriptTypeError


class ScriptType(Enum):
    PSJS = ".psjs"
    JSX = ".jsx"
    JS = ".js"

    @classmethod
    def from_path(cls, file_path: str) -> "ScriptType":
        extension = os.path.splitext(file_path)[1].lower()
        for member in cls:
            if member.value == extension:
                return member
        raise UnsupportedScriptTypeError(
            f"Unsupported file type '{extension or file_path}'"
        )


@dataclass(frozen=True)
class ScriptRequest:
    """
    A validated request to run one script file in one resolved application.

    Attributes:
        file_path: Absolute path to the script
        resolved_app: The application instance that runs it
        family: Family of the resolved application
    """

    file_path: str
    resolved_app: ResolvedApp
    family: AppFamily

    @property
    def script_type(self) -> ScriptType:
        return ScriptType.from_path(self.file_path)


@dataclass(frozen=True)
class ScriptResult:
    output: str = ""
