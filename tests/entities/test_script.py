"""
Tests for the script entities.
"""

import pytest

from heyps.config.app_registry import AppRegistry
from heyps.entities.application import ResolvedApp
from heyps.entities.script import ScriptRequest, ScriptType
from heyps.exceptions import UnsupportedScriptTypeError


class TestScriptType:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/tmp/a.psjs", ScriptType.PSJS),
            ("/tmp/a.jsx", ScriptType.JSX),
            ("/tmp/a.JSX", ScriptType.JSX),
            ("/tmp/a.js", ScriptType.JS),
        ],
    )
    def test_from_path(self, path, expected):
        assert ScriptType.from_path(path) is expected

    def test_from_path_unsupported(self):
        with pytest.raises(UnsupportedScriptTypeError, match=r"\.txt"):
            ScriptType.from_path("/tmp/notes.txt")

    def test_from_path_without_extension(self):
        with pytest.raises(UnsupportedScriptTypeError, match="/tmp/script"):
            ScriptType.from_path("/tmp/script")


def test_script_request_type():
    request = ScriptRequest(
        file_path="/tmp/hello.psjs",
        resolved_app=ResolvedApp("/Applications/Adobe Photoshop 2023.app", "Adobe Photoshop 2023", "2023"),
        family=AppRegistry().lookup("ps"),
    )

    assert request.script_type is ScriptType.PSJS
