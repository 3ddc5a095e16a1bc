"""
Tests for the SpotlightApplicationDiscovery adapter.
"""

from unittest.mock import MagicMock, patch

import pytest

from heyps.adapters.application.spotlight_application_discovery import (
    SpotlightApplicationDiscovery,
)
from heyps.exceptions import DiscoveryError

RUN = "heyps.adapters.application.spotlight_application_discovery.subprocess.run"

MDFIND_OUTPUT = """\
/Applications/Adobe Photoshop 2023/Adobe Photoshop 2023.app
/Applications/Adobe Photoshop 2022/Adobe Photoshop 2022.app
/Applications/Adobe Photoshop 2023/Adobe Photoshop 2023.app/Contents/MacOS/Droplet.app
/Applications/Adobe Photoshop (Beta)/Adobe Photoshop (Beta).app
/Applications/Adobe Photoshop 2023/Presets/Scripts
"""


def _completed(returncode=0, stdout="", stderr=""):
    return MagicMock(returncode=returncode, stdout=stdout, stderr=stderr)


class TestSpotlightApplicationDiscovery:
    """Test cases for the SpotlightApplicationDiscovery adapter."""

    def test_list_instances(self, mock_logger):
        with patch(RUN, return_value=_completed(stdout=MDFIND_OUTPUT)) as run:
            apps = SpotlightApplicationDiscovery(mock_logger).list_instances(
                "com.adobe.Photoshop"
            )

        run.assert_called_once_with(
            ["mdfind", 'kMDItemCFBundleIdentifier == "com.adobe.Photoshop"c'],
            capture_output=True,
            text=True,
        )
        assert [a.name for a in apps] == [
            "Adobe Photoshop (Beta)",
            "Adobe Photoshop 2022",
            "Adobe Photoshop 2023",
        ]
        assert [a.version_label for a in apps] == ["beta", "2022", "2023"]
        assert all(a.bundle_id is None for a in apps)
        mock_logger.info.assert_called_once_with(
            "Found 3 installed instances of com.adobe.Photoshop"
        )

    def test_query_matches_the_identifier_exactly(self):
        with patch(RUN, return_value=_completed(stdout="")) as run:
            SpotlightApplicationDiscovery().list_instances("com.adobe.illustrator")

        query = run.call_args.args[0][1]
        assert query == 'kMDItemCFBundleIdentifier == "com.adobe.illustrator"c'
        assert "*" not in query

    def test_order_does_not_depend_on_mdfind(self):
        lines = MDFIND_OUTPUT.splitlines()
        with patch(RUN, return_value=_completed(stdout="\n".join(lines))):
            forward = SpotlightApplicationDiscovery().list_instances("com.adobe.Photoshop")
        with patch(RUN, return_value=_completed(stdout="\n".join(reversed(lines)))):
            backward = SpotlightApplicationDiscovery().list_instances("com.adobe.Photoshop")

        assert forward == backward

    def test_duplicate_lines_collapse(self):
        line = "/Applications/Adobe Illustrator 2024/Adobe Illustrator 2024.app"
        with patch(RUN, return_value=_completed(stdout=f"{line}\n{line}/\n")):
            apps = SpotlightApplicationDiscovery().list_instances("com.adobe.illustrator")

        assert len(apps) == 1
        assert apps[0].year == 2024

    def test_nothing_installed(self):
        with patch(RUN, return_value=_completed(stdout="")):
            apps = SpotlightApplicationDiscovery().list_instances("com.adobe.AfterEffects")

        assert apps == []

    def test_mdfind_failure(self, mock_logger):
        with patch(RUN, return_value=_completed(returncode=1, stderr="Spotlight is disabled\n")):
            with pytest.raises(DiscoveryError, match="Spotlight is disabled"):
                SpotlightApplicationDiscovery(mock_logger).list_instances(
                    "com.adobe.Photoshop"
                )

        mock_logger.error.assert_called_once_with(
            "mdfind exited with 1: Spotlight is disabled"
        )

    def test_mdfind_missing(self):
        with patch(RUN, side_effect=FileNotFoundError("No such file: 'mdfind'")):
            with pytest.raises(DiscoveryError, match="mdfind"):
                SpotlightApplicationDiscovery().list_instances("com.adobe.Photoshop")
