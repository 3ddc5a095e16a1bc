"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from heyps.config.app_registry import AppRegistry
from heyps.container import DependencyContainer
from heyps.entities.application import Application
from heyps.ports.application.application_discovery_port import (
    ApplicationDiscoveryPort,
)


@pytest.fixture
def scripts_directory():
    """
    Create a temporary scripts directory for testing script lookup and validation.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        with open(os.path.join(temp_dir, "hello.jsx"), "w") as f:
            f.write('alert("hello");')

        with open(os.path.join(temp_dir, "hello.psjs"), "w") as f:
            f.write('require("photoshop").core.showAlert("hello");')

        with open(os.path.join(temp_dir, "notes.txt"), "w") as f:
            f.write("not a script")

        subdir = os.path.join(temp_dir, "tools")
        os.makedirs(subdir)
        with open(os.path.join(subdir, "resize.jsx"), "w") as f:
            f.write("app.activeDocument.resizeImage(100, 100);")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def photoshop():
    return AppRegistry().lookup("ps")


def photoshop_install(label: str, root: str = "/Applications") -> Application:
    """Build a Photoshop instance from a label such as "2023", "2023-beta" or "beta"."""
    year, _, beta = label.partition("-")
    if year == "beta":
        name = "Adobe Photoshop (Beta)"
    elif beta:
        name = f"Adobe Photoshop {year} (Beta)"
    else:
        name = f"Adobe Photoshop {year}"
    return Application.from_bundle_path(
        f"{root}/{name}/{name}.app", bundle_id="com.adobe.Photoshop"
    )


@pytest.fixture
def fake_discovery():
    """
    Discovery port double; set `return_value` of `list_instances` per test.
    """
    discovery = MagicMock(spec=ApplicationDiscoveryPort)
    discovery.list_instances.return_value = []
    return discovery


@pytest.fixture
def make_install():
    return photoshop_install
