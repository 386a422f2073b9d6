"""Unit tests for package layout."""

import importlib
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))


class TestPackages:
    """Tests that every package is a regular, installable package."""

    @pytest.mark.parametrize("name", [
        "models",
        "filters",
        "data",
        "data.generators",
        "api",
        "api.cli",
    ])
    def test_regular_package(self, name):
        """Test the package has an __init__ module."""
        package = importlib.import_module(name)
        assert package.__file__ is not None
        assert Path(package.__file__).name == "__init__.py"

    def test_console_script_target(self):
        """Test the console script entry point resolves to a callable."""
        module = importlib.import_module("api.cli.main")
        assert callable(module.main)
