"""
Smoke Tests for packaging metadata.

Reads setup.py without executing it.
"""

import ast
from pathlib import Path

import pytest

pytestmark = pytest.mark.smoke

PROJECT_ROOT = Path(__file__).parent.parent.parent


def _setup_keywords() -> dict:
    tree = ast.parse((PROJECT_ROOT / "setup.py").read_text(encoding="utf-8"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Call) and getattr(node.func, "id", None) == "setup":
            return {kw.arg: kw.value for kw in node.keywords}
    raise AssertionError("setup() call not found")


class TestSetupMetadata:
    def test_launcher_script_not_installed(self):
        """Only config ships as a top-level module; main.py is a repo-local launcher."""
        py_modules = ast.literal_eval(_setup_keywords()["py_modules"])
        assert py_modules == ["config"]

    def test_console_script(self):
        entry_points = ast.literal_eval(_setup_keywords()["entry_points"])
        assert entry_points["console_scripts"] == ["pathwise=pathwise.cli.main:main"]
