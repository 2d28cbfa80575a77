"""Tests for package layout and project configuration.

Coverage targets:
  - spvbin/py.typed marker exists
  - Every module of the package is valid Python
  - pyproject.toml structure (name, version, console script, numpy)
  - pytest.ini configuration
"""

import ast
import re

import pytest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
PKG = ROOT / "spvbin"


class TestPackageLayout:

    def test_py_typed_marker(self):
        assert (PKG / "py.typed").exists(), "py.typed marker missing (PEP 561)"

    @pytest.mark.parametrize("name", [
        "__init__.py", "__main__.py", "cli.py", "collect.py", "decode.py",
        "emit.py", "errors.py", "generate.py", "naming.py",
    ])
    def test_module_parseable(self, name):
        content = (PKG / name).read_text(encoding="utf-8")
        ast.parse(content)


class TestProjectConfiguration:

    def _pyproject(self):
        return (ROOT / "pyproject.toml").read_text(encoding="utf-8")

    def test_pyproject_has_version(self):
        m = re.search(r'version\s*=\s*"([^"]+)"', self._pyproject())
        assert m is not None

    def test_version_matches_package(self):
        import spvbin
        m = re.search(r'version\s*=\s*"([^"]+)"', self._pyproject())
        assert m.group(1) == spvbin.__version__

    def test_pyproject_has_project_name(self):
        assert 'name = "spvbin"' in self._pyproject()

    def test_console_script(self):
        assert 'spvbin = "spvbin.cli:main"' in self._pyproject()

    def test_numpy_dependency(self):
        assert "numpy" in self._pyproject()

    def test_pytest_ini_testpaths(self):
        content = (ROOT / "pytest.ini").read_text(encoding="utf-8")
        assert "testpaths = tests" in content
