"""
Pytest configuration and shared fixtures for the svadilfari test suite.

This module provides common fixtures for building directory trees, writing
configuration files and faking the external clean tool.
"""

import os
import shutil
import stat
import sys
import tempfile
import textwrap
from pathlib import Path
from typing import Any, Dict

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svadilfari.models import UtilsConfig  # noqa: E402


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """
    Pin the global configuration to built-in defaults.

    Keeps tests independent of conf/config.toml. Tests that exercise loading
    call clear_config_cache()/set_config_path() themselves; monkeypatch
    restores the module state afterwards.
    """
    monkeypatch.setattr("svadilfari.config.manager._CONFIG", UtilsConfig())
    monkeypatch.setattr("svadilfari.config.manager._CONFIG_PATH_EXPLICIT", False)
    monkeypatch.setattr(
        "svadilfari.config.manager._CONFIG_FILE_PATH",
        Path(tempfile.gettempdir()) / "svadilfari-tests-missing" / "config.toml",
    )
    yield


@pytest.fixture
def make_tree(temp_dir):
    """
    Build a directory tree from a nested dict.

    Keys are names; a dict value is a subdirectory, anything else is written
    as file content. Returns the root as a string.
    """

    def _make(layout: Dict[str, Any], root: Path = None) -> str:
        root = root or temp_dir
        for name, content in layout.items():
            target = root / name
            if isinstance(content, dict):
                target.mkdir()
                _make(content, target)
            else:
                target.write_text(str(content))
        return str(root)

    return _make


@pytest.fixture
def sample_tree(make_tree):
    """A small source tree with mixed extensions and nesting."""
    return make_tree(
        {
            "main.c": "int main(void) { return 0; }",
            "util.h": "",
            "README": "",
            "archive.tar.gz": "",
            "src": {
                "a.c": "",
                "b.cpp": "",
                "deep": {"c.c": "", "notes.txt": ""},
            },
            "empty": {},
        }
    )


# ============================================================================
# Clean Tool Fixtures
# ============================================================================


@pytest.fixture
def fake_clean_tool(temp_dir, monkeypatch):
    """
    Install an executable named ``ninja`` first on PATH.

    The script appends its arguments to ``calls.log`` and exits with the code
    in ``exit_code`` (0 when absent). Returns the bin directory.
    """
    bin_dir = temp_dir / "bin"
    bin_dir.mkdir()
    script = bin_dir / "ninja"
    script.write_text(
        textwrap.dedent(
            f"""\
            #!/bin/sh
            echo "$@" >> "{bin_dir / 'calls.log'}"
            if [ -f "{bin_dir / 'exit_code'}" ]; then
                exit "$(cat "{bin_dir / 'exit_code'}")"
            fi
            exit 0
            """
        )
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    return bin_dir
