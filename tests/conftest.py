"""
Pytest configuration for the Linesmith test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Isolated config, paths and CLI mode per test
- Sample JavaScript documents and editor hosts
"""

import os
import shutil
import tempfile
from pathlib import Path

import pytest

from linesmith.cli.config import CLIConfig
from linesmith.editor import InMemoryDocument, InMemoryEditorHost
from linesmith.logging_config import setup_logging
from linesmith.paths import reset_paths
from linesmith.schemas import DocumentSymbol, Selection, SymbolKind
from linesmith.user_config import reset_user_config


TEST_FILES_DIR = Path(__file__).parent / "test_files"


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Configure pytest for quiet, machine-mode operation."""
    os.environ.setdefault("LINESMITH_MACHINE_MODE", "1")


@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, force=True)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """
    Run every test from an empty project with its own home directory, so
    user config files and .linesmith/ never leak between tests.
    """
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("LINESMITH_HUMAN_MODE", raising=False)
    monkeypatch.chdir(project)

    reset_paths()
    reset_user_config()
    CLIConfig.reset()
    yield project
    reset_paths()
    reset_user_config()
    CLIConfig.reset()


# ============================================================================
# TEMPORARY DIRECTORY FIXTURES
# ============================================================================

@pytest.fixture
def temp_dir():
    """Create a temporary directory that's cleaned up after the test."""
    tmp = Path(tempfile.mkdtemp(prefix="linesmith_test_"))
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def service_file(temp_dir):
    """A copy of the sample service module in a temp directory."""
    target = temp_dir / "service.js"
    shutil.copy(TEST_FILES_DIR / "service.js", target)
    return target


# ============================================================================
# SYMBOL AND HOST FIXTURES
# ============================================================================

@pytest.fixture
def class_forest():
    """
    Class on lines 0-10 with a method on lines 2-5, plus a top-level
    function on lines 12-14.
    """
    return [
        DocumentSymbol(
            name="OrderService",
            kind=SymbolKind.Class,
            start_line=0,
            end_line=10,
            children=[
                DocumentSymbol(name="submit", kind=SymbolKind.Method, start_line=2, end_line=5),
            ],
        ),
        DocumentSymbol(name="helper", kind=SymbolKind.Function, start_line=12, end_line=14),
    ]


@pytest.fixture
def make_host():
    """
    Factory for in-memory hosts.

    Usage:
        host = make_host("const a = { b: 1 };", line=0)
    """
    def _make(text, line=0, char=0, end_line=None, end_char=None, symbols=None, uri="untitled:document.js"):
        selection = Selection(
            start_line=line,
            start_char=char,
            end_line=line if end_line is None else end_line,
            end_char=char if end_char is None else end_char,
        )
        return InMemoryEditorHost(InMemoryDocument(text, uri=uri), selection, symbols)

    return _make
