"""
Pytest configuration and shared fixtures for globimport tests.

Filesystem layouts are built under pytest's tmp_path; the driver and parser
are stateless between files and shared per session.
"""

import sys
import pytest
from pathlib import Path
from typing import Callable, Iterable

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from globimport.compiler.driver import TransformDriver
from globimport.frontend.parser import Parser


# =============================================================================
# Session-scoped fixtures (shared across all tests)
# =============================================================================

@pytest.fixture(scope="session")
def session_parser():
    """Parser built once; Lark grammar compilation is the expensive part."""
    return Parser(cache_file=None)


@pytest.fixture(scope="session")
def session_driver(session_parser):
    """Driver with default options; builds a fresh context per transform."""
    return TransformDriver(parser=session_parser)


# =============================================================================
# Filesystem helpers
# =============================================================================

@pytest.fixture
def make_tree(tmp_path) -> Callable[[Iterable[str]], Path]:
    """
    Create empty files (and their parent directories) under tmp_path.

        root = make_tree(["plugins/a.js", "plugins/b.js"])
    """
    def _make_tree(files: Iterable[str]) -> Path:
        for rel in files:
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("export default 1;\n", encoding="utf-8")
        return tmp_path

    return _make_tree


@pytest.fixture
def plugin_tree(make_tree) -> Path:
    """The layout most tests resolve against."""
    return make_tree([
        "plugins/a.js",
        "plugins/b.js",
        "plugins/c.ts",
        "plugins/.hidden.js",
        "plugins/sub/d.js",
        "plugins/sub/deep/e.js",
    ])


def pytest_configure(config):
    """Register custom markers for test organization."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
