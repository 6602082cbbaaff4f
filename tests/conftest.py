"""
Pytest configuration and shared fixtures for all casematch tests.

The compiler driver is stateless between compilations, so one instance is
shared across the whole session.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))
from casematch.compiler.driver import CompilerDriver
from casematch.frontend.parser import Parser


# =============================================================================
# Session-scoped fixtures (shared across all tests)
# =============================================================================

@pytest.fixture(scope="session")
def session_compiler():
    """
    Session-scoped stateless compiler instance shared across ALL tests.

    - Fresh CompileContext and pass instances per compilation
    - Lark tables built once
    """
    return CompilerDriver()


@pytest.fixture(scope="session")
def session_parser():
    return Parser()


# =============================================================================
# Class-scoped fixtures (shared within a test class)
# =============================================================================

@pytest.fixture(scope="class")
def compiler(session_compiler):
    """Class-scoped compiler - shared across all tests in a class."""
    return session_compiler


@pytest.fixture(scope="class")
def parser(session_parser):
    return session_parser


# =============================================================================
# Environment
# =============================================================================

@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    """Plain diagnostics so assertions can compare text."""
    monkeypatch.setenv("NO_COLOR", "1")


def pytest_configure(config):
    """Register custom markers for test organization."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
