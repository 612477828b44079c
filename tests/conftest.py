"""
Shared test fixtures and configuration for pytest.
"""

import sys
import logging
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from callback_list import CallbackList


@pytest.fixture
def log():
    """Shared side-effect log for handlers."""
    return []


@pytest.fixture
def callbacks():
    """An empty callback list."""
    return CallbackList()


@pytest.fixture
def echo():
    """Factory for handlers that print a fixed string and return nothing."""
    def make(to_echo: str):
        def handler():
            print(to_echo)
        return handler
    return make


@pytest.fixture
def ab_list(echo):
    """List with handler 'a' named 'a' and handler 'b' named 'b'."""
    a = echo("a")
    b = echo("b")
    cl = CallbackList()
    cl.add(a, "a")
    cl.add(b, "b")
    return cl, a, b


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
