"""Pytest configuration for tests.

Sets up Python path and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path so imports work correctly
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from tests.fixtures.object_store_fixtures import InMemoryObjectStore  # noqa: E402


@pytest.fixture
def store() -> InMemoryObjectStore:
    """Fresh in-memory object store with an empty ``main`` branch."""
    return InMemoryObjectStore()
