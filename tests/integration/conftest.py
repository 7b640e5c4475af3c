"""
Shared pytest fixtures for integration tests.
"""

import pytest
import sys
import os
from fastapi.testclient import TestClient

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from app import app


@pytest.fixture
def test_client():
    """Create a FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def known_results():
    """Expressions paired with their expected rendered results."""
    return {
        "": "",
        "3+5*2": "13",
        "(3+5)*2": "16",
        "2^3^2": "512",
        "10/0": "Error",
        "sin(30)": "0.5",
        "2#3": "Error",
        "foo(1)": "Error",
        "007": "7",
        "sqrt(-4)": "Error",
        "-2^2": "-4",
        "1/3": "0.33333333",
    }
