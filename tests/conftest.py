import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app


@pytest.fixture
def app():
    """Flask app with the testing configuration."""
    return create_app('testing')


@pytest.fixture
def client(app):
    """Flask test client."""
    with app.test_client() as c:
        yield c
