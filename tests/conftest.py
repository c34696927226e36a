import os
import sys

# Ensure the repository root is on sys.path so `motopass_seo` and `backend` import without installation
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

import pytest
from fastapi.testclient import TestClient

from motopass_seo.main import app as api_app
from backend.app import app as facade_app


@pytest.fixture
def client():
    """Provides a TestClient for the main HTTP server."""
    return TestClient(api_app)


@pytest.fixture
def facade_client():
    """Provides a Flask test client for the single-tool facade."""
    facade_app.config["TESTING"] = True
    return facade_app.test_client()
