import os
import sys

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient

# Ensure project root is on sys.path when pytest runs from a different CWD.
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

load_dotenv()
# Rate limiting would trip on the volume of requests the endpoint tests make
os.environ["RATE_LIMIT_ENABLED"] = "false"

from string_analyzer.db import db  # noqa: E402
from string_analyzer.main import app  # noqa: E402


@pytest.fixture(autouse=True)
def clear_db():
    """Clear the in-memory store before and after each test."""
    db.clear()
    yield
    db.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
