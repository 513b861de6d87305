import os

import pytest

# Disable the per-IP limiter before the app module reads settings.
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from fastapi.testclient import TestClient

from larder.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
