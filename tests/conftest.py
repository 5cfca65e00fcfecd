import os
import tempfile
import uuid

import pytest

# Must happen before the app (and app.db.base / app.core.config) is imported.
_tmpdir = tempfile.mkdtemp(prefix="campus-carbon-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_tmpdir, "test.db")
os.environ["OPENAI_API_KEY"] = ""
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from fastapi.testclient import TestClient  # noqa: E402

from app.main import app  # noqa: E402


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


@pytest.fixture
def signup_and_login(client):
    """Create a fresh user and return (user_id, auth headers)."""
    def _make(department="Computer Science", campus="Main Campus", name="Test User"):
        email = f"{uuid.uuid4().hex[:12]}@campus.edu"
        password = "password123"
        resp = client.post(
            "/auth/signup",
            data={"name": name, "email": email, "password": password,
                  "department": department, "campus": campus},
        )
        assert resp.status_code == 200, resp.text
        user_id = resp.json()["user_id"]

        resp = client.post("/auth/login", data={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        # Cookie jar is shared across the session client; send the header explicitly
        client.cookies.clear()
        return user_id, {"Authorization": f"Bearer {resp.json()['access_token']}"}

    return _make
