import os
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

_DB_DIR = Path(tempfile.mkdtemp(prefix="finance-tracker-tests-"))
DB_PATH = _DB_DIR / "test.db"

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{DB_PATH}"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["MOCK_NOW"] = "2024-03-07T12:00:00"
os.environ["LOCALE"] = "es"


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from finance_tracker.main import app

    DB_PATH.unlink(missing_ok=True)
    with TestClient(app) as c:
        yield c
    DB_PATH.unlink(missing_ok=True)


@pytest.fixture
def make_headers():
    import jwt
    from finance_tracker.config import settings

    def _make(user_id: str = "user-1", email: str = "ana@example.com",
              expires_delta: timedelta = timedelta(minutes=60), **claims):
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "email": email,
            "aud": settings.JWT_AUDIENCE,
            "role": "authenticated",
            "iat": now,
            "exp": now + expires_delta,
            **claims,
        }
        token = jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
        return {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture
def headers(make_headers):
    return make_headers()


@pytest.fixture
def global_categories(client, headers):
    res = client.get("/api/v1/categories/global", headers=headers)
    assert res.status_code == 200
    body = res.json()
    return {c["name"]: c for c in body["income"] + body["expense"]}
