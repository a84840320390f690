"""
Pytest fixtures for the account service tests.
"""

from datetime import timedelta
from typing import Callable, Dict, Generator, List, Tuple

import pytest
from fastapi.testclient import TestClient

from account_service.core.app_factory import create_application
from account_service.core.config import Settings
from account_service.infrastructure.persistence.sqlite import SQLitePersistence
from account_service.infrastructure.security.password import BcryptPasswordHasher
from account_service.infrastructure.security.tokens import JWTTokenService

ACCESS_SECRET = "test-access-secret-for-testing-only"
REFRESH_SECRET = "test-refresh-secret-for-testing-only"
API = "/api/v1"


class RecordingHasher:
    """Real bcrypt hasher (minimum cost) that records every call."""

    def __init__(self) -> None:
        self._inner = BcryptPasswordHasher(rounds=4)
        self.hash_calls: List[str] = []
        self.compare_calls: List[Tuple[str, str]] = []

    def hash(self, plaintext: str) -> str:
        self.hash_calls.append(plaintext)
        return self._inner.hash(plaintext)

    def compare(self, plaintext: str, digest: str) -> bool:
        self.compare_calls.append((plaintext, digest))
        return self._inner.compare(plaintext, digest)


@pytest.fixture
def persistence(tmp_path) -> Generator[SQLitePersistence, None, None]:
    store = SQLitePersistence(tmp_path / "accounts.sqlite3")
    yield store
    store.close()


@pytest.fixture
def hasher() -> RecordingHasher:
    return RecordingHasher()


@pytest.fixture
def token_service() -> JWTTokenService:
    return JWTTokenService(
        access_secret=ACCESS_SECRET,
        refresh_secret=REFRESH_SECRET,
        access_ttl=timedelta(minutes=15),
        refresh_ttl=timedelta(days=7),
    )


@pytest.fixture
def settings(tmp_path, monkeypatch) -> Settings:
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("API_PREFIX", API)
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path / "api.sqlite3"))
    monkeypatch.setenv("JWT_SECRET", ACCESS_SECRET)
    monkeypatch.setenv("JWT_REFRESH_SECRET", REFRESH_SECRET)
    monkeypatch.setenv("JWT_EXPIRES_IN", "15m")
    monkeypatch.setenv("JWT_REFRESH_EXPIRES_IN", "7d")
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
    return Settings()


@pytest.fixture
def client(settings) -> Generator[TestClient, None, None]:
    app = create_application(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client) -> Callable[..., Dict]:
    """Register an account through the API and return the response body."""

    def _register(name: str = "John Doe", email: str = "john@example.com", password: str = "password123") -> Dict:
        response = client.post(
            f"{API}/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


def _bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(register) -> Dict[str, str]:
    body = register()
    return _bearer(body["accessToken"])
