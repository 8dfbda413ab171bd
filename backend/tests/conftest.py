"""
Pytest configuration and shared fixtures for backend tests.
"""
import json
import pytest
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock
from httpx import ASGITransport, AsyncClient

from src.config import Settings
from src.store.service import get_store_service
from src.users.schemas import UserSession
from main import app


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings with overridden values."""
    return Settings(
        ENV="test",
        PORT=8000,
        STORE_API_URL="http://store.test",
        STORE_API_TOKEN="test-jwt",
        STORE_TIMEOUT=5,
        WEB_APP_URL="http://localhost:8080",
    )


@pytest.fixture
def user_session() -> UserSession:
    return UserSession(type="Employee", email="test@test.com")


@pytest.fixture
def user_header(user_session: UserSession) -> dict[str, str]:
    """X-User header as forwarded by the front-end from its local storage."""
    return {"X-User": json.dumps({"type": user_session.type, "email": user_session.email})}


@pytest.fixture
def bills_fixture() -> list[dict]:
    """Raw bills as returned by the store's GET /bills."""
    return [
        {
            "id": "47qAXb6fIm2zOKkLzMro",
            "vat": "80",
            "fileUrl": "https://test.storage.tld/v0/b/billable-677b6.a…f-1.jpg?alt=media&token=c1640e12-a24b-4b11-ae52-529112e9602a",
            "status": "pending",
            "type": "Hôtel et logement",
            "commentary": "séminaire billed",
            "name": "encore",
            "fileName": "preview-facture-free-201801-pdf-1.jpg",
            "date": "2004-04-04",
            "amount": 400,
            "commentAdmin": "ok",
            "email": "a@a",
            "pct": 20,
        },
        {
            "id": "BeKy5Mo4jkmdfPGYpTxZ",
            "vat": "",
            "amount": 100,
            "name": "test1",
            "fileName": "1592770761.jpeg",
            "commentary": "plop",
            "pct": 20,
            "type": "Transports",
            "email": "a@a",
            "fileUrl": "https://test.storage.tld/v0/b/billable-677b6.a…61.jpeg?alt=media&token=7685cd61-c112-42bc-9929-8a799bb82d8b",
            "date": "2001-01-01",
            "status": "refused",
            "commentAdmin": "en fait non",
        },
        {
            "id": "UIUZtnPQvnbFnB0ozvJh",
            "name": "test3",
            "email": "a@a",
            "type": "Services en ligne",
            "vat": "60",
            "pct": 20,
            "commentAdmin": "bon bah d'accord",
            "amount": 300,
            "status": "accepted",
            "date": "2003-03-03",
            "commentary": "",
            "fileName": "facture-client-php-exportee-dans-document-pdf-enregistre-sur-disque-dur.png",
            "fileUrl": "https://test.storage.tld/v0/b/billable-677b6.a…dur.png?alt=media&token=571d34cb-9c8f-430a-af52-66221cae1da3",
        },
        {
            "id": "qcCK3SzECmaZAGRrHjaC",
            "status": "refused",
            "pct": 20,
            "amount": 200,
            "email": "a@a",
            "name": "test2",
            "vat": "40",
            "fileName": "preview-facture-free-201801-pdf-1.jpg",
            "date": "2002-02-02",
            "commentAdmin": "pas la bonne facture",
            "commentary": "test2",
            "type": "Restaurants et bars",
            "fileUrl": "https://test.storage.tld/v0/b/billable-677b6.a…f-1.jpg?alt=media&token=4df6ed2c-12c8-42a2-b013-346c1346f732",
        },
    ]


@pytest.fixture
def mock_store(bills_fixture: list[dict]) -> MagicMock:
    """
    Mock StoreService: store.bills() always returns the same resource,
    whose list/create/update are AsyncMocks.
    """
    resource = MagicMock()
    resource.list = AsyncMock(return_value=bills_fixture)
    resource.create = AsyncMock(return_value={"fileUrl": "https://localhost:3456/images/test.jpg", "key": "1234"})
    resource.update = AsyncMock(return_value=bills_fixture[0])

    store = MagicMock()
    store.bills.return_value = resource
    return store


@pytest.fixture
async def client(mock_store: MagicMock) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client for FastAPI application.
    Overrides the store dependency with the mock store.
    """
    app.dependency_overrides[get_store_service] = lambda: mock_store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
