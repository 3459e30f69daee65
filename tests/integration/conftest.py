"""Pytest configuration for HTTP-level tests.

Each test gets a freshly built app with its own transaction store and an
httpx.AsyncClient bound to it through the ASGI transport.
"""

import httpx
import pytest

from iso8583_mock.main import create_app
from iso8583_mock.persistence.transaction_store import TransactionStore


@pytest.fixture
def transaction_store() -> TransactionStore:
    """Store injected into the app under test."""
    return TransactionStore()


@pytest.fixture
def client_app(transaction_store):
    """Create the FastAPI app around the test's store."""
    return create_app(store=transaction_store)


@pytest.fixture
async def test_client(client_app):
    """Create httpx.AsyncClient for testing async routes."""
    transport = httpx.ASGITransport(app=client_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
