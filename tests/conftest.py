"""Pytest configuration and fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

# Add package to path for imports
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Set test environment variables before importing the app
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("APP_LOG_LEVEL", "WARNING")

from iso8583_mock.core.config import reload_settings
from iso8583_mock.persistence.transaction_store import TransactionStore
from iso8583_mock.schemas.messages import AuthorizationRequest, ReversalRequest
from tests.utils.messages import authorization_payload, reversal_payload


@pytest.fixture(autouse=True)
def fresh_settings():
    """Rebuild cached settings around each test so env patches take effect."""
    reload_settings()
    yield
    reload_settings()


@pytest.fixture
def store() -> TransactionStore:
    """Empty transaction store."""
    return TransactionStore()


@pytest.fixture
def authorization_request() -> AuthorizationRequest:
    """Approvable authorization request for STAN 100001."""
    return AuthorizationRequest(**authorization_payload())


@pytest.fixture
def reversal_request() -> ReversalRequest:
    """Reversal request for STAN 100001."""
    return ReversalRequest(**reversal_payload())
