"""
Pytest fixtures for fabricboot tests.

No test signs in for real or touches the network: msal and the requests
session are always mocked.
"""

from unittest.mock import MagicMock

import pytest

from fabricboot.config.loader import FabricConfig


@pytest.fixture
def fabric_cfg():
    return FabricConfig(client_id="11111111-2222-3333-4444-555555555555")


@pytest.fixture
def mock_session():
    """requests.Session stand-in returning a 200 with a fixed body."""
    session = MagicMock()
    resp = MagicMock()
    resp.status_code = 200
    resp.text = '{"value": [{"id": "ws-1", "displayName": "Sales"}]}'
    session.request.return_value = resp
    return session


@pytest.fixture(autouse=True)
def _clean_fabric_env(monkeypatch):
    for name in ("FABRIC_CLIENT_ID", "FABRIC_AUTHORITY", "FABRIC_REDIRECT_URI",
                 "FABRIC_SCOPES", "FABRIC_BASE_URL", "FABRIC_TENANT"):
        monkeypatch.delenv(name, raising=False)
