"""Test fixtures for the storefront service tests."""

import pytest
from fastapi.testclient import TestClient

from storefront_service.config import ProviderSettings, Settings
from storefront_service.server import create_app
from storefront_service.store import PurchaseStore

from .upstream import PROVIDER_A_URL, PROVIDER_B_URL, FakeUpstream


@pytest.fixture
def upstream(mocker):
    """Patch outbound HTTP calls of the provider clients."""
    return FakeUpstream(mocker)


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a temporary database and two fake providers."""
    return Settings(
        database_path=str(tmp_path / "database.db"),
        providers=[
            ProviderSettings(name="provider-a", url=PROVIDER_A_URL),
            ProviderSettings(name="provider-b", url=PROVIDER_B_URL),
        ],
        log_level="WARNING",
    )


@pytest.fixture
def store(settings):
    """A purchase store with its schema in place."""
    purchase_store = PurchaseStore(settings.database_path)
    purchase_store.ensure_schema()
    return purchase_store


@pytest.fixture
def test_client(settings):
    """Test client running the app lifespan (schema creation included)."""
    with TestClient(create_app(settings)) as client:
        yield client
