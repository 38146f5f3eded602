import pytest

from rest_framework.test import APIClient

from modules.beers.constants import BeerType
from modules.beers.models import Beer


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def sample_beer():
    """A persisted lager with quantity=10 and max=50."""
    return Beer.objects.create(
        name="Brahma",
        brand="Ambev",
        max=50,
        quantity=10,
        type=BeerType.LAGER,
    )
