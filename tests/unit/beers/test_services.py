"""Unit tests for BeerService.

Covers:
- create_beer: happy path, duplicate name, integrity race.
- find_by_name: happy path, not found.
- list_all: delegation to repository.
- delete_by_id: happy path, not found.
- increment / decrement: inclusive stock bounds, not found, error payloads.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from django.db import IntegrityError

from modules.beers.constants import BeerType
from modules.beers.dtos import CreateBeerDTO
from modules.beers.exceptions import (
    BeerAlreadyRegistered,
    BeerNotFound,
    BeerStockExceeded,
    BeerStockInsufficient,
)
from modules.beers.models import Beer
from modules.beers.services import BeerService

pytestmark = pytest.mark.unit

VALID_BEER_ID = 1
INVALID_BEER_ID = 2


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.save.side_effect = lambda beer: beer
    return repo


@pytest.fixture()
def service(mock_repo):
    return BeerService(repository=mock_repo)


def _make_beer(**overrides) -> Beer:
    defaults = {
        "id": VALID_BEER_ID,
        "name": "Brahma",
        "brand": "Ambev",
        "max": 50,
        "quantity": 10,
        "type": BeerType.LAGER,
    }
    defaults.update(overrides)
    return Beer(**defaults)


def _make_dto(**overrides) -> CreateBeerDTO:
    defaults = {
        "name": "Brahma",
        "brand": "Ambev",
        "max": 50,
        "quantity": 10,
        "type": BeerType.LAGER,
    }
    defaults.update(overrides)
    return CreateBeerDTO(**defaults)


# ===========================================================================
# create_beer
# ===========================================================================


class TestCreateBeer:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_name.return_value = None

        beer = service.create_beer(_make_dto())

        assert beer.name == "Brahma"
        assert beer.brand == "Ambev"
        assert beer.max == 50
        assert beer.quantity == 10
        assert beer.type == BeerType.LAGER
        mock_repo.get_by_name.assert_called_once_with("Brahma")
        mock_repo.save.assert_called_once()

    def test_duplicate_name_raises(self, service, mock_repo):
        mock_repo.get_by_name.return_value = _make_beer()

        with pytest.raises(BeerAlreadyRegistered, match="Brahma already registered"):
            service.create_beer(_make_dto())

        mock_repo.save.assert_not_called()

    def test_integrity_error_reported_as_duplicate(self, service, mock_repo):
        mock_repo.get_by_name.return_value = None
        mock_repo.save.side_effect = IntegrityError("UNIQUE constraint failed")

        with pytest.raises(BeerAlreadyRegistered) as exc_info:
            service.create_beer(_make_dto())

        assert exc_info.value.name == "Brahma"
        assert isinstance(exc_info.value.__cause__, IntegrityError)


# ===========================================================================
# find_by_name
# ===========================================================================


class TestFindByName:
    def test_success(self, service, mock_repo):
        expected = _make_beer()
        mock_repo.get_by_name.return_value = expected

        assert service.find_by_name("Brahma") is expected

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_name.return_value = None

        with pytest.raises(BeerNotFound, match="Beer with name Ghost not found"):
            service.find_by_name("Ghost")


# ===========================================================================
# list_all
# ===========================================================================


class TestListAll:
    def test_delegates_to_repo(self, service, mock_repo):
        beers = [_make_beer(), _make_beer(id=2, name="Skol")]
        mock_repo.list.return_value = beers

        result = service.list_all()

        assert list(result) == beers
        mock_repo.list.assert_called_once_with(None)

    def test_empty_catalog(self, service, mock_repo):
        mock_repo.list.return_value = []

        assert list(service.list_all()) == []

    def test_passes_filters_to_repo(self, service, mock_repo):
        mock_repo.list.return_value = []
        filters = {"type": BeerType.IPA}

        service.list_all(filters)

        mock_repo.list.assert_called_once_with(filters)


# ===========================================================================
# delete_by_id
# ===========================================================================


class TestDeleteById:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_beer()
        mock_repo.delete.return_value = True

        assert service.delete_by_id(VALID_BEER_ID) is None

        mock_repo.delete.assert_called_once_with(VALID_BEER_ID)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(BeerNotFound, match="Beer with id 2 not found"):
            service.delete_by_id(INVALID_BEER_ID)

        mock_repo.delete.assert_not_called()


# ===========================================================================
# increment
# ===========================================================================


class TestIncrement:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_beer(quantity=10, max=50)

        beer = service.increment(VALID_BEER_ID, 10)

        assert beer.quantity == 20
        mock_repo.save.assert_called_once_with(beer)

    def test_reaching_max_exactly_is_allowed(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_beer(quantity=10, max=20)

        beer = service.increment(VALID_BEER_ID, 10)

        assert beer.quantity == 20

    def test_one_past_max_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_beer(quantity=10, max=20)
        service.increment(VALID_BEER_ID, 10)

        with pytest.raises(BeerStockExceeded) as exc_info:
            service.increment(VALID_BEER_ID, 1)

        assert exc_info.value.id == VALID_BEER_ID
        assert exc_info.value.quantity == 1
        assert exc_info.value.max == 20
        assert mock_repo.save.call_count == 1

    def test_exceeding_max_leaves_stock_untouched(self, service, mock_repo):
        beer = _make_beer(quantity=10, max=50)
        mock_repo.get_by_id.return_value = beer

        with pytest.raises(BeerStockExceeded, match="max stock capacity: 50"):
            service.increment(VALID_BEER_ID, 45)

        assert beer.quantity == 10
        mock_repo.save.assert_not_called()

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(BeerNotFound):
            service.increment(INVALID_BEER_ID, 10)


# ===========================================================================
# decrement
# ===========================================================================


class TestDecrement:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_beer(quantity=10)

        beer = service.decrement(VALID_BEER_ID, 5)

        assert beer.quantity == 5
        mock_repo.save.assert_called_once_with(beer)

    def test_reaching_zero_exactly_is_allowed(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_beer(quantity=10)

        beer = service.decrement(VALID_BEER_ID, 10)

        assert beer.quantity == 0

    def test_below_zero_raises(self, service, mock_repo):
        beer = _make_beer(quantity=10)
        mock_repo.get_by_id.return_value = beer

        with pytest.raises(BeerStockInsufficient) as exc_info:
            service.decrement(VALID_BEER_ID, 11)

        assert exc_info.value.id == VALID_BEER_ID
        assert exc_info.value.quantity == 11
        assert exc_info.value.stock == 10
        assert "Current Stock: 10" in str(exc_info.value)
        assert beer.quantity == 10
        mock_repo.save.assert_not_called()

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(BeerNotFound):
            service.decrement(INVALID_BEER_ID, 10)
