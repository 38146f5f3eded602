"""Unit tests for BeerDjangoRepository.

Covers:
- CRUD operations (get_by_id, list, save, delete).
- Name look-up.
- Edge cases (unknown and non-integer IDs).
"""

from __future__ import annotations

import pytest

from modules.beers.constants import BeerType
from modules.beers.models import Beer
from modules.beers.repositories.django_repository import BeerDjangoRepository
from modules.beers.repositories.interfaces import IBeerRepository

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_beer(**overrides) -> Beer:
    defaults = {
        "name": "Brahma",
        "brand": "Ambev",
        "max": 50,
        "quantity": 10,
        "type": BeerType.LAGER,
    }
    defaults.update(overrides)
    beer = Beer(**defaults)
    beer.save()
    return beer


@pytest.fixture()
def repo():
    return BeerDjangoRepository()


# ===========================================================================
# Instantiation
# ===========================================================================


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IBeerRepository)


# ===========================================================================
# get_by_id
# ===========================================================================


class TestGetById:
    def test_returns_beer_when_found(self, repo):
        beer = _make_beer()
        result = repo.get_by_id(beer.id)
        assert result is not None
        assert result.id == beer.id

    def test_accepts_string_id(self, repo):
        beer = _make_beer()
        result = repo.get_by_id(str(beer.id))
        assert result is not None
        assert result.id == beer.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id(999) is None

    def test_returns_none_for_non_integer_id(self, repo):
        assert repo.get_by_id("not-an-id") is None


# ===========================================================================
# list
# ===========================================================================


class TestList:
    def test_returns_all_beers_ordered_by_name(self, repo):
        _make_beer(name="Skol")
        _make_beer(name="Brahma")
        results = list(repo.list())
        assert [beer.name for beer in results] == ["Brahma", "Skol"]

    def test_returns_empty_when_no_beers(self, repo):
        assert list(repo.list()) == []

    def test_filters_by_type(self, repo):
        _make_beer(name="Brahma", type=BeerType.LAGER)
        _make_beer(name="Guinness", type=BeerType.STOUT)
        results = list(repo.list({"type": BeerType.STOUT}))
        assert len(results) == 1
        assert results[0].name == "Guinness"

    def test_filters_by_brand_icontains(self, repo):
        _make_beer(name="Brahma", brand="Ambev")
        _make_beer(name="Guinness", brand="Diageo")
        results = list(repo.list({"brand__icontains": "amb"}))
        assert [beer.name for beer in results] == ["Brahma"]


# ===========================================================================
# save
# ===========================================================================


class TestSave:
    def test_creates_new_beer(self, repo):
        beer = Beer(name="Skol", brand="Ambev", max=20, quantity=1, type=BeerType.LAGER)
        saved = repo.save(beer)
        assert saved is beer
        assert saved.id is not None
        assert Beer.objects.filter(id=saved.id).exists()

    def test_updates_existing_beer(self, repo):
        beer = _make_beer()
        beer.quantity = 42
        repo.save(beer)
        beer.refresh_from_db()
        assert beer.quantity == 42


# ===========================================================================
# delete
# ===========================================================================


class TestDelete:
    def test_deletes_existing_beer(self, repo):
        beer = _make_beer()
        assert repo.delete(beer.id) is True
        assert not Beer.objects.filter(id=beer.id).exists()

    def test_returns_false_for_nonexistent(self, repo):
        assert repo.delete(999) is False

    def test_returns_false_for_non_integer_id(self, repo):
        assert repo.delete("not-an-id") is False


# ===========================================================================
# get_by_name
# ===========================================================================


class TestGetByName:
    def test_returns_beer_when_found(self, repo):
        beer = _make_beer(name="Colorado Indica")
        result = repo.get_by_name("Colorado Indica")
        assert result is not None
        assert result.id == beer.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_name("Nonexistent") is None

    def test_lookup_is_case_sensitive(self, repo):
        _make_beer(name="Brahma")
        assert repo.get_by_name("brahma") is None
