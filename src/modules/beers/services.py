"""Beer service layer (Use Cases).

Orchestrates business logic for the Beer aggregate, delegating
persistence to the injected ``IBeerRepository``.

Business rules enforced here:
- RN-BEER-001: name must be unique.
- RN-BEER-002: stock stays within ``0 <= quantity <= max`` (bounds inclusive).
- Field shape (lengths, ranges, type codes) is validated by the DTOs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.beers.exceptions import (
    BeerAlreadyRegistered,
    BeerNotFound,
    BeerStockExceeded,
    BeerStockInsufficient,
)
from modules.beers.models import Beer

if TYPE_CHECKING:
    from django.db import models

    from modules.beers.dtos import CreateBeerDTO
    from modules.beers.repositories.interfaces import IBeerRepository

logger = structlog.get_logger(__name__)


class BeerService:
    """Application service for Beer use-cases.

    Receives an ``IBeerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IBeerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_beer(self, dto: CreateBeerDTO) -> Beer:
        """Register a new beer after enforcing name uniqueness.

        Raises:
            BeerAlreadyRegistered: if the name is already taken (RN-BEER-001).
        """
        log = logger.bind(name=dto.name)

        if self._repo.get_by_name(dto.name):
            log.warning("beer.duplicate_name")
            raise BeerAlreadyRegistered(dto.name)

        beer = Beer(
            name=dto.name,
            brand=dto.brand,
            max=dto.max,
            quantity=dto.quantity,
            type=dto.type,
        )
        try:
            beer = self._repo.save(beer)
        except IntegrityError as exc:
            log.warning("beer.duplicate_name", reason="integrity_error")
            raise BeerAlreadyRegistered(dto.name) from exc
        log.info("beer.created", beer_id=beer.id)
        return beer

    @transaction.atomic
    def delete_by_id(self, id: Any) -> None:
        """Delete a beer.

        Raises:
            BeerNotFound: if the beer does not exist.
        """
        self._get_existing(id)
        self._repo.delete(id)
        logger.info("beer.deleted", beer_id=id)

    @transaction.atomic
    def increment(self, id: Any, quantity: int) -> Beer:
        """Add ``quantity`` units to the stock of a beer.

        Raises:
            BeerNotFound: if the beer does not exist.
            BeerStockExceeded: if the new stock would exceed ``max``.
        """
        beer = self._get_existing(id)
        log = logger.bind(beer_id=beer.id, quantity=quantity)

        if not beer.can_receive(quantity):
            log.warning("beer.stock_exceeded", stock=beer.quantity, max=beer.max)
            raise BeerStockExceeded(id, quantity, beer.max)

        beer.quantity += quantity
        beer = self._repo.save(beer)
        log.info("beer.stock_incremented", stock=beer.quantity)
        return beer

    @transaction.atomic
    def decrement(self, id: Any, quantity: int) -> Beer:
        """Remove ``quantity`` units from the stock of a beer.

        Raises:
            BeerNotFound: if the beer does not exist.
            BeerStockInsufficient: if the new stock would be negative.
        """
        beer = self._get_existing(id)
        log = logger.bind(beer_id=beer.id, quantity=quantity)

        if not beer.can_release(quantity):
            log.warning("beer.stock_insufficient", stock=beer.quantity)
            raise BeerStockInsufficient(id, quantity, beer.quantity)

        beer.quantity -= quantity
        beer = self._repo.save(beer)
        log.info("beer.stock_decremented", stock=beer.quantity)
        return beer

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_all(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> models.QuerySet[Beer]:
        """Return every beer, optionally filtered."""
        return self._repo.list(filters)

    def find_by_name(self, name: str) -> Beer:
        """Retrieve a single beer by name.

        Raises:
            BeerNotFound: if no beer has that name.
        """
        beer = self._repo.get_by_name(name)
        if not beer:
            raise BeerNotFound.with_name(name)
        return beer

    def _get_existing(self, id: Any) -> Beer:
        beer = self._repo.get_by_id(id)
        if not beer:
            raise BeerNotFound.with_id(id)
        return beer
