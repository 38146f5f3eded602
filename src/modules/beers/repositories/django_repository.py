"""Django ORM implementation of the Beer repository.

Satisfies ``IBeerRepository`` using Django's QuerySet API.
Missing entities follow the Null Object pattern: methods return ``None``
(or ``False``) instead of raising, and the Service Layer decides how to
report them.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog

from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.beers.models import Beer
from modules.beers.repositories.interfaces import IBeerRepository

logger = structlog.get_logger(__name__)


class BeerDjangoRepository(IBeerRepository):
    """Concrete Beer repository backed by Django ORM."""

    def get_by_id(self, id: Any) -> Optional[Beer]:
        """Retrieve a beer by primary key.

        Returns ``None`` for non-existent or non-integer IDs.
        """
        try:
            return Beer.objects.filter(id=id).first()
        except (ValueError, TypeError, OverflowError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> "models.QuerySet[Beer]":
        """List beers with optional Django ORM look-ups.

        Examples of valid filters::

            {"type": "IPA"}
            {"brand__icontains": "ambev"}
        """
        queryset = Beer.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    @transaction.atomic
    def save(self, entity: Beer) -> Beer:
        """Persist (create or update) a beer."""
        entity.save()
        logger.info(
            "beer.saved",
            beer_id=entity.id,
            name=entity.name,
            quantity=entity.quantity,
        )
        return entity

    @transaction.atomic
    def delete(self, id: Any) -> bool:
        """Delete a beer by ID.

        Returns ``True`` if the beer was found and removed,
        ``False`` if no beer exists with the given ID.
        """
        beer = self.get_by_id(id)
        if not beer:
            return False
        beer.delete()
        logger.info("beer.deleted", beer_id=id)
        return True

    def get_by_name(self, name: str) -> Optional[Beer]:
        return Beer.objects.filter(name=name).first()
