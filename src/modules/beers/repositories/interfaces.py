"""Beer repository interface.

Extends ``IRepository[Beer]`` with the name look-up required by
RN-BEER-001 (unique name) and the fetch-by-name use case.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from django.db import models

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.beers.models import Beer


class IBeerRepository(IRepository["Beer"]):
    """Repository contract for the Beer aggregate."""

    @abstractmethod
    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Beer]":
        """List beers with optional filters."""

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Beer]:
        """Retrieve a beer by its exact name."""
