"""Beer model with name uniqueness and bounded stock.

Business rules implemented:
- RN-BEER-001: ``name`` must be unique in the system.
- RN-BEER-002: stock must stay within ``0 <= quantity <= max``
  (``clean()`` plus a database check constraint).
- RN-BEER-003: ``max`` is the capacity ceiling set at registration.
"""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from modules.beers.constants import (
    BRAND_MAX_LENGTH,
    MAX_CAPACITY_LIMIT,
    NAME_MAX_LENGTH,
    BeerType,
)
from modules.core.models import BaseModel


class Beer(BaseModel):
    """Beer aggregate root.

    ``unique=True`` on ``name`` creates the UNIQUE INDEX used by the
    name look-up; no additional index is needed.
    """

    name = models.CharField(max_length=NAME_MAX_LENGTH, unique=True)
    brand = models.CharField(max_length=BRAND_MAX_LENGTH)
    max = models.PositiveIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(MAX_CAPACITY_LIMIT)],
    )
    quantity = models.PositiveIntegerField(default=0)
    type = models.CharField(max_length=20, choices=BeerType.choices)

    class Meta:
        db_table = "beers"
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__lte=models.F("max")),
                name="beers_quantity_within_max",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.name:
            self.name = self.name.strip()
        if self.brand:
            self.brand = self.brand.strip()
        if (
            self.quantity is not None
            and self.max is not None
            and self.quantity > self.max
        ):
            raise ValidationError(
                {"quantity": "Quantity cannot exceed the max stock capacity."}
            )

    # ------------------------------------------------------------------
    # Stock
    # ------------------------------------------------------------------

    def can_receive(self, quantity: int) -> bool:
        """``True`` if adding ``quantity`` keeps the stock at or under ``max``."""
        return self.quantity + quantity <= self.max

    def can_release(self, quantity: int) -> bool:
        """``True`` if removing ``quantity`` keeps the stock at or above zero."""
        return self.quantity - quantity >= 0

    def __str__(self) -> str:
        return f"{self.name} ({self.brand})"
