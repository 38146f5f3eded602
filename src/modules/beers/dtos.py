"""Beer DTOs for the Service Layer.

Framework-agnostic request contracts using Pydantic v2.  The views build
these from the request body before calling the service, so every field
constraint is checked up front.  DTOs are immutable (``frozen=True``).

- ``CreateBeerDTO``: input for beer registration.
- ``StockAdjustmentDTO``: input for increment / decrement requests.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from modules.beers.constants import (
    BRAND_MAX_LENGTH,
    MAX_CAPACITY_LIMIT,
    NAME_MAX_LENGTH,
    QUANTITY_REQUEST_LIMIT,
    BeerType,
)


def _clean_text(value: str, field: str, max_length: int) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"{field} must not be empty.")
    if len(value) > max_length:
        raise ValueError(f"{field} must have at most {max_length} characters.")
    return value


class CreateBeerDTO(BaseModel):
    """Immutable DTO for beer registration requests.

    Validates:
    - ``name`` / ``brand`` are non-blank and at most 200 characters.
    - ``max`` is between 1 and 500.
    - ``quantity`` is between 0 and 100 and not above ``max``.
    - ``type`` is one of the ``BeerType`` codes.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    brand: str
    max: int
    quantity: int
    type: BeerType

    @field_validator("name")
    @classmethod
    def name_must_be_valid(cls, v: str) -> str:
        return _clean_text(v, "Name", NAME_MAX_LENGTH)

    @field_validator("brand")
    @classmethod
    def brand_must_be_valid(cls, v: str) -> str:
        return _clean_text(v, "Brand", BRAND_MAX_LENGTH)

    @field_validator("max")
    @classmethod
    def max_must_be_in_range(cls, v: int) -> int:
        if not 1 <= v <= MAX_CAPACITY_LIMIT:
            raise ValueError(f"Max must be between 1 and {MAX_CAPACITY_LIMIT}.")
        return v

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_in_range(cls, v: int) -> int:
        if not 0 <= v <= QUANTITY_REQUEST_LIMIT:
            raise ValueError(
                f"Quantity must be between 0 and {QUANTITY_REQUEST_LIMIT}."
            )
        return v

    @model_validator(mode="after")
    def quantity_within_max(self) -> CreateBeerDTO:
        if self.quantity > self.max:
            raise ValueError("Quantity cannot exceed the max stock capacity.")
        return self


class StockAdjustmentDTO(BaseModel):
    """Immutable DTO for ``{"quantity": N}`` stock adjustment bodies."""

    model_config = ConfigDict(frozen=True)

    quantity: int

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_in_range(cls, v: int) -> int:
        if not 1 <= v <= QUANTITY_REQUEST_LIMIT:
            raise ValueError(
                f"Quantity must be between 1 and {QUANTITY_REQUEST_LIMIT}."
            )
        return v
