"""Product entity.

Products are defined once when the catalog is loaded and never change
afterwards, so unlike an order they are frozen.
"""

from __future__ import annotations

from dataclasses import dataclass

from supermarket.domain.exceptions import ValidationError
from supermarket.domain.model.offer import Offer
from supermarket.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog, identified by its name."""

    name: str
    price: Money
    offer: Offer = Offer.NONE

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.price.amount < 0:
            raise ValidationError(
                f"Product price cannot be negative, got {self.price}"
            )

    def __str__(self) -> str:
        text = f"{self.name} {self.price}"
        if self.offer is not Offer.NONE:
            text += f" {self.offer.display_name}"
        return text
