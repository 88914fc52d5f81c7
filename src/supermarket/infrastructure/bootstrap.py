"""Composition root: wires concrete implementations to domain interfaces.

Also holds the store's default catalog and the demonstration basket used
when the CLI is run without arguments.
"""

from __future__ import annotations

from pathlib import Path

from supermarket.domain.model.offer import Offer
from supermarket.domain.model.product import Product
from supermarket.domain.model.value_objects import Money
from supermarket.domain.repository.catalog_repository import CatalogRepository
from supermarket.infrastructure.persistence.in_memory_catalog_repository import (
    InMemoryCatalogRepository,
)
from supermarket.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)

DEFAULT_PRODUCTS = (
    Product(name="Apple", price=Money.of("0.20"), offer=Offer.BOGOF),
    Product(name="Orange", price=Money.of("0.50"), offer=Offer.NONE),
    Product(name="Watermelon", price=Money.of("0.80"), offer=Offer.THREE_FOR_TWO),
)

# 4 apples, 3 oranges and 6 watermelons, in the order they were scanned.
DEFAULT_BASKET = (
    "Watermelon",
    "Orange",
    "Watermelon",
    "Apple",
    "Watermelon",
    "Watermelon",
    "Apple",
    "Orange",
    "Watermelon",
    "Watermelon",
    "Apple",
    "Apple",
    "Orange",
)


def catalog_repository(path: Path | None = None) -> CatalogRepository:
    """The JSON catalog at ``path``, or the built-in catalog when None."""
    if path is not None:
        return JsonCatalogRepository(path)
    return InMemoryCatalogRepository(DEFAULT_PRODUCTS)
