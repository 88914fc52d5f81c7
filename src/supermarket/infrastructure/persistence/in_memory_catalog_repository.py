"""In-memory implementation of CatalogRepository."""

from __future__ import annotations

from collections.abc import Iterable

from supermarket.domain.exceptions import ValidationError
from supermarket.domain.model.product import Product
from supermarket.domain.repository.catalog_repository import CatalogRepository


class InMemoryCatalogRepository(CatalogRepository):

    def __init__(self, products: Iterable[Product]) -> None:
        self._store: dict[str, Product] = {}
        for product in products:
            if product.name in self._store:
                raise ValidationError(f"Duplicate product in catalog: '{product.name}'")
            self._store[product.name] = product

    # --- CatalogRepository interface ------------------------------------------

    def get_by_name(self, name: str) -> Product | None:
        return self._store.get(name)

    def list_all(self) -> list[Product]:
        return list(self._store.values())
