"""Abstract repository for the product catalog.

The catalog is read-only for the whole of a checkout. It is handed to the
pipeline explicitly rather than looked up from module state, so tests can
price any catalog they like.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from supermarket.domain.model.product import Product


class CatalogRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact name, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""
