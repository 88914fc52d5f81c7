"""Read-only, JSON-file-backed catalog.

The file is a list of products::

    [{"name": "Apple", "price": "0.20", "offer": "bogof"}]

``offer`` may be omitted for products on no offer. The whole file is
loaded and validated once, at construction.
"""

from __future__ import annotations

import json
from pathlib import Path

import structlog

from supermarket.domain.exceptions import ValidationError
from supermarket.domain.model.offer import Offer
from supermarket.domain.model.product import Product
from supermarket.domain.model.value_objects import Money
from supermarket.infrastructure.persistence.in_memory_catalog_repository import (
    InMemoryCatalogRepository,
)

logger = structlog.get_logger()


class JsonCatalogRepository(InMemoryCatalogRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        super().__init__(self._load())
        logger.info(
            "catalog_loaded",
            path=str(file_path),
            products=len(self._store),
        )

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ValidationError(f"Cannot read catalog {self._file_path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Catalog {self._file_path} is not valid JSON: {exc}") from exc

        if not isinstance(raw, list):
            raise ValidationError(f"Catalog {self._file_path} must be a JSON list of products")
        return [self._to_domain(item) for item in raw]

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        if not isinstance(raw, dict) or "name" not in raw or "price" not in raw:
            raise ValidationError(f"Catalog entry needs 'name' and 'price': {raw!r}")
        if not isinstance(raw["name"], str):
            raise ValidationError(f"Catalog entry name must be a string: {raw!r}")
        return Product(
            name=raw["name"],
            price=Money.of(raw["price"]),
            offer=Offer.from_code(raw.get("offer")),
        )
