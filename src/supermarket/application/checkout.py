"""Application service: Checkout use case.

Runs the pricing pipeline for one basket:
tally -> receipt lines -> total -> DTO.

Events are logged through structlog. Callers embedding the handler should
configure structlog first (see ``supermarket.infrastructure.log_config``);
unconfigured, structlog prints every event to stdout.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from supermarket.application.dto import ReceiptDTO, ReceiptLineDTO
from supermarket.domain.exceptions import EntityNotFoundError
from supermarket.domain.model.product import Product
from supermarket.domain.model.receipt import Receipt
from supermarket.domain.repository.catalog_repository import CatalogRepository
from supermarket.domain.service.basket_aggregator import tally
from supermarket.domain.service.receipt_builder import build_receipt

logger = structlog.get_logger()


class CheckoutHandler:

    def __init__(self, catalog: CatalogRepository) -> None:
        self._catalog = catalog

    def handle(self, basket: Iterable[Product]) -> ReceiptDTO:
        """Price a basket of scanned products.

        The handler keeps no state between calls, so the same basket
        always produces the same receipt.
        """
        receipt = self.price(basket)
        logger.info(
            "checkout_completed",
            lines=len(receipt.lines),
            items=receipt.item_count,
            total=str(receipt.total),
        )
        return self._to_dto(receipt)

    def handle_names(self, scanned_names: Iterable[str]) -> ReceiptDTO:
        """Price a basket given as scanned product names.

        Every name is resolved before anything is priced; an unknown name
        raises EntityNotFoundError.
        """
        return self.handle([self._resolve(name) for name in scanned_names])

    def price(self, basket: Iterable[Product]) -> Receipt:
        """Build the domain Receipt without mapping it to a DTO."""
        return build_receipt(tally(basket), self._catalog)

    # --- Internal helpers -----------------------------------------------------

    def _resolve(self, name: str) -> Product:
        product = self._catalog.get_by_name(name)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{name}'")
        return product

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(receipt: Receipt) -> ReceiptDTO:
        return ReceiptDTO(
            lines=[
                ReceiptLineDTO(
                    product_name=line.product.name,
                    quantity=line.quantity.value,
                    subtotal=str(line.subtotal),
                    offer_name=line.product.offer.display_name,
                    discount=str(line.discount),
                    has_discount=line.has_discount,
                )
                for line in receipt.lines
            ],
            total=str(receipt.total),
            item_count=receipt.item_count,
        )
