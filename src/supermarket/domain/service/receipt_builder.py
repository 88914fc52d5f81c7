"""Domain service: Receipt Builder.

Turns a tally into priced receipt lines and totals them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import structlog

from supermarket.domain.exceptions import EntityNotFoundError
from supermarket.domain.model.receipt import Receipt, ReceiptLine
from supermarket.domain.model.value_objects import Money, Quantity
from supermarket.domain.repository.catalog_repository import CatalogRepository
from supermarket.domain.service.offer_policy import discount_for

logger = structlog.get_logger()


def build_lines(tally: Mapping[str, int], catalog: CatalogRepository) -> list[ReceiptLine]:
    """Price every tallied product, keeping the tally's order.

    Raises EntityNotFoundError if a tallied name is missing from the
    catalog; the basket and the catalog disagree and no receipt can be
    produced.
    """
    lines: list[ReceiptLine] = []

    for name, count in tally.items():
        product = catalog.get_by_name(name)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{name}'")

        discount = discount_for(product.offer, count, product.price)
        if not discount.is_zero:
            logger.debug(
                "offer_applied",
                product=product.name,
                offer=product.offer.display_name,
                quantity=count,
                discount=str(discount),
            )

        lines.append(
            ReceiptLine(
                product=product,
                quantity=Quantity(count),
                subtotal=product.price * count,
                discount=discount,
            )
        )

    return lines


def build_receipt(tally: Mapping[str, int], catalog: CatalogRepository) -> Receipt:
    return Receipt(lines=tuple(build_lines(tally, catalog)))


def total(lines: Iterable[ReceiptLine]) -> Money:
    """Grand total of the lines, subtotal plus discount, unrounded."""
    return Receipt(lines=tuple(lines)).total
