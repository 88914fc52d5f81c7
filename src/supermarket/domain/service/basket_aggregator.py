"""Domain service: Basket Aggregator.

Groups scanned items into a quantity per product. Offers can only be
applied once every unit of a product has been scanned, whatever order
the items came through the till in.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from supermarket.domain.model.product import Product

logger = structlog.get_logger()


def tally(basket: Iterable[Product]) -> dict[str, int]:
    """Count scanned units per product name.

    Key order is the order in which each product was first scanned, which
    becomes the order of the receipt lines. Every entry is counted, so the
    values always sum to the basket length and are never zero.
    """
    counts: dict[str, int] = {}
    for product in basket:
        counts[product.name] = counts.get(product.name, 0) + 1

    logger.debug(
        "basket_tallied",
        products=len(counts),
        items=sum(counts.values()),
    )
    return counts
