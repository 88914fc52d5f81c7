"""Domain service: Offer Policy.

Maps (offer, quantity, unit price) to the discount for one receipt line.
Pure functions, no state.
"""

from __future__ import annotations

from supermarket.domain.model.offer import Offer
from supermarket.domain.model.value_objects import Money


def multi_buy_discount(buy: int, pay_for: int, quantity: int, unit_price: Money) -> Money:
    """Discount for a "buy N, pay for M" deal.

    Every complete group of ``buy`` units earns ``buy - pay_for`` free
    units; an incomplete trailing group is paid in full. The result is
    ``(payable - quantity) * unit_price`` which is zero or negative.
    """
    groups, leftover = divmod(quantity, buy)
    payable = groups * pay_for + leftover
    return unit_price * (payable - quantity)


def discount_for(offer: Offer, quantity: int, unit_price: Money) -> Money:
    """Discount for ``quantity`` units of a product carrying ``offer``.

    ``quantity`` must be >= 0. Zero units never earn a discount.
    """
    if offer is Offer.NONE or quantity == 0:
        return Money.zero()
    return multi_buy_discount(offer.buy, offer.pay_for, quantity, unit_price)
