"""Promotional offers.

The set of offers is closed. Each one is an N-for-M deal: buy ``buy``
units, pay for ``pay_for`` of them. The discount arithmetic itself lives
in ``supermarket.domain.service.offer_policy``.
"""

from __future__ import annotations

from enum import Enum

from supermarket.domain.exceptions import ValidationError


class Offer(Enum):
    NONE = ("", 1, 1)
    BOGOF = ("BOGOF", 2, 1)
    THREE_FOR_TWO = ("Three for Two", 3, 2)

    def __init__(self, display_name: str, buy: int, pay_for: int) -> None:
        self.display_name = display_name
        self.buy = buy
        self.pay_for = pay_for

    @property
    def code(self) -> str:
        """Lower-case name used in catalog files."""
        return self.name.lower()

    @staticmethod
    def from_code(code: str | None) -> Offer:
        """Resolve a catalog offer code; a missing or blank code means no offer."""
        if code is None:
            return Offer.NONE
        if not isinstance(code, str):
            raise ValidationError(f"Offer code must be a string, got {code!r}")
        if not code.strip():
            return Offer.NONE
        try:
            return Offer[code.strip().upper()]
        except KeyError:
            known = ", ".join(o.code for o in Offer)
            raise ValidationError(
                f"Unknown offer '{code}' (expected one of: {known})"
            ) from None

    def __str__(self) -> str:
        return self.display_name
