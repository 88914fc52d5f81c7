"""Data Transfer Objects: plain containers that cross layer boundaries.

Amounts are already formatted to two decimal places, so the CLI never
touches Decimal or the domain model.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReceiptLineDTO:
    """Output: a single receipt line as displayed to the customer."""

    product_name: str
    quantity: int
    subtotal: str  # e.g. "4.80"
    offer_name: str
    discount: str  # e.g. "-1.60", "0.00" when no offer applied
    has_discount: bool


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: the complete receipt."""

    lines: list[ReceiptLineDTO]
    total: str
    item_count: int
