"""Receipt lines and the receipt they make up.

Both are derived values: the receipt builder creates them once from a
tally and nothing mutates them afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from supermarket.domain.exceptions import ValidationError
from supermarket.domain.model.product import Product
from supermarket.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class ReceiptLine:
    """One row of the bill: a distinct product and everything charged for it.

    ``subtotal`` is quantity x unit price with no offer applied.
    ``discount`` is the offer reduction, always <= 0 and never larger in
    magnitude than the subtotal.
    """

    product: Product
    quantity: Quantity
    subtotal: Money
    discount: Money

    def __post_init__(self) -> None:
        if self.discount.amount > 0:
            raise ValidationError(
                f"Discount for {self.product.name} must not be positive, got {self.discount}"
            )
        if -self.discount > self.subtotal:
            raise ValidationError(
                f"Discount {self.discount} exceeds subtotal {self.subtotal} "
                f"for {self.product.name}"
            )

    @property
    def net(self) -> Money:
        return self.subtotal + self.discount

    @property
    def has_discount(self) -> bool:
        return not self.discount.is_zero

    def __str__(self) -> str:
        text = f"{self.product.name} {self.quantity} {self.subtotal}"
        if self.has_discount:
            text += f" {self.product.offer.display_name} {self.discount}"
        return text


@dataclass(frozen=True)
class Receipt:
    """The ordered receipt lines of one checkout."""

    lines: tuple[ReceiptLine, ...]

    @property
    def total(self) -> Money:
        """Sum of every line net of its discount, unrounded."""
        result = Money.zero()
        for line in self.lines:
            result = result + line.subtotal + line.discount
        return result

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)
