"""Console rendering of a receipt.

Reproduces the till's printed layout exactly; tests compare it byte for
byte.
"""

from __future__ import annotations

from supermarket.application.dto import ReceiptDTO

HEADER = "SUPERMARKET plc"
FOOTER = "Thank you for shopping with us"


def render_receipt(receipt: ReceiptDTO) -> str:
    """Return the printed receipt, ending in a newline."""
    out: list[str] = ["", HEADER, ""]

    for line in receipt.lines:
        out.append(f"{line.product_name:<12} x{line.quantity}    {line.subtotal}")
        if line.has_discount:
            out.append(f"           {line.offer_name:<15} {line.discount}")

    out += ["", f"TOTAL     {receipt.total}", "", FOOTER]
    return "\n".join(out) + "\n"
