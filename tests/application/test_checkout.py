"""Integration tests for the Checkout use case.

Uses the in-memory fake catalog; no file I/O.
"""

import random

import pytest

from supermarket.application.checkout import CheckoutHandler
from supermarket.domain.exceptions import EntityNotFoundError
from supermarket.domain.model.offer import Offer
from supermarket.domain.model.product import Product
from supermarket.domain.model.value_objects import Money
from supermarket.infrastructure.log_config import configure_logging
from tests.fakes import APPLE, CANONICAL_BASKET, ORANGE, WATERMELON, FakeCatalogRepository


def _setup(products: list[Product] | None = None) -> tuple[CheckoutHandler, FakeCatalogRepository]:
    catalog = FakeCatalogRepository(products)
    return CheckoutHandler(catalog), catalog


class TestCheckoutHappyPath:

    def test_canonical_receipt(self):
        handler, _ = _setup()
        dto = handler.handle(CANONICAL_BASKET)

        assert [(l.product_name, l.quantity, l.subtotal, l.discount) for l in dto.lines] == [
            ("Watermelon", 6, "4.80", "-1.60"),
            ("Orange", 3, "1.50", "0.00"),
            ("Apple", 4, "0.80", "-0.40"),
        ]
        assert dto.total == "5.10"
        assert dto.item_count == 13

    def test_offer_names_carried(self):
        handler, _ = _setup()
        dto = handler.handle(CANONICAL_BASKET)
        assert [(l.offer_name, l.has_discount) for l in dto.lines] == [
            ("Three for Two", True),
            ("", False),
            ("BOGOF", True),
        ]

    def test_empty_basket(self):
        handler, _ = _setup()
        dto = handler.handle([])
        assert dto.lines == []
        assert dto.total == "0.00"

    def test_offer_below_threshold_not_shown(self):
        handler, _ = _setup()
        dto = handler.handle([APPLE, WATERMELON, WATERMELON])
        assert not any(l.has_discount for l in dto.lines)
        assert dto.total == "1.80"


class TestCheckoutDeterminism:

    def test_idempotent(self):
        handler, _ = _setup()
        assert handler.handle(CANONICAL_BASKET) == handler.handle(CANONICAL_BASKET)

    def test_price_returns_equal_receipts(self):
        handler, _ = _setup()
        assert handler.price(CANONICAL_BASKET) == handler.price(CANONICAL_BASKET)

    def test_line_order_independent_of_catalog_order(self):
        forward, _ = _setup([APPLE, ORANGE, WATERMELON])
        backward, _ = _setup([WATERMELON, ORANGE, APPLE])
        basket = [ORANGE, APPLE, WATERMELON, APPLE]
        assert forward.handle(basket) == backward.handle(basket)
        assert [l.product_name for l in forward.handle(basket).lines] == ["Orange", "Apple", "Watermelon"]

    @pytest.mark.parametrize("seed", range(10))
    def test_total_independent_of_scan_order(self, seed):
        handler, _ = _setup()
        shuffled = list(CANONICAL_BASKET)
        random.Random(seed).shuffle(shuffled)
        dto = handler.handle(shuffled)
        assert dto.total == "5.10"
        first_seen = list(dict.fromkeys(p.name for p in shuffled))
        assert [l.product_name for l in dto.lines] == first_seen


class TestCheckoutByName:

    def test_resolves_names(self):
        handler, _ = _setup()
        names = [p.name for p in CANONICAL_BASKET]
        assert handler.handle_names(names) == handler.handle(CANONICAL_BASKET)

    def test_unknown_name_rejected(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found: 'Banana'"):
            handler.handle_names(["Apple", "Banana"])

    def test_custom_catalog(self):
        bread = Product(name="Bread", price=Money.of("1.10"), offer=Offer.THREE_FOR_TWO)
        handler, _ = _setup([bread])
        dto = handler.handle_names(["Bread"] * 7)
        assert dto.lines[0].subtotal == "7.70"
        assert dto.lines[0].discount == "-2.20"
        assert dto.total == "5.50"


class TestCheckoutCatalogMismatch:

    def test_product_missing_from_catalog_is_fatal(self):
        handler, _ = _setup([APPLE])
        with pytest.raises(EntityNotFoundError, match="Watermelon"):
            handler.handle([APPLE, WATERMELON])


class TestCheckoutLogging:

    def test_configured_logging_keeps_output_clean(self, capsys):
        configure_logging()
        handler, _ = _setup()
        handler.handle(CANONICAL_BASKET)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_verbose_logging_goes_to_stderr(self, capsys):
        configure_logging(verbose=True)
        handler, _ = _setup()
        handler.handle(CANONICAL_BASKET)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "checkout_completed" in captured.err
