"""Unit tests for the Product aggregate."""

import pytest

from bizpulse.domain.exceptions import InsufficientStockError, ValidationError
from bizpulse.domain.model.product import Product
from bizpulse.domain.model.value_objects import Money
from tests.fakes import product


class TestProductValidation:

    def test_default_category(self):
        p = Product("1", "Mug", Money.of("4.20"), Money.of("15"), 3)
        assert p.category == "General"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            product(name="   ")

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            product(stock=-1)

    def test_non_integer_stock_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Product("1", "Mug", Money.of("1"), Money.of("2"), 1.5)  # type: ignore[arg-type]


class TestStockDeduction:

    def test_deduct_returns_new_product(self):
        p = product(stock=5)
        updated = p.with_stock_deducted(2)
        assert updated.stock == 3
        assert p.stock == 5

    def test_deduct_entire_stock(self):
        assert product(stock=5).with_stock_deducted(5).stock == 0

    def test_deduct_more_than_stock_rejected(self):
        with pytest.raises(InsufficientStockError, match="need 6, have 5") as exc_info:
            product(name="Widget", stock=5).with_stock_deducted(6)
        assert exc_info.value.requested == 6
        assert exc_info.value.available == 5

    def test_deduct_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            product().with_stock_deducted(0)

    def test_insufficient_stock_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            product(stock=0).with_stock_deducted(1)


class TestLowStock:

    def test_below_threshold(self):
        assert product(stock=9).is_low_stock(10)

    def test_at_threshold_is_not_low(self):
        assert not product(stock=10).is_low_stock(10)
