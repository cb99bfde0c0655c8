"""Unit tests for the product entity package."""

import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.product_store.entities.product import Category, Product


def _payload(**overrides) -> dict:
    payload = {
        "name": "Hat",
        "description": "A red fedora",
        "price": 9.99,
        "available": True,
        "category": "CLOTHS",
    }
    payload.update(overrides)
    return payload


class TestProduct:
    """Test the Product domain entity."""

    def test_product_creation_without_id(self):
        """Products are built without an id until the store assigns one."""
        product = Product(**_payload())

        assert product.id is None
        assert product.name == "Hat"
        assert product.price == Decimal("9.99")
        assert product.category is Category.CLOTHS

    def test_price_accepts_string_amount(self):
        product = Product(**_payload(price="12.50"))

        assert product.price == Decimal("12.50")

    def test_price_serializes_as_json_number(self):
        product = Product(id=3, **_payload(price="29.99"))

        data = json.loads(product.model_dump_json())

        assert data["price"] == 29.99
        assert data["category"] == "CLOTHS"
        assert data["id"] == 3

    def test_price_rejects_more_than_two_decimal_places(self):
        with pytest.raises(ValidationError):
            Product(**_payload(price="1.999"))

    def test_negative_price_is_allowed(self):
        """No sign or range constraint is enforced on price."""
        product = Product(**_payload(price="-5.00"))

        assert product.price == Decimal("-5.00")

    @pytest.mark.parametrize("field", ["name", "description", "price", "available", "category"])
    def test_required_fields(self, field):
        payload = _payload()
        del payload[field]

        with pytest.raises(ValidationError) as exc_info:
            Product(**payload)

        assert exc_info.value.errors()[0]["loc"] == (field,)

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_name_is_rejected(self, value):
        with pytest.raises(ValidationError):
            Product(**_payload(name=value))

    def test_name_and_description_at_column_limits(self):
        product = Product(**_payload(name="n" * 100, description="d" * 250))

        assert len(product.name) == 100
        assert len(product.description) == 250

    @pytest.mark.parametrize(
        "field, length", [("name", 101), ("name", 300), ("description", 251)]
    )
    def test_overlong_text_is_rejected(self, field, length):
        with pytest.raises(ValidationError) as exc_info:
            Product(**_payload(**{field: "x" * length}))

        assert exc_info.value.errors()[0]["loc"] == (field,)

    @pytest.mark.parametrize("value", ["yes", "true", 1, 0, "1"])
    def test_available_requires_a_boolean(self, value):
        with pytest.raises(ValidationError):
            Product(**_payload(available=value))

    def test_available_from_json_boolean(self):
        product = Product.model_validate_json(json.dumps(_payload(available=False)))

        assert product.available is False

    def test_unknown_category_is_rejected(self):
        """Body values outside the enumeration are never coerced."""
        with pytest.raises(ValidationError):
            Product(**_payload(category="WEAPONS"))

    def test_product_equality(self):
        """Products compare by all attributes, price numerically."""
        product1 = Product(id=1, **_payload(price="9.90"))
        product2 = Product(id=1, **_payload(price="9.9"))
        product3 = Product(id=2, **_payload())

        assert product1 == product2
        assert hash(product1) == hash(product2)
        assert product1 != product3
        assert product1 != "not a product"


class TestCategory:
    """Test category name parsing."""

    @pytest.mark.parametrize("value", ["FOOD", "food", "Food"])
    def test_parse_ignores_case(self, value):
        assert Category.parse(value) is Category.FOOD

    @pytest.mark.parametrize("value", ["not-a-real-category", "", "FOODS", " food "])
    def test_parse_unknown_returns_none(self, value):
        assert Category.parse(value) is None
