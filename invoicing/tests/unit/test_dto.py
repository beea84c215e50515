"""Unit tests for API DTOs."""

import pytest
from pydantic import ValidationError

from invoicing.models.dto import CustomerDTO, InvoiceDTO, InvoiceItemDTO, ProductDTO


class TestDTOValidation:
    """Test field constraints."""

    def test_name_required(self):
        with pytest.raises(ValidationError):
            ProductDTO()

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            ProductDTO(name="")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            ProductDTO(name="Widget", price=-1)

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError):
            CustomerDTO(name="Ann", email="not-an-email")

    def test_invoice_requires_payment_option_and_items(self):
        with pytest.raises(ValidationError):
            InvoiceDTO(customer_id=1)


class TestDTOSerialization:
    """Test camelCase wire format."""

    def test_accepts_camel_case(self):
        product = ProductDTO.model_validate({"name": "Widget", "categoryId": 2})
        assert product.category_id == 2

    def test_dumps_camel_case(self):
        data = ProductDTO(name="Widget", category_id=2).model_dump(by_alias=True)
        assert data["categoryId"] == 2

    def test_item_total_price_is_output_only(self):
        item = InvoiceItemDTO.model_validate(
            {"productId": 1, "quantity": 3, "price": 10, "discount": 2, "totalPrice": 999}
        )

        assert item.total_price == 24
        assert item.model_dump(by_alias=True)["totalPrice"] == 24


class TestNonFiniteNumbers:
    """inf/nan are not valid JSON numbers and are rejected at the boundary."""

    @pytest.mark.parametrize("value", [float("inf"), float("nan")])
    def test_product_price(self, value):
        with pytest.raises(ValidationError):
            ProductDTO(name="Widget", price=value)

    def test_invoice_item_price(self):
        with pytest.raises(ValidationError):
            InvoiceItemDTO(product_id=1, quantity=1, price=float("inf"))
