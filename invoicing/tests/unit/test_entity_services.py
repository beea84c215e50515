"""Unit tests for entity services."""

from datetime import datetime
from unittest.mock import Mock

import pytest

from invoicing.models.domain import Category, Customer, Invoice, InvoiceItem, Product
from invoicing.models.dto import CategoryDTO, CustomerDTO, InvoiceDTO, InvoiceItemDTO, ProductDTO
from invoicing.services import CategoryService, CustomerService, InvoiceService, ProductService


class TestProductService:
    """Test ProductService delegation and conversion."""

    def test_get_all(self):
        mock_repo = Mock()
        mock_repo.get_all.return_value = [
            Product(name="Widget", id=1),
            Product(name="Gadget", price=2.0, id=2),
        ]

        result = ProductService(mock_repo).get_all()

        assert [p.name for p in result] == ["Widget", "Gadget"]
        assert isinstance(result[0], ProductDTO)

    def test_get_by_id_found(self):
        mock_repo = Mock()
        mock_repo.get_by_id.return_value = Product(name="Widget", category_id=3, id=1)

        result = ProductService(mock_repo).get_by_id(1)

        assert result.model_dump() == ProductDTO(id=1, name="Widget", category_id=3).model_dump()
        mock_repo.get_by_id.assert_called_once_with(1)

    def test_get_by_id_not_found(self):
        mock_repo = Mock()
        mock_repo.get_by_id.return_value = None

        assert ProductService(mock_repo).get_by_id(5) is None

    def test_add_passes_entity_and_returns_stored(self):
        mock_repo = Mock()
        mock_repo.add.return_value = Product(name="Widget", price=4.0, id=1)

        result = ProductService(mock_repo).add(ProductDTO(name="Widget", price=4.0))

        assert result.id == 1
        mock_repo.add.assert_called_once_with(Product(name="Widget", price=4.0))

    def test_update_and_delete_propagate_not_found(self):
        mock_repo = Mock()
        mock_repo.update.return_value = False
        mock_repo.delete.return_value = False
        service = ProductService(mock_repo)

        assert service.update(ProductDTO(id=9, name="Ghost")) is False
        assert service.delete(9) is False
        mock_repo.update.assert_called_once_with(Product(name="Ghost", id=9))
        mock_repo.delete.assert_called_once_with(9)


class TestOtherServices:
    """Test DTO -> entity conversion for the remaining types."""

    def test_category(self):
        mock_repo = Mock()
        mock_repo.update.return_value = True

        assert CategoryService(mock_repo).update(CategoryDTO(id=2, name="Tools")) is True
        mock_repo.update.assert_called_once_with(Category(name="Tools", id=2))

    def test_customer(self):
        mock_repo = Mock()
        mock_repo.add.return_value = Customer(name="Ann", email="ann@example.com", id=1)

        result = CustomerService(mock_repo).add(CustomerDTO(name="Ann", email="ann@example.com"))

        assert result.email == "ann@example.com"
        mock_repo.add.assert_called_once_with(Customer(name="Ann", email="ann@example.com"))

    def test_invoice_items_converted(self):
        when = datetime(2024, 1, 15, 10, 30)
        stored = Invoice(
            customer_id=1,
            items=[InvoiceItem(product_id=2, quantity=3, price=10.0, discount=2.0)],
            payment_option="card",
            invoice_date=when,
            id=1,
        )
        mock_repo = Mock()
        mock_repo.add.return_value = stored

        dto = InvoiceDTO(
            customer_id=1,
            items=[InvoiceItemDTO(product_id=2, quantity=3, price=10, discount=2)],
            payment_option="card",
            invoice_date=when,
        )
        result = InvoiceService(mock_repo).add(dto)

        passed = mock_repo.add.call_args.args[0]
        assert passed == Invoice(**{**stored.__dict__, "id": 0})
        assert result.items[0].total_price == pytest.approx(24)
