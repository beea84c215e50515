"""
Service layer between the HTTP API and the repositories.

Each service delegates the five CRUD operations to one repository and
converts between domain entities and DTOs. "Not found" comes back as
``None``/``False`` so the API layer can answer 404 without exceptions.
"""

from .base import EntityService
from .category_service import CategoryService
from .customer_service import CustomerService
from .invoice_service import InvoiceService
from .product_service import ProductService

__all__ = [
    'EntityService',
    'CategoryService',
    'CustomerService',
    'InvoiceService',
    'ProductService',
]
