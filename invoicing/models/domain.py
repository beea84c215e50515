"""Domain entities - internal representation (framework-agnostic)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


def _camel_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Accept PascalCase keys (``"CustomerId"``) as written by older data files."""
    if not isinstance(data, dict):
        raise TypeError(f"Expected an object, got {type(data).__name__}")
    return {key[:1].lower() + key[1:]: value for key, value in data.items()}


class Entity(ABC):
    """
    Record with an integer identity assigned by a repository.

    Repositories read and write ``id`` directly and rely on
    ``to_dict``/``from_dict`` for the persisted JSON shape.
    """

    id: int

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Persisted (camelCase) representation."""

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entity":
        """Rebuild entity from its persisted representation.

        Keys may be camelCase or PascalCase.

        Raises KeyError, TypeError or ValueError on malformed data.
        """


@dataclass
class Category(Entity):
    """Product category domain entity."""
    name: str
    description: Optional[str] = None
    id: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Category":
        data = _camel_keys(data)
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            description=data.get("description"),
        )


@dataclass
class Product(Entity):
    """Product domain entity."""
    name: str
    price: float = 0.0
    description: Optional[str] = None
    category_id: Optional[int] = None
    id: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "categoryId": self.category_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        data = _camel_keys(data)
        category_id = data.get("categoryId")
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            description=data.get("description"),
            price=float(data.get("price", 0.0)),
            category_id=int(category_id) if category_id is not None else None,
        )


@dataclass
class Customer(Entity):
    """Customer domain entity."""
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    id: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Customer":
        data = _camel_keys(data)
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            email=data.get("email"),
            phone=data.get("phone"),
            address=data.get("address"),
        )


@dataclass
class InvoiceItem:
    """Invoice line item (value object, no identity of its own)."""
    product_id: int
    quantity: int
    price: float
    discount: float = 0.0

    @property
    def total_price(self) -> float:
        """Line total, always derived from quantity, price and discount."""
        return self.quantity * (self.price - self.discount)

    def to_dict(self) -> Dict[str, Any]:
        # totalPrice is derived, never persisted
        return {
            "productId": self.product_id,
            "quantity": self.quantity,
            "price": self.price,
            "discount": self.discount,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InvoiceItem":
        data = _camel_keys(data)
        return cls(
            product_id=int(data["productId"]),
            quantity=int(data["quantity"]),
            price=float(data["price"]),
            discount=float(data.get("discount", 0.0)),
        )


@dataclass
class Invoice(Entity):
    """Invoice domain entity."""
    customer_id: int
    items: List[InvoiceItem]
    payment_option: str
    total_amount: float = 0.0
    discount: float = 0.0
    tax: float = 0.0
    final_amount: float = 0.0
    invoice_date: datetime = field(default_factory=datetime.now)
    id: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "customerId": self.customer_id,
            "items": [item.to_dict() for item in self.items],
            "totalAmount": self.total_amount,
            "discount": self.discount,
            "tax": self.tax,
            "finalAmount": self.final_amount,
            "paymentOption": self.payment_option,
            "invoiceDate": self.invoice_date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Invoice":
        data = _camel_keys(data)
        items = data["items"]
        if not isinstance(items, list):
            raise TypeError(f"Invoice items must be a list, got {type(items).__name__}")

        return cls(
            id=int(data["id"]),
            customer_id=int(data["customerId"]),
            items=[InvoiceItem.from_dict(item) for item in items],
            total_amount=float(data.get("totalAmount", 0.0)),
            discount=float(data.get("discount", 0.0)),
            tax=float(data.get("tax", 0.0)),
            final_amount=float(data.get("finalAmount", 0.0)),
            payment_option=str(data["paymentOption"]),
            invoice_date=datetime.fromisoformat(data["invoiceDate"]),
        )
