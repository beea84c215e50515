"""Data Transfer Objects - API contracts."""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, populated by either form."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        allow_inf_nan=False,
    )


class CategoryDTO(CamelModel):
    """Category data for API requests and responses."""
    id: int = 0
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)


class ProductDTO(CamelModel):
    """Product data for API requests and responses."""
    id: int = 0
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    price: float = Field(0.0, ge=0)
    category_id: Optional[int] = Field(None, ge=1)


class CustomerDTO(CamelModel):
    """Customer data for API requests and responses."""
    id: int = 0
    name: str = Field(..., min_length=1, max_length=100)
    email: Optional[str] = Field(None, max_length=254, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: Optional[str] = Field(None, max_length=32)
    address: Optional[str] = Field(None, max_length=500)


class InvoiceItemDTO(CamelModel):
    """Invoice line item. ``totalPrice`` is output-only and always derived."""
    product_id: int = Field(..., ge=1)
    quantity: int = Field(..., ge=0)
    price: float = Field(..., ge=0)
    discount: float = Field(0.0, ge=0)

    @computed_field(alias="totalPrice")
    @property
    def total_price(self) -> float:
        return self.quantity * (self.price - self.discount)


class InvoiceDTO(CamelModel):
    """Invoice data for API requests and responses."""
    id: int = 0
    customer_id: int = Field(..., ge=1)
    items: List[InvoiceItemDTO]
    total_amount: float = Field(0.0, ge=0)
    discount: float = Field(0.0, ge=0)
    tax: float = Field(0.0, ge=0)
    final_amount: float = Field(0.0, ge=0)
    payment_option: str = Field(..., min_length=1, max_length=50)
    invoice_date: datetime = Field(default_factory=datetime.now)


class ErrorResponse(BaseModel):
    """Standard error response."""
    detail: Any


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
