"""Customer service."""

from invoicing.models.domain import Customer
from invoicing.models.dto import CustomerDTO
from invoicing.services.base import EntityService


class CustomerService(EntityService[Customer, CustomerDTO]):
    """Service for customers."""

    dto_type = CustomerDTO

    @staticmethod
    def _to_entity(dto: CustomerDTO) -> Customer:
        return Customer(
            id=dto.id,
            name=dto.name,
            email=dto.email,
            phone=dto.phone,
            address=dto.address,
        )
