"""Product service."""

from invoicing.models.domain import Product
from invoicing.models.dto import ProductDTO
from invoicing.services.base import EntityService


class ProductService(EntityService[Product, ProductDTO]):
    """Service for products."""

    dto_type = ProductDTO

    @staticmethod
    def _to_entity(dto: ProductDTO) -> Product:
        return Product(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            price=dto.price,
            category_id=dto.category_id,
        )
