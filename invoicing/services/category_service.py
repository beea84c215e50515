"""Category service."""

from invoicing.models.domain import Category
from invoicing.models.dto import CategoryDTO
from invoicing.services.base import EntityService


class CategoryService(EntityService[Category, CategoryDTO]):
    """Service for product categories."""

    dto_type = CategoryDTO

    @staticmethod
    def _to_entity(dto: CategoryDTO) -> Category:
        return Category(
            id=dto.id,
            name=dto.name,
            description=dto.description,
        )
