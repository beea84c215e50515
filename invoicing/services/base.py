"""Entity service base - CRUD pass-through over a repository."""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from invoicing.models.domain import Entity
from invoicing.repositories.base import Repository

T = TypeVar('T', bound=Entity)
D = TypeVar('D', bound=BaseModel)


class EntityService(ABC, Generic[T, D]):
    """
    Service for one entity type.

    Responsibilities:
    - Delegate CRUD operations to the repository
    - Convert between domain entities and DTOs

    Does NOT:
    - Handle HTTP requests (that's API layer)
    - Access files directly (that's repository layer)
    """

    dto_type: Type[D]

    def __init__(self, repo: Repository[T]):
        self.repo = repo

    def get_all(self) -> List[D]:
        """List all entities."""
        return [self._to_dto(entity) for entity in self.repo.get_all()]

    def get_by_id(self, id: int) -> Optional[D]:
        """Get entity by ID, or None if absent."""
        entity = self.repo.get_by_id(id)

        if entity is None:
            return None

        return self._to_dto(entity)

    def add(self, dto: D) -> D:
        """Create entity. Any ID on the DTO is ignored."""
        stored = self.repo.add(self._to_entity(dto))
        return self._to_dto(stored)

    def update(self, dto: D) -> bool:
        """Replace the entity carrying the DTO's ID. False if not found."""
        return self.repo.update(self._to_entity(dto))

    def delete(self, id: int) -> bool:
        """Delete entity by ID. False if not found."""
        return self.repo.delete(id)

    def _to_dto(self, entity: T) -> D:
        """Convert domain entity to DTO."""
        return self.dto_type.model_validate(entity)

    @staticmethod
    @abstractmethod
    def _to_entity(dto: D) -> T:
        """Convert DTO to domain entity."""
