"""Base repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List

from invoicing.models.domain import Entity

T = TypeVar('T', bound=Entity)


class Repository(ABC, Generic[T]):
    """
    Base repository interface.

    Abstracts data access - could be filesystem, database, etc.
    Identity is an integer ``id`` assigned by the repository on ``add``.
    Missing ids are reported as ``None``/``False``, never raised.
    """

    @abstractmethod
    def get_all(self) -> List[T]:
        """List all entities in storage order."""
        pass

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Get entity by ID, or None if absent."""
        pass

    @abstractmethod
    def add(self, entity: T) -> T:
        """Store a new entity, assigning its ID. Returns the stored entity."""
        pass

    @abstractmethod
    def update(self, entity: T) -> bool:
        """Replace the entity with the same ID. Returns False if not found."""
        pass

    @abstractmethod
    def delete(self, id: int) -> bool:
        """Delete entity by ID. Returns True if deleted, False if not found."""
        pass
