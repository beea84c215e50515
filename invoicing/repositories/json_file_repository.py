"""Generic repository - JSON file implementation."""

import copy
import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import List, Optional, Type

from invoicing.errors import StoreUnavailableError, WriteFailedError
from invoicing.repositories.base import Repository, T

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    """Refuse NaN/Infinity, which are not valid JSON."""
    raise ValueError(f"Non-finite number {name} in store")


class JsonFileRepository(Repository[T]):
    """
    Repository for any entity type, backed by a single JSON array file.

    Current implementation: whole collection cached in memory, whole file
    rewritten on every mutation (temp file + atomic rename).
    Future: Could swap for SQLite if collections outgrow memory.

    The in-memory collection is authoritative between operations and is
    only replaced after the file write succeeds, so memory and disk agree
    after every call, successful or not. One lock per instance serializes
    mutations. Lists are never modified in place, only swapped, so reads
    copy whichever list is current without waiting for an in-flight write.

    New ids are max-plus-one over the current ids, never "last item plus
    one", and never reuse an id handed out earlier in this process.
    """

    def __init__(self, file_path: Path, entity_type: Type[T]):
        self.file_path = Path(file_path)
        self.entity_type = entity_type
        self._lock = threading.Lock()
        self._items: List[T] = self._load_from_file()
        self._last_id = self._max_id(self._items)

    def get_all(self) -> List[T]:
        """List all entities in storage order."""
        return copy.deepcopy(self._items)

    def get_by_id(self, id: int) -> Optional[T]:
        """Get entity by ID."""
        items = self._items
        index = self._index_of(id, items)
        if index is None:
            return None
        return copy.deepcopy(items[index])

    def exists(self, id: int) -> bool:
        """Check whether an entity with this ID is stored."""
        return self._index_of(id, self._items) is not None

    def count(self) -> int:
        """Number of stored entities."""
        return len(self._items)

    def add(self, entity: T) -> T:
        """Assign a new ID, append and persist. The input entity is not modified."""
        with self._lock:
            stored = copy.deepcopy(entity)
            stored.id = self._next_id()

            items = self._items + [stored]
            self._save_to_file(items)

            self._items = items
            self._last_id = stored.id
            logger.debug("Added %s %d to %s (%d total)",
                         self._type_name, stored.id, self.file_path.name, self.count())
            return copy.deepcopy(stored)

    def update(self, entity: T) -> bool:
        """Replace the entity with the same ID in place and persist."""
        with self._lock:
            index = self._index_of(entity.id, self._items)
            if index is None:
                logger.debug("Update skipped, %s %d not found", self._type_name, entity.id)
                return False

            items = list(self._items)
            items[index] = copy.deepcopy(entity)
            self._save_to_file(items)

            self._items = items
            logger.debug("Updated %s %d", self._type_name, entity.id)
            return True

    def delete(self, id: int) -> bool:
        """Remove the entity with this ID and persist."""
        with self._lock:
            index = self._index_of(id, self._items)
            if index is None:
                logger.debug("Delete skipped, %s %d not found", self._type_name, id)
                return False

            items = self._items[:index] + self._items[index + 1:]
            self._save_to_file(items)

            self._items = items
            logger.debug("Deleted %s %d (%d left)", self._type_name, id, self.count())
            return True

    def reload(self) -> None:
        """Re-read the backing file, discarding the in-memory collection."""
        with self._lock:
            self._items = self._load_from_file()
            self._last_id = max(self._last_id, self._max_id(self._items))

    @property
    def _type_name(self) -> str:
        return self.entity_type.__name__

    @staticmethod
    def _max_id(items: List[T]) -> int:
        return max((item.id for item in items), default=0)

    def _next_id(self) -> int:
        return max(self._last_id, self._max_id(self._items)) + 1

    @staticmethod
    def _index_of(id: int, items: List[T]) -> Optional[int]:
        for index, item in enumerate(items):
            if item.id == id:
                return index
        return None

    def _load_from_file(self) -> List[T]:
        """Load collection from the backing file.

        A missing or malformed file yields an empty collection.

        Raises:
            StoreUnavailableError: If the file exists but cannot be read
        """
        try:
            with open(self.file_path, encoding='utf-8') as f:
                data = json.load(f, parse_constant=_reject_constant)
        except FileNotFoundError:
            logger.info("No store at %s, starting empty", self.file_path)
            return []
        except ValueError as e:
            logger.warning("Malformed store %s, treating as empty: %s", self.file_path, e)
            return []
        except OSError as e:
            raise StoreUnavailableError(f"Cannot read {self.file_path}: {e}") from e

        if not isinstance(data, list):
            logger.warning(
                "Store %s holds %s instead of a list, treating as empty",
                self.file_path, type(data).__name__,
            )
            return []

        try:
            items = [self.entity_type.from_dict(entry) for entry in data]
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Malformed %s entry in %s, treating as empty: %s",
                           self._type_name, self.file_path, e)
            return []

        logger.info("Loaded %d %s record(s) from %s", len(items), self._type_name, self.file_path)
        return items

    def _save_to_file(self, items: List[T]) -> None:
        """Write the whole collection to a temp file and rename it over the store.

        Raises:
            WriteFailedError: If any step fails; the previous file is untouched
        """
        payload = [item.to_dict() for item in items]
        tmp_path: Optional[Path] = None

        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.file_path.parent,
                prefix=f".{self.file_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = Path(tmp.name)
                json.dump(payload, tmp, indent=2, allow_nan=False)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_path, self.file_path)
        except (OSError, ValueError) as e:
            logger.error("Failed to write %s: %s", self.file_path, e)
            raise WriteFailedError(f"Failed to write {self.file_path}: {e}") from e
        finally:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
