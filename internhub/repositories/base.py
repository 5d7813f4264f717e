"""
Base repository over one collection of the store.

Every operation follows the same pattern: read the whole array, change it
in memory, write the whole array back.
"""

from typing import Any, Generic, Optional, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from internhub.exceptions import InvalidUpdateError, NotFoundError
from internhub.store import CollectionStore, new_id

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


class CollectionRepository(Generic[T]):
    """CRUD for one entity type. Subclasses set key, model, id_prefix and entity_name."""

    key: str
    model: type[T]
    id_prefix: str
    entity_name: str
    prepend: bool = False           # True = newest first in the stored array

    def __init__(self, store: CollectionStore):
        self.store = store

    # Loading / saving

    def _load(self) -> list[T]:
        items = []
        for raw in self.store.get_collection(self.key):
            try:
                items.append(self.model.model_validate(raw))
            except ValidationError as e:
                # Dropped here, and gone for good on the next write
                logger.warning("invalid_record_skipped", key=self.key, id=raw.get("id") if isinstance(raw, dict) else None,
                               errors=e.error_count())
        return items

    def _save(self, items: list[T]) -> None:
        self.store.set_collection(
            self.key, [item.model_dump(mode="json", by_alias=True, exclude_none=True) for item in items]
        )

    def _new_id(self) -> str:
        return new_id(self.id_prefix)

    def _insert(self, item: T) -> T:
        items = self._load()
        if self.prepend:
            items.insert(0, item)
        else:
            items.append(item)
        self._save(items)
        logger.info("entity_created", entity=self.entity_name, id=item.id)
        return item

    # Public API

    def list(self) -> list[T]:
        return self._load()

    def find(self, entity_id: str) -> Optional[T]:
        return next((item for item in self._load() if item.id == entity_id), None)

    def get(self, entity_id: str) -> T:
        item = self.find(entity_id)
        if item is None:
            raise NotFoundError(self.entity_name, entity_id)
        return item

    def update(self, entity_id: str, patch: dict[str, Any]) -> T:
        """Shallow-merge patch (snake_case or camelCase keys) over the stored record."""
        items = self._load()
        for index, item in enumerate(items):
            if item.id != entity_id:
                continue
            merged = item.model_dump()
            merged.update({self._field_name(k): v for k, v in patch.items()})
            merged["id"] = item.id
            try:
                updated = self.model.model_validate(merged)
            except ValidationError as e:
                fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
                logger.warning("update_rejected", entity=self.entity_name, id=entity_id, fields=fields)
                raise InvalidUpdateError(self.entity_name, entity_id, fields) from e
            items[index] = updated
            self._save(items)
            return updated

        logger.warning("update_missing_entity", entity=self.entity_name, id=entity_id)
        raise NotFoundError(self.entity_name, entity_id)

    def remove(self, entity_id: str) -> None:
        """Delete by id. Deleting something that is already gone is fine."""
        items = self._load()
        remaining = [item for item in items if item.id != entity_id]
        if len(remaining) == len(items):
            return
        self._save(remaining)
        logger.info("entity_removed", entity=self.entity_name, id=entity_id)

    def _field_name(self, key: str) -> str:
        """Map a camelCase alias to its Python field name; other keys pass through."""
        for name, field in self.model.model_fields.items():
            if field.alias == key:
                return name
        return key
