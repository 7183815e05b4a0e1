"""
Typed repositories over the key-value store.
"""

from typing import Callable, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from campaign_manager.shared.store import KeyValueStore

ModelT = TypeVar("ModelT", bound=BaseModel)


class EntityRepository(Generic[ModelT]):
    """get / get_all / insert for one entity kind.

    Subclasses set ``namespace`` and ``model``. Records are keyed by the
    entity's ``id`` field.
    """

    namespace: ClassVar[str]
    model: ClassVar[type[BaseModel]]

    def __init__(self, store: KeyValueStore) -> None:
        """Initialize repository with a record store.

        Args:
            store: Key-value store shared by all repositories.
        """
        self._store = store

    def get(self, entity_id: str) -> ModelT | None:
        """Get an entity by ID.

        Args:
            entity_id: Entity identifier.

        Returns:
            Entity if found, None otherwise.
        """
        record = self._store.get(self.namespace, entity_id)
        if record is None:
            return None
        return self.model.model_validate(record)  # type: ignore[return-value]

    def get_all(self) -> list[ModelT]:
        """Get all entities in insertion order."""
        return [
            self.model.model_validate(record)  # type: ignore[misc]
            for record in self._store.values(self.namespace)
        ]

    def insert(self, entity: ModelT) -> ModelT:
        """Insert or replace an entity under its ID."""
        self._store.insert(
            self.namespace,
            entity.id,  # type: ignore[attr-defined]
            entity.model_dump(mode="json"),
        )
        return entity

    def filter(self, predicate: Callable[[ModelT], bool]) -> list[ModelT]:
        """Linear scan returning the entities matching predicate."""
        return [entity for entity in self.get_all() if predicate(entity)]

    def find_first(self, predicate: Callable[[ModelT], bool]) -> ModelT | None:
        """Linear scan returning the first matching entity, or None."""
        for entity in self.get_all():
            if predicate(entity):
                return entity
        return None


class CampaignScopedRepository(EntityRepository[ModelT]):
    """Repository for entities carrying a ``campaign_id`` reference."""

    def list_by_campaign(self, campaign_id: str) -> list[ModelT]:
        """Get all entities attached to a campaign, in insertion order."""
        return self.filter(lambda e: e.campaign_id == campaign_id)  # type: ignore[attr-defined]
