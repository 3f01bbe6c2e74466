"""Relationship resolution over an entity index."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from jsonapi_deserializer.schemas.resource import JSONAPIResourceIdentifier

from .errors import UnregisteredType, UnresolvedRelationship, WrongRelationshipShape
from .index import EntityIndex, Item
from .options import DeserializerOptions
from .registry import ItemDeserializerRegistry

logger = logging.getLogger(__name__)

_ABSENT = object()
SKIPPED = object()


class RelationshipResolver:
    """Resolve relationship references into deserialized values.

    An instance is handed to every item deserializer. Resolving a reference
    looks up the raw item in the included store and invokes the deserializer
    registered for its type, which may in turn resolve its own relationships.
    Recursion depth follows the depth of the object graph; reference cycles
    are not detected and end in ``RecursionError``.

    With ``skip_unknown_entities`` enabled, references missing from the
    included store resolve to None (to-one) or are left out (to-many), and
    entities of unregistered types are skipped and their type recorded in
    :attr:`skipped_types`.
    """

    def __init__(
        self,
        index: EntityIndex,
        registry: ItemDeserializerRegistry,
        options: DeserializerOptions,
    ) -> None:
        self.index = index
        self.registry = registry
        self.options = options
        self.skipped_types: list[str] = []

    @property
    def lenient(self) -> bool:
        return self.options.skip_unknown_entities

    def reset(self) -> None:
        """Forget the types skipped so far."""
        self.skipped_types = []

    def deserialize_item(self, item: Item) -> Any:
        """Deserialize ``item`` with the deserializer registered for its type.

        Returns :data:`SKIPPED` when the type is unregistered and unknown
        entities are skipped.
        """
        type_ = item["type"]
        try:
            deserializer = self.registry.resolve(type_)
        except UnregisteredType:
            if not self.lenient:
                raise
            self._record_skipped(type_)
            return SKIPPED
        return deserializer.deserialize(item, self)

    def deserialize_relationship(self, item: Item, name: str) -> Any:
        """Return the deserialized entity of a to-one relationship, or None."""
        data = self._relationship_data(item, name)
        if data is _ABSENT or data is None:
            return None
        if isinstance(data, list):
            raise WrongRelationshipShape(name, "to-one")
        value = self._resolve_reference(item, name, data)
        return None if value is SKIPPED else value

    def deserialize_relationships(self, item: Item, name: str) -> list[Any]:
        """Return the deserialized entities of a to-many relationship in order."""
        data = self._relationship_data(item, name)
        if data is _ABSENT or data is None:
            return []
        if not isinstance(data, list):
            raise WrongRelationshipShape(name, "to-many")
        values = []
        for reference in data:
            value = self._resolve_reference(item, name, reference)
            if value is not SKIPPED:
                values.append(value)
        return values

    def is_relationship_present(self, item: Item, name: str) -> bool:
        """Return True if the relationship has data and every reference resolves."""
        data = self._relationship_data(item, name)
        if data is _ABSENT or data is None:
            return False
        references = data if isinstance(data, list) else [data]
        pairs = []
        for reference in references:
            try:
                identifier = JSONAPIResourceIdentifier.model_validate(reference)
            except ValidationError:
                return False
            pairs.append((identifier.type, identifier.id))
        return self.index.has_included(pairs)

    def _relationship_data(self, item: Item, name: str) -> Any:
        relationships = item.get("relationships")
        if not relationships:
            return _ABSENT
        relationship = relationships.get(name)
        if not isinstance(relationship, Mapping):
            return _ABSENT
        return relationship.get("data", _ABSENT)

    def _resolve_reference(self, item: Item, name: str, reference: Any) -> Any:
        try:
            identifier = JSONAPIResourceIdentifier.model_validate(reference)
        except ValidationError as exc:
            raise WrongRelationshipShape(
                name,
                "resource identifier",
                f"Relationship {name!r} of entity {{id: {item.get('id')!r}, "
                f"type: {item.get('type')!r}}} holds an invalid resource identifier: "
                f"{reference!r}",
            ) from exc

        related = self.index.get_included(identifier.type, identifier.id)
        if related is None:
            if not self.lenient:
                raise UnresolvedRelationship(
                    name, item.get("id"), item.get("type"), identifier.type, identifier.id
                )
            logger.debug(
                "Relationship %r of %s/%s points at missing entity %s/%s",
                name,
                item.get("type"),
                item.get("id"),
                identifier.type,
                identifier.id,
            )
            return SKIPPED
        return self.deserialize_item(related)

    def _record_skipped(self, type_: str) -> None:
        if type_ not in self.skipped_types:
            logger.debug("Skipping entities of unregistered type %r", type_)
            self.skipped_types.append(type_)
