"""Deserializer entry point: consume a payload, then pull out the root items."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from jsonapi_deserializer.schemas.resource import JSONAPIDocument

from .errors import MultipleRootItems
from .index import EntityIndex
from .options import DeserializerOptions
from .registry import DeserializeFunc, ItemDeserializer, ItemDeserializerRegistry
from .resolver import SKIPPED, RelationshipResolver

logger = logging.getLogger(__name__)


class Deserializer:
    """Deserialize JSON:API payloads into object graphs.

    Register one item deserializer per entity type, then call :meth:`consume`
    with a parsed payload and read the result with :meth:`get_root_item` or
    :meth:`get_root_items`. ``consume`` replaces the entity index of the
    previous payload.

    An instance keeps per-payload state and is not safe to share between
    threads; use one instance per payload or guard it with a lock.

    In strict mode (the default) an error raised while deserializing any root
    item, including errors from nested relationships, propagates out of
    ``get_root_items`` and no partial result is returned.
    """

    def __init__(
        self,
        options: DeserializerOptions | Mapping[str, Any] | None = None,
        **option_kwargs: Any,
    ) -> None:
        self.options = DeserializerOptions.coerce(options, **option_kwargs)
        self.registry = ItemDeserializerRegistry()
        self._index = EntityIndex()
        self._resolver = RelationshipResolver(self._index, self.registry, self.options)

    def register_item_deserializer(self, item_deserializer: ItemDeserializer[Any]) -> Deserializer:
        """Register an item deserializer under its own type."""
        type_ = item_deserializer.get_type()
        if not type_:
            raise ValueError(f"{item_deserializer!r} does not declare an entity type.")
        self.registry.register(type_, item_deserializer)
        return self

    def register(
        self, type_: str, deserializer: ItemDeserializer[Any] | DeserializeFunc
    ) -> Deserializer:
        """Register a deserializer or ``(item, resolver)`` callable for ``type_``."""
        self.registry.register(type_, deserializer)
        return self

    def consume(self, payload: Mapping[str, Any] | JSONAPIDocument) -> Deserializer:
        """Index a parsed JSON:API payload; it must contain the key ``data``."""
        if isinstance(payload, JSONAPIDocument):
            payload = payload.model_dump(exclude_unset=True)
        self._index = EntityIndex.build(payload)
        self._resolver = RelationshipResolver(self._index, self.registry, self.options)
        return self

    def get_root_item(self) -> Any:
        """Return the single root item with its relationships embedded, or None."""
        self._resolver.reset()
        roots = self._index.root_items()
        if not roots:
            return None
        if len(roots) > 1:
            raise MultipleRootItems(len(roots))

        value = self._resolver.deserialize_item(roots[0])
        return None if value is SKIPPED else value

    def get_root_items(self) -> list[Any]:
        """Return all root items, in payload order, with relationships embedded."""
        self._resolver.reset()
        items = []
        for root in self._index.root_items():
            value = self._resolver.deserialize_item(root)
            if value is not SKIPPED:
                items.append(value)
        return items

    def get_skipped_entities(self) -> list[str]:
        """Return the types skipped during the last root item call."""
        return list(self._resolver.skipped_types)


def get_deserializer(
    item_deserializers: Iterable[ItemDeserializer[Any]],
    options: DeserializerOptions | Mapping[str, Any] | None = None,
    **option_kwargs: Any,
) -> Deserializer:
    """Return a Deserializer with the given item deserializers registered."""
    deserializer = Deserializer(options, **option_kwargs)
    for item_deserializer in item_deserializers:
        deserializer.register_item_deserializer(item_deserializer)
    logger.debug("Registered item deserializers for %s", deserializer.registry.types())
    return deserializer
