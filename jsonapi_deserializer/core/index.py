"""Entity index built from a single JSON:API payload."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from .errors import InvalidPayload

logger = logging.getLogger(__name__)

Item = Mapping[str, Any]


class RootEntry:
    """A primary data item and its first-seen position in ``data``."""

    def __init__(self, item: Item, position: int) -> None:
        self.item = item
        self.position = position

    def __repr__(self) -> str:
        return f"RootEntry(item={self.item!r}, position={self.position})"


class EntityIndex:
    """Root items offered for output plus the included store used for lookups.

    Root items are keyed by id. A duplicate id replaces the stored item but
    keeps the position of its first occurrence, so the entity is emitted once,
    at the place it first appeared, with the content it last had.

    The included store only holds items from ``included``. Root items are never
    added to it, so a relationship pointing at a root item does not resolve
    unless the same item is also side-loaded.
    """

    def __init__(self) -> None:
        self.roots: dict[str, RootEntry] = {}
        self.included: dict[str, dict[str, Item]] = {}

    @classmethod
    def build(cls, payload: Mapping[str, Any]) -> EntityIndex:
        """Index the ``data`` and ``included`` members of a payload."""
        if not isinstance(payload, Mapping):
            raise InvalidPayload(
                f"JSON:API payload must be an object, got {type(payload).__name__}."
            )
        data = payload.get("data")
        if not data and not isinstance(data, list):
            raise InvalidPayload("JSON:API payload must contain key 'data'.")

        index = cls()
        items = data if isinstance(data, list) else [data]
        for position, item in enumerate(items):
            index.add_root(item, position)

        included = payload.get("included")
        if isinstance(included, list):
            for item in included:
                index.add_included(item)

        logger.debug(
            "Indexed %d root item(s) and %d included item(s)",
            len(index.roots),
            sum(len(store) for store in index.included.values()),
        )
        return index

    def add_root(self, item: Item, position: int) -> None:
        """Store a root item, keeping the first-seen position for duplicate ids."""
        if not isinstance(item, Mapping):
            raise InvalidPayload(
                f"JSON:API resource object must be an object, got {type(item).__name__}."
            )
        id_ = item.get("id")
        existing = self.roots.get(id_)
        if existing is not None:
            logger.debug("Duplicate root id %r replaces earlier occurrence", id_)
            existing.item = item
            return
        self.roots[id_] = RootEntry(item, position)

    def add_included(self, item: Item) -> None:
        """Store an included item; a later duplicate overwrites an earlier one."""
        self.included.setdefault(item["type"], {})[item["id"]] = item

    def root_items(self) -> list[Item]:
        """Return root items in their original payload order."""
        entries = sorted(self.roots.values(), key=lambda entry: entry.position)
        return [entry.item for entry in entries]

    def get_included(self, type_: str, id_: str) -> Item | None:
        """Return the included item for ``(type_, id_)`` or None."""
        return self.included.get(type_, {}).get(id_)

    def has_included(self, references: Iterable[tuple[str, str]]) -> bool:
        """Return True if every ``(type, id)`` pair is in the included store."""
        return all(self.get_included(type_, id_) is not None for type_, id_ in references)

    def __len__(self) -> int:
        return len(self.roots)
