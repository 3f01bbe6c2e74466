"""Item deserializer base class and the per-type registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, Iterator, Mapping, TypeVar

from .errors import UnregisteredType

if TYPE_CHECKING:
    from .resolver import RelationshipResolver

T = TypeVar("T")

DeserializeFunc = Callable[[Mapping[str, Any], "RelationshipResolver"], Any]


class ItemDeserializer(Generic[T]):
    """Turn a raw JSON:API resource object of one type into an application value.

    Subclasses set ``Meta.type_`` and implement :meth:`deserialize`. Related
    entities are pulled in through the resolver that is passed along:

    - ``resolver.deserialize_relationship(item, name)`` for to-one relationships
    - ``resolver.deserialize_relationships(item, name)`` for to-many relationships
    - ``resolver.is_relationship_present(item, name)`` to check before resolving
    """

    class Meta:
        """Deserializer metadata (entity type)."""

        type_: str = ""

    def get_type(self) -> str:
        """Return the entity type this deserializer handles."""
        return self.Meta.type_

    def deserialize(self, item: Mapping[str, Any], resolver: RelationshipResolver) -> T:
        """Return the value deserialized from ``item``; must not mutate it."""
        raise NotImplementedError


class FunctionItemDeserializer(ItemDeserializer[Any]):
    """Adapt a plain ``(item, resolver) -> value`` callable."""

    def __init__(self, type_: str, func: DeserializeFunc) -> None:
        self.type_ = type_
        self.func = func

    def get_type(self) -> str:
        return self.type_

    def deserialize(self, item: Mapping[str, Any], resolver: RelationshipResolver) -> Any:
        return self.func(item, resolver)

    def __repr__(self) -> str:
        return f"FunctionItemDeserializer({self.type_!r}, {self.func!r})"


class ItemDeserializerRegistry:
    """Mapping from entity type name to its item deserializer."""

    def __init__(self) -> None:
        self._deserializers: dict[str, ItemDeserializer[Any]] = {}

    def register(
        self, type_: str, deserializer: ItemDeserializer[Any] | DeserializeFunc
    ) -> None:
        """Register a deserializer for ``type_``, replacing any previous one."""
        if not isinstance(deserializer, ItemDeserializer):
            if not callable(deserializer):
                raise TypeError(
                    f"Deserializer for {type_!r} must be an ItemDeserializer or a callable."
                )
            deserializer = FunctionItemDeserializer(type_, deserializer)
        self._deserializers[type_] = deserializer

    def get(self, type_: str) -> ItemDeserializer[Any] | None:
        """Return the deserializer for ``type_`` or None."""
        return self._deserializers.get(type_)

    def resolve(self, type_: str) -> ItemDeserializer[Any]:
        """Return the deserializer for ``type_`` or raise UnregisteredType."""
        deserializer = self._deserializers.get(type_)
        if deserializer is None:
            raise UnregisteredType(type_)
        return deserializer

    def types(self) -> list[str]:
        return list(self._deserializers)

    def __contains__(self, type_: object) -> bool:
        return type_ in self._deserializers

    def __iter__(self) -> Iterator[str]:
        return iter(self._deserializers)

    def __len__(self) -> int:
        return len(self._deserializers)
