"""Deserialize JSON:API v1.1 documents into object graphs."""

from .core.deserializer import Deserializer, get_deserializer
from .core.errors import (
    DeserializationError,
    InvalidPayload,
    MultipleRootItems,
    UnregisteredType,
    UnresolvedRelationship,
    WrongRelationshipShape,
)
from .core.options import DeserializerOptions
from .core.registry import ItemDeserializer
from .core.resolver import RelationshipResolver

__all__ = [
    "DeserializationError",
    "Deserializer",
    "DeserializerOptions",
    "InvalidPayload",
    "ItemDeserializer",
    "MultipleRootItems",
    "RelationshipResolver",
    "UnregisteredType",
    "UnresolvedRelationship",
    "WrongRelationshipShape",
    "get_deserializer",
]
