"""Core JSON:API deserialization machinery."""

from .deserializer import Deserializer, get_deserializer
from .errors import (
    DeserializationError,
    InvalidPayload,
    MultipleRootItems,
    UnregisteredType,
    UnresolvedRelationship,
    WrongRelationshipShape,
    error_document,
)
from .index import EntityIndex, RootEntry
from .options import DeserializerOptions
from .registry import FunctionItemDeserializer, ItemDeserializer, ItemDeserializerRegistry
from .resolver import RelationshipResolver

__all__ = [
    "DeserializationError",
    "Deserializer",
    "DeserializerOptions",
    "EntityIndex",
    "FunctionItemDeserializer",
    "InvalidPayload",
    "ItemDeserializer",
    "ItemDeserializerRegistry",
    "MultipleRootItems",
    "RelationshipResolver",
    "RootEntry",
    "UnregisteredType",
    "UnresolvedRelationship",
    "WrongRelationshipShape",
    "error_document",
    "get_deserializer",
]
