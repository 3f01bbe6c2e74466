"""Deserialization errors and their JSON:API error object form."""

from __future__ import annotations

from typing import Any, Iterable


class DeserializationError(Exception):
    """Base class for errors raised while deserializing a JSON:API payload."""

    status: str = "400"
    code: str = "deserialization_error"
    title: str = "Deserialization Error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def error_meta(self) -> dict[str, Any] | None:
        """Return machine-readable details for the error object."""
        return None

    def to_error_object(self) -> dict[str, Any]:
        """Return a JSON:API error object describing this error."""
        error: dict[str, Any] = {
            "status": self.status,
            "code": self.code,
            "title": self.title,
            "detail": self.detail,
        }
        meta = self.error_meta()
        if meta is not None:
            error["meta"] = meta
        return error


class InvalidPayload(DeserializationError, ValueError):
    """The payload is not a JSON:API document with a ``data`` member."""

    code = "invalid_payload"
    title = "Invalid Payload"


class MultipleRootItems(DeserializationError):
    """A single root item was requested but the payload holds several."""

    code = "multiple_root_items"
    title = "Multiple Root Items"

    def __init__(self, count: int) -> None:
        super().__init__(
            f"A singular JSON:API document can only have up to one item, {count} items found."
        )
        self.count = count

    def error_meta(self) -> dict[str, Any] | None:
        return {"count": self.count}


class UnregisteredType(DeserializationError, LookupError):
    """No item deserializer is registered for an entity type."""

    status = "422"
    code = "unregistered_type"
    title = "Unregistered Type"

    def __init__(self, type_: str) -> None:
        super().__init__(f"An item deserializer for type {type_!r} is not registered.")
        self.type_ = type_

    def error_meta(self) -> dict[str, Any] | None:
        return {"type": self.type_}


class UnresolvedRelationship(DeserializationError, LookupError):
    """A relationship references an entity missing from ``included``."""

    code = "unresolved_relationship"
    title = "Unresolved Relationship"

    def __init__(
        self,
        relationship: str,
        item_id: str,
        item_type: str,
        related_type: str,
        related_id: str,
    ) -> None:
        super().__init__(
            f"Failed to fetch relationship {relationship!r} for entity "
            f"{{id: {item_id!r}, type: {item_type!r}}}: entity "
            f"{{id: {related_id!r}, type: {related_type!r}}} not found."
        )
        self.relationship = relationship
        self.item_id = item_id
        self.item_type = item_type
        self.related_type = related_type
        self.related_id = related_id

    def error_meta(self) -> dict[str, Any] | None:
        return {
            "relationship": self.relationship,
            "item": {"type": self.item_type, "id": self.item_id},
            "related": {"type": self.related_type, "id": self.related_id},
        }


class WrongRelationshipShape(DeserializationError, TypeError):
    """A relationship's data does not have the shape the accessor expects."""

    code = "wrong_relationship_shape"
    title = "Wrong Relationship Shape"

    def __init__(self, relationship: str, expected: str, detail: str | None = None) -> None:
        super().__init__(
            detail
            or f"Relationship {relationship!r} is not a {expected} relationship."
        )
        self.relationship = relationship
        self.expected = expected

    def error_meta(self) -> dict[str, Any] | None:
        return {"relationship": self.relationship, "expected": self.expected}


def error_document(errors: Iterable[DeserializationError]) -> dict[str, Any]:
    """Return a JSON:API document with an errors array."""
    objects = [error.to_error_object() for error in errors]
    if not objects:
        raise ValueError("Error document must include at least one error.")
    return {"errors": objects}
