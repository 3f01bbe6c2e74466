"""FastAPI dependency that deserializes a JSON:API request document."""

from __future__ import annotations

from typing import Any, Callable

from fastapi import HTTPException, Request

from jsonapi_deserializer.core.deserializer import Deserializer
from jsonapi_deserializer.core.errors import InvalidPayload
from jsonapi_deserializer.utils.content_negotiation import is_jsonapi_request_media_type


class JSONAPIBody:
    """Dependency returning the object graph of the request's JSON:API body.

    ``deserializer_factory`` is called once per request so that no deserializer
    state is shared between concurrent requests. With ``many=True`` the
    dependency returns ``get_root_items()``, otherwise ``get_root_item()``.
    Deserialization errors propagate; install
    :class:`~jsonapi_deserializer.middleware.DeserializationErrorMiddleware` to
    render them as JSON:API error documents.
    """

    def __init__(self, deserializer_factory: Callable[[], Deserializer], *, many: bool = False) -> None:
        self.deserializer_factory = deserializer_factory
        self.many = many

    async def __call__(self, request: Request) -> Any:
        """Validate the media type, parse the body and deserialize it."""
        if not is_jsonapi_request_media_type(request.headers.get("content-type", "")):
            raise HTTPException(status_code=415, detail="Unsupported Media Type")
        try:
            payload = await request.json()
        except ValueError as exc:
            raise InvalidPayload("Request body is not valid JSON.") from exc

        deserializer = self.deserializer_factory().consume(payload)
        if self.many:
            return deserializer.get_root_items()
        return deserializer.get_root_item()
