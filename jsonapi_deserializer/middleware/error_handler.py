"""ASGI middleware rendering deserialization errors as JSON:API error documents."""

import logging
from typing import Any

from starlette.responses import JSONResponse

from jsonapi_deserializer.core.errors import DeserializationError, error_document
from jsonapi_deserializer.schemas.resource import JSONAPIErrorDocument
from jsonapi_deserializer.utils.content_negotiation import JSONAPI_MEDIA_TYPE

logger = logging.getLogger(__name__)


class DeserializationErrorMiddleware:
    """Convert DeserializationError raised downstream into an error response.

    Other exceptions propagate unchanged.
    """

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Run the downstream app and serialize deserialization failures."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except DeserializationError as exc:
            logger.info("Rejecting JSON:API request body: %s", exc)
            document = JSONAPIErrorDocument.model_validate(error_document([exc]))
            response = JSONResponse(
                document.model_dump(exclude_none=True),
                status_code=int(exc.status),
                media_type=JSONAPI_MEDIA_TYPE,
            )
            await response(scope, receive, send)
