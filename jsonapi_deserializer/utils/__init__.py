"""Utilities for JSON:API headers."""

from .content_negotiation import (
    JSONAPI_MEDIA_TYPE,
    is_jsonapi_request_media_type,
    parse_jsonapi_media_type,
)

__all__ = ["JSONAPI_MEDIA_TYPE", "is_jsonapi_request_media_type", "parse_jsonapi_media_type"]
