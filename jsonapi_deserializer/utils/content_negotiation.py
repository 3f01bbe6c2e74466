"""Helpers for JSON:API content negotiation."""

from __future__ import annotations

from typing import Any

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


def _parse_uri_list(value: str) -> list[str]:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        value = value[1:-1]
    return value.split()


def parse_jsonapi_media_type(content_type: str) -> dict[str, Any]:
    """Split a Content-Type header into media type, ext/profile URIs and other params."""
    media_type, _, raw_params = content_type.partition(";")
    params: dict[str, Any] = {
        "media_type": media_type.strip().lower(),
        "ext": [],
        "profile": [],
    }
    for param in raw_params.split(";"):
        name, sep, raw_value = param.partition("=")
        if not sep:
            continue
        name = name.strip().lower()
        if name in ("ext", "profile"):
            params[name] = _parse_uri_list(raw_value)
        else:
            params.setdefault("other_params", {})[name] = raw_value.strip()
    return params


def is_jsonapi_request_media_type(content_type: str) -> bool:
    """Return True if a request body may be read as a JSON:API document.

    The media type must be ``application/vnd.api+json`` with no parameters
    other than ``ext`` and ``profile``.
    """
    parsed = parse_jsonapi_media_type(content_type)
    return parsed["media_type"] == JSONAPI_MEDIA_TYPE and not parsed.get("other_params")
