"""Middleware for JSON:API request handling."""

from .error_handler import DeserializationErrorMiddleware

__all__ = ["DeserializationErrorMiddleware"]
