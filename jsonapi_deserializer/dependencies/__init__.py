"""FastAPI dependencies for JSON:API request bodies."""

from .body import JSONAPIBody

__all__ = ["JSONAPIBody"]
