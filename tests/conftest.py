"""Shared fixtures for the deserializer tests."""

import pytest

from jsonapi_deserializer import get_deserializer
from tests.models import (
    ArticleDeserializer,
    CommentDeserializer,
    FileDeserializer,
    FolderDeserializer,
    PersonDeserializer,
)


@pytest.fixture
def article_deserializer():
    """Deserializer for articles, people and comments."""
    return get_deserializer([ArticleDeserializer(), PersonDeserializer(), CommentDeserializer()])


@pytest.fixture
def folder_deserializer():
    """Deserializer for folders and files."""
    return get_deserializer([FolderDeserializer(), FileDeserializer()])


@pytest.fixture
def lenient_folder_deserializer():
    """Folder deserializer that skips unknown entities."""
    return get_deserializer([FolderDeserializer(), FileDeserializer()], skip_unknown_entities=True)
