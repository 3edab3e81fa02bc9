"""Shared fixtures for crud unit tests"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from docstore.crud.memory_repo import DocumentStore
from docstore.crud.models import Author, Document


@pytest.fixture(name="store")
def store_fixture():
    """Empty store with random ids."""
    return DocumentStore()


@pytest.fixture(name="now")
def now_fixture():
    return datetime.now(timezone.utc)


@pytest.fixture(name="make_doc")
def make_doc_fixture(now):
    """Factory for Documents with sensible defaults."""
    def _make(
        title: str = "Sample Title",
        content: str = "Sample Content",
        author_id: str = None,
        created: datetime = None,
        doc_id: str = None,
        ) -> Document:
        return Document(
            id=doc_id,
            title=title,
            content=content,
            author=Author(id=author_id or str(uuid4()), name="Author Name"),
            created=created or now,
        )
    return _make
