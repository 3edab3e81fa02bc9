"""In-memory DocumentStore: a dict keyed by document id, searched in insertion order"""

import logging
from dataclasses import dataclass, field
from typing import Callable

from docstore.core.utils.ids import new_id
from docstore.crud.filters import is_empty_request, matches
from docstore.crud.models import Document, SearchRequest
from docstore.crud.repo import DocumentRepo
from docstore.errors import InvalidArgument


logger = logging.getLogger(__name__)


@dataclass
class DocumentStore(DocumentRepo):
    """Single-threaded; an overwrite keeps the document's original position in search results."""
    id_factory: Callable[[], str] = new_id
    _docs: dict[str, Document] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs

    def ids(self) -> list[str]:
        """Return stored ids in insertion order."""
        return list(self._docs)

    def save(self, document: Document) -> Document:
        """Insert or overwrite by id, generating an id when it is None or empty.

        The created timestamp is stored exactly as given.
        """
        if document is None:
            raise InvalidArgument("Document should not be None")

        if not document.id:
            document = document.model_copy(update={"id": self.id_factory()})
            logger.debug("Assigned id %s", document.id)

        action = "Replaced" if document.id in self._docs else "Inserted"
        self._docs[document.id] = document
        logger.debug("%s document %s", action, document.id)
        return self._docs[document.id]

    def find_by_id(self, doc_id: str) -> Document | None:
        """Return the document with the given id, or None if not found."""
        if not doc_id:
            raise InvalidArgument("Id should not be empty")
        return self._docs.get(doc_id)

    def search(self, request: SearchRequest) -> list[Document]:
        """Return documents matching every criterion set on the request.

        A request with no criteria at all matches nothing.
        """
        if request is None:
            raise InvalidArgument("Request should not be None")

        if is_empty_request(request):
            logger.debug("Empty search request; returning no documents")
            return []

        results = [doc for doc in self._docs.values() if matches(request, doc)]
        logger.debug("Search matched %d of %d documents", len(results), len(self._docs))
        return results
