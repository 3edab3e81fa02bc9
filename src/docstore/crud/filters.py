"""Search predicates: each returns True when its criterion is None"""

from datetime import datetime
from typing import Optional

from docstore.core.utils.tokens import content_tokens, title_words
from docstore.crud.models import Author, Document, SearchRequest, as_utc


def is_empty_request(request: SearchRequest) -> bool:
    """Return True when none of the five criteria is set."""
    return all(
        value is None for value in (
            request.title_prefixes,
            request.contains_contents,
            request.author_ids,
            request.created_from,
            request.created_to,
        )
    )


def matches_date(
    created_from: Optional[datetime],
    created_to: Optional[datetime],
    created: datetime,
    ) -> bool:
    """Both bounds are exclusive; a document created exactly on a bound does not match.

    Naive datetimes are read as UTC.
    """
    created, created_from, created_to = as_utc(created), as_utc(created_from), as_utc(created_to)
    if created_from is not None and not created > created_from:
        return False
    if created_to is not None and not created < created_to:
        return False
    return True


def matches_author(author_ids: Optional[list[str]], author: Optional[Author]) -> bool:
    if author_ids is None:
        return True
    if author is None or author.id is None:
        return False
    return author.id in author_ids


def matches_content(contains_contents: Optional[list[str]], content: Optional[str]) -> bool:
    """Exact, case-sensitive membership of any whitespace-delimited token."""
    if contains_contents is None:
        return True
    if content is None:
        return False
    wanted = set(contains_contents)
    return any(token in wanted for token in content_tokens(content))


def matches_title(title_prefixes: Optional[list[str]], title: Optional[str]) -> bool:
    """Any space-separated title word starts with any of the prefixes (case-sensitive)."""
    if title_prefixes is None:
        return True
    if title is None:
        return False
    prefixes = tuple(title_prefixes)
    # str.startswith(()) is False, so an empty prefix list matches nothing
    return any(word.startswith(prefixes) for word in title_words(title))


def matches(request: SearchRequest, doc: Document) -> bool:
    """Conjunction of the date, author, content, and title predicates."""
    return (
        matches_date(request.created_from, request.created_to, doc.created)
        and matches_author(request.author_ids, doc.author)
        and matches_content(request.contains_contents, doc.content)
        and matches_title(request.title_prefixes, doc.title)
    )
