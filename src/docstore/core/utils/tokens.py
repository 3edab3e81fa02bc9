"""Tokenizers used by the content and title filters"""


def content_tokens(content: str) -> list[str]:
    """Split content on runs of whitespace."""
    return content.split()


def title_words(title: str) -> list[str]:
    """Split a title on single spaces; consecutive spaces yield empty words."""
    return title.split(" ")
