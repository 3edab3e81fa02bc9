"""Caller-contract errors raised by the document store"""


class InvalidArgument(ValueError):
    """A required argument was None or empty."""
