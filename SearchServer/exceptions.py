"""
Exceptions raised by the search server.
Every error is raised before any index or store mutation takes place.
"""


class SearchServerError(Exception):
    """Base class for all search server errors."""


class InvalidStopWordError(SearchServerError, ValueError):
    """A stop word contains a control character."""


class InvalidDocumentIdError(SearchServerError, ValueError):
    """Document id is negative or already in use."""


class InvalidCharacterError(SearchServerError, ValueError):
    """Document text or a query word contains a control character."""


class EmptyQueryError(SearchServerError, ValueError):
    """Query string has no words."""


class MalformedQueryTermError(SearchServerError, ValueError):
    """Query word is a bare '-' or starts with '--'."""


class DocumentNotFoundError(SearchServerError, KeyError):
    """No document with the requested id."""

    def __str__(self):
        # KeyError repr()s its argument, keep the message readable
        return str(self.args[0]) if self.args else ""


class PositionOutOfRangeError(SearchServerError, IndexError):
    """No document at the requested position."""
