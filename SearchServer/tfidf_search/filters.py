"""
Document filters applied to every candidate document during ranking.
A filter is called with (document_id, status, rating) and returns a bool.
"""
from abc import ABC, abstractmethod
from typing import Callable, Union

from ..preprocessing.document import DocumentStatus

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


class DocumentFilter(ABC):
    @abstractmethod
    def __call__(self, document_id: int, status: DocumentStatus, rating: int) -> bool:
        raise NotImplementedError()


class StatusFilter(DocumentFilter):
    """Accepts documents with the given status."""

    def __init__(self, status: DocumentStatus):
        self.status = status

    def __call__(self, document_id: int, status: DocumentStatus, rating: int) -> bool:
        return status == self.status

    def __repr__(self):
        return f"StatusFilter({self.status.name})"


class PredicateFilter(DocumentFilter):
    """Wraps an arbitrary predicate function."""

    def __init__(self, predicate: DocumentPredicate):
        self.predicate = predicate

    def __call__(self, document_id: int, status: DocumentStatus, rating: int) -> bool:
        return bool(self.predicate(document_id, status, rating))

    def __repr__(self):
        return f"PredicateFilter({self.predicate!r})"


class AcceptAllFilter(DocumentFilter):
    def __call__(self, document_id: int, status: DocumentStatus, rating: int) -> bool:
        return True

    def __repr__(self):
        return "AcceptAllFilter()"


def make_filter(value: Union[None, DocumentStatus, DocumentPredicate, DocumentFilter] = None) -> DocumentFilter:
    """
    Build a filter from a status, a predicate function or an existing filter.

    Args:
        value: None (ACTUAL documents only), a DocumentStatus, a callable
            taking (document_id, status, rating), or a DocumentFilter

    Returns:
        DocumentFilter instance
    """
    if value is None:
        return StatusFilter(DocumentStatus.ACTUAL)
    if isinstance(value, DocumentFilter):
        return value
    if isinstance(value, DocumentStatus):
        return StatusFilter(value)
    if callable(value):
        return PredicateFilter(value)
    raise TypeError(f"Cannot build a document filter from {value!r}")
