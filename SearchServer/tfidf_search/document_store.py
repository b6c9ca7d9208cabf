"""
In-memory store of per-document metadata.
Keeps the order in which documents were added for positional lookup.
"""
from typing import Dict, Iterable, Iterator, List

from ..exceptions import DocumentNotFoundError, InvalidDocumentIdError, PositionOutOfRangeError
from ..preprocessing.document import DocumentData, DocumentStatus


def compute_average_rating(ratings: Iterable[int]) -> int:
    """
    Average of the ratings truncated toward zero, 0 for no ratings.

    >>> compute_average_rating([8, -3])
    2
    >>> compute_average_rating([-7, 0])
    -3
    """
    ratings = list(ratings)
    if not ratings:
        return 0
    rating_sum = sum(int(rating) for rating in ratings)
    average = abs(rating_sum) // len(ratings)
    return -average if rating_sum < 0 else average


class DocumentStore:
    """Document metadata keyed by id, plus insertion order."""

    def __init__(self):
        self.documents: Dict[int, DocumentData] = {}
        self.document_ids: List[int] = []

    def check_new_id(self, doc_id: int):
        """
        Raises:
            InvalidDocumentIdError: if the id is not an integer, is negative or already in use
        """
        if isinstance(doc_id, bool) or not isinstance(doc_id, int):
            raise InvalidDocumentIdError(f"Invalid document ID {doc_id!r}: must be an integer")
        if doc_id < 0:
            raise InvalidDocumentIdError(f"Invalid document ID {doc_id}: must not be negative")
        if doc_id in self.documents:
            raise InvalidDocumentIdError(f"Invalid document ID {doc_id}: already in use")

    def add(self, doc_id: int, status: DocumentStatus, ratings: Iterable[int] = ()) -> DocumentData:
        """
        Store metadata for a new document.

        Args:
            doc_id: Document identifier
            status: Document status
            ratings: Ratings to average

        Returns:
            The stored DocumentData
        """
        self.check_new_id(doc_id)
        data = DocumentData(compute_average_rating(ratings), status)
        self.documents[doc_id] = data
        self.document_ids.append(doc_id)
        return data

    def get(self, doc_id: int) -> DocumentData:
        try:
            return self.documents[doc_id]
        except KeyError:
            raise DocumentNotFoundError(f"Document {doc_id} not found") from None

    def get_document_id(self, position: int) -> int:
        """
        Id of the document added at the given position (0-based).

        Raises:
            PositionOutOfRangeError: for positions outside [0, count)
        """
        if not 0 <= position < len(self.document_ids):
            raise PositionOutOfRangeError(
                f"Position {position} out of range for {len(self.document_ids)} documents"
            )
        return self.document_ids[position]

    def count(self) -> int:
        return len(self.documents)

    def __len__(self) -> int:
        return len(self.documents)

    def __contains__(self, doc_id) -> bool:
        return doc_id in self.documents

    def __iter__(self) -> Iterator[int]:
        return iter(self.document_ids)
