import logging
from functools import cmp_to_key
from typing import Dict, List

from .document_store import DocumentStore
from .filters import DocumentFilter
from .inverted_index import InvertedIndex
from ..config import MAX_RESULT_DOCUMENT_COUNT, RELEVANCE_EPSILON
from ..preprocessing.document import Document
from ..query.parser import Query

logger = logging.getLogger(__name__)


class RankingEngine:
    """
    Evaluates parsed queries against the index with TF-IDF relevance.

    Relevance of a document is the sum of tf * idf over the plus words it
    contains. Any minus word present in a document removes it from the
    results, whatever its relevance.
    """

    def __init__(self, inverted_index: InvertedIndex, document_store: DocumentStore,
                 max_results: int = MAX_RESULT_DOCUMENT_COUNT,
                 relevance_epsilon: float = RELEVANCE_EPSILON):
        """
        Initialize the ranking engine.

        Args:
            inverted_index: Index to read term frequencies from
            document_store: Store to read ratings and statuses from
            max_results: Maximum number of documents returned by rank()
            relevance_epsilon: Relevances closer than this are treated as equal
        """
        self.inverted_index = inverted_index
        self.document_store = document_store
        self.max_results = max_results
        self.relevance_epsilon = relevance_epsilon

    def find_all_documents(self, query: Query, document_filter: DocumentFilter) -> List[Document]:
        """
        Find every document matching the query and the filter.

        Args:
            query: Parsed query
            document_filter: Called with (document_id, status, rating) for each candidate

        Returns:
            Unsorted list of matching documents in ascending id order
        """
        document_count = self.document_store.count()
        document_to_relevance: Dict[int, float] = {}

        for word in sorted(query.plus_words):
            if not self.inverted_index.contains_word(word):
                continue
            idf = self.inverted_index.get_inverse_document_frequency(word, document_count)

            for doc_id, tf in self.inverted_index.get_postings(word).items():
                data = self.document_store.get(doc_id)
                if document_filter(doc_id, data.status, data.rating):
                    document_to_relevance[doc_id] = document_to_relevance.get(doc_id, 0.0) + tf * idf

        for word in sorted(query.minus_words):
            for doc_id in self.inverted_index.get_postings(word):
                document_to_relevance.pop(doc_id, None)

        return [
            Document(doc_id, relevance, self.document_store.get(doc_id).rating)
            for doc_id, relevance in sorted(document_to_relevance.items())
        ]

    def compare(self, lhs: Document, rhs: Document) -> int:
        """Order by relevance descending, near-equal relevance by rating descending."""
        if abs(lhs.relevance - rhs.relevance) < self.relevance_epsilon:
            return rhs.rating - lhs.rating
        return -1 if lhs.relevance > rhs.relevance else 1

    def rank(self, documents: List[Document]) -> List[Document]:
        """
        Sort documents and keep the best max_results of them.
        """
        ranked = sorted(documents, key=cmp_to_key(self.compare))
        return ranked[:self.max_results]

    def find_top_documents(self, query: Query, document_filter: DocumentFilter) -> List[Document]:
        matched_documents = self.find_all_documents(query, document_filter)
        top_documents = self.rank(matched_documents)
        logger.debug(
            "%s matched %d documents, returning %d",
            query, len(matched_documents), len(top_documents)
        )
        return top_documents
