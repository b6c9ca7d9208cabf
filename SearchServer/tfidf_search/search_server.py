import logging
from typing import Dict, Iterable, List, Mapping, Tuple

from .document_store import DocumentStore
from .filters import make_filter
from .inverted_index import InvertedIndex, compute_tf
from .ranking import RankingEngine
from ..config import get_ranking_settings, load_config
from ..exceptions import InvalidCharacterError
from ..preprocessing.document import Document, DocumentData, DocumentStatus
from ..preprocessing.stop_words import StopWordSet
from ..preprocessing.tokenizer import is_valid_word, split_into_words
from ..query.parser import QueryParser

logger = logging.getLogger(__name__)


class SearchServer:
    """
    In-memory full-text search server with TF-IDF ranking.

    Documents are added once and never changed. Queries are space-separated
    words; words prefixed with '-' exclude documents that contain them.
    """

    def __init__(self, stop_words=None, config=None):
        """
        Initialize the search server.

        Args:
            stop_words: Iterable of stop words or a space-separated string.
                If None, stop words are taken from the configuration.
            config: Configuration dictionary (loaded from config.json if not provided)

        Raises:
            InvalidStopWordError: if a stop word contains a control character
        """
        self.config = config if config is not None else load_config()

        if stop_words is None:
            stop_words = self.config.get("stop_words", [])
        self.stop_words = StopWordSet(stop_words)

        self.inverted_index = InvertedIndex()
        self.document_store = DocumentStore()
        self.query_parser = QueryParser(self.stop_words)

        max_results, relevance_epsilon = get_ranking_settings(self.config)
        self.ranking_engine = RankingEngine(
            self.inverted_index,
            self.document_store,
            max_results=max_results,
            relevance_epsilon=relevance_epsilon
        )

    def split_into_words_no_stop(self, text: str) -> List[str]:
        """
        Tokenize document text and drop stop words.

        Raises:
            InvalidCharacterError: if the text contains a control character
        """
        if not is_valid_word(text):
            raise InvalidCharacterError("Document text contains forbidden characters")
        return self.stop_words.filter(split_into_words(text))

    def add_document(self, document_id: int, text: str,
                     status: DocumentStatus = DocumentStatus.ACTUAL,
                     ratings: Iterable[int] = ()):
        """
        Add a document to the index.

        All checks run before anything is written, so a rejected document
        leaves the server unchanged.

        Args:
            document_id: Non-negative id, unique across the server
            text: Document text
            status: DocumentStatus or its name (case-insensitive)
            ratings: Ratings whose truncated average is stored

        Raises:
            InvalidDocumentIdError: if the id is not an integer, is negative or already in use
            InvalidCharacterError: if the text contains a control character
            ValueError: if the status is not a DocumentStatus or one of its names
        """
        self.document_store.check_new_id(document_id)
        status = DocumentStatus.from_name(status)
        words = self.split_into_words_no_stop(text)
        word_freq = compute_tf(words)

        self.document_store.add(document_id, status, ratings)
        self.inverted_index.add_document(document_id, word_freq)

    def add_documents(self, documents: Iterable[Mapping]):
        """
        Add documents given as dictionaries with id, text, status and ratings fields.

        Args:
            documents: Iterable of document dictionaries. "status" may be a
                DocumentStatus or its name and defaults to ACTUAL; "ratings"
                defaults to an empty list.
        """
        for doc_data in documents:
            self.add_document(
                int(doc_data["id"]),
                doc_data["text"],
                doc_data.get("status", DocumentStatus.ACTUAL),
                doc_data.get("ratings", [])
            )

    def find_top_documents(self, raw_query: str, status_or_predicate=None) -> List[Document]:
        """
        Find the most relevant documents for a query.

        Args:
            raw_query: Query string
            status_or_predicate: None for ACTUAL documents, a DocumentStatus,
                or a predicate taking (document_id, status, rating)

        Returns:
            Up to max_results documents, most relevant first
        """
        query = self.query_parser.parse(raw_query)
        document_filter = make_filter(status_or_predicate)
        return self.ranking_engine.find_top_documents(query, document_filter)

    def match_document(self, raw_query: str, document_id: int) -> Tuple[List[str], DocumentStatus]:
        """
        List the plus words of a query that a document contains.

        Args:
            raw_query: Query string
            document_id: Document to check

        Returns:
            Tuple (matched words in lexicographic order, document status).
            The word list is empty if the document contains any minus word.

        Raises:
            DocumentNotFoundError: if no document has this id
        """
        query = self.query_parser.parse(raw_query)
        status = self.document_store.get(document_id).status

        for word in query.minus_words:
            if self.inverted_index.contains(word, document_id):
                return [], status

        matched_words = [
            word for word in sorted(query.plus_words)
            if self.inverted_index.contains(word, document_id)
        ]
        return matched_words, status

    def get_document_count(self) -> int:
        return self.document_store.count()

    def get_document_id(self, position: int) -> int:
        return self.document_store.get_document_id(position)

    def get_document_data(self, document_id: int) -> DocumentData:
        return self.document_store.get(document_id)

    def get_word_frequencies(self, document_id: int) -> Dict[str, float]:
        self.document_store.get(document_id)
        return self.inverted_index.get_word_frequencies(document_id)

    def get_stats(self) -> Dict:
        stats = self.inverted_index.get_stats()
        stats["num_documents"] = self.document_store.count()
        stats["num_stop_words"] = len(self.stop_words)
        return stats

    def __len__(self):
        return self.get_document_count()

    def __iter__(self):
        return iter(self.document_store)
