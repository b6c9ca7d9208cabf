import logging
import math
from collections import Counter
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Set

logger = logging.getLogger(__name__)

_EMPTY_POSTINGS = MappingProxyType({})


def compute_tf(words: Iterable[str]) -> Dict[str, float]:
    """
    Compute term frequency (TF) for each word of a document.
    TF(t,d) = f(t,d) / |d|

    Args:
        words: Indexed words of the document (stop words already removed)

    Returns:
        Dictionary mapping words to their TF scores, empty for an empty document
    """
    word_freq = Counter(words)
    total = sum(word_freq.values())
    if not total:
        return {}
    inv_word_count = 1.0 / total
    return {word: freq * inv_word_count for word, freq in word_freq.items()}


class InvertedIndex:
    """Inverted index mapping words to document term frequencies."""

    def __init__(self):
        self.index: Dict[str, Dict[int, float]] = {}  # {word: {doc_id: tf}}

    def add_document(self, doc_id: int, word_freq: Mapping[str, float]):
        """
        Add a document to the inverted index.

        Args:
            doc_id: Document identifier
            word_freq: Dictionary mapping words to their TF in the document
        """
        for word, tf in word_freq.items():
            postings = self.index.setdefault(word, {})
            postings[doc_id] = postings.get(doc_id, 0.0) + tf

        logger.debug("Document %d indexed: %d unique terms", doc_id, len(word_freq))

    def contains_word(self, word: str) -> bool:
        return word in self.index

    def contains(self, word: str, doc_id: int) -> bool:
        """Check whether the document contains the word."""
        return doc_id in self.index.get(word, _EMPTY_POSTINGS)

    def get_postings(self, word: str) -> Mapping[int, float]:
        """
        Read-only view of {doc_id: tf} for a word.
        Unknown words yield an empty mapping and are not added to the index.
        """
        postings = self.index.get(word)
        if postings is None:
            return _EMPTY_POSTINGS
        return MappingProxyType(postings)

    def get_document_frequency(self, word: str) -> int:
        """
        Get the number of documents containing the given word.
        """
        return len(self.index.get(word, _EMPTY_POSTINGS))

    def get_inverse_document_frequency(self, word: str, document_count: int) -> float:
        """
        Calculate the inverse document frequency for a word.
        IDF(t) = ln(N/DF(t))

        Args:
            word: The word to calculate IDF for
            document_count: Total number of documents N

        Returns:
            IDF value for the word, 0 for a word that is not indexed
        """
        df = self.get_document_frequency(word)
        if df == 0:
            return 0.0
        return math.log(document_count / df)

    def get_word_frequencies(self, doc_id: int) -> Dict[str, float]:
        """Collect {word: tf} for a single document."""
        return {
            word: postings[doc_id]
            for word, postings in self.index.items()
            if doc_id in postings
        }

    def get_terms(self) -> Set[str]:
        return set(self.index.keys())

    def get_stats(self) -> Dict:
        num_terms = len(self.index)
        return {
            "num_terms": num_terms,
            "avg_postings_per_term": (
                sum(len(postings) for postings in self.index.values()) / num_terms
                if num_terms > 0 else 0
            )
        }

    def __len__(self):
        return len(self.index)
