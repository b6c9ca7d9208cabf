"""
SearchServer - in-memory full-text search with TF-IDF ranking,
plus/minus query words, stop words and document status filtering.
"""
from .exceptions import (
    SearchServerError,
    InvalidStopWordError,
    InvalidDocumentIdError,
    InvalidCharacterError,
    EmptyQueryError,
    MalformedQueryTermError,
    DocumentNotFoundError,
    PositionOutOfRangeError,
)
from .preprocessing import Document, DocumentData, DocumentStatus, StopWordSet
from .query import Query, QueryParser
from .tfidf_search import SearchServer

__version__ = "1.0.0"
