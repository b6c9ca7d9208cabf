"""
TF-IDF search module: inverted index, document store and relevance ranking.
Supports plus/minus word queries and per-document status filtering.
"""
from .search_server import SearchServer
from .filters import DocumentFilter, StatusFilter, PredicateFilter, AcceptAllFilter, make_filter
