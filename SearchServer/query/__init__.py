"""
Query parsing module for plus/minus keyword queries.
"""
from .parser import Query, QueryParser, QueryWord
