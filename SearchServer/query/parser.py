"""
Parser for plus/minus keyword queries.

Grammar:
    query: word (' ' word)*
    word:  ['-'] TERM

A word prefixed with '-' is a minus word: documents containing it are
excluded from the results. All other words are plus words and contribute
to relevance. Stop words are dropped silently.
"""
import logging
from dataclasses import dataclass, field
from typing import FrozenSet

from ..exceptions import EmptyQueryError, InvalidCharacterError, MalformedQueryTermError
from ..preprocessing.stop_words import StopWordSet
from ..preprocessing.tokenizer import is_valid_word, split_into_words

logger = logging.getLogger(__name__)

MINUS_PREFIX = "-"


@dataclass(frozen=True)
class QueryWord:
    data: str
    is_minus: bool
    is_stop: bool


@dataclass(frozen=True)
class Query:
    plus_words: FrozenSet[str] = field(default_factory=frozenset)
    minus_words: FrozenSet[str] = field(default_factory=frozenset)

    def __repr__(self):
        return f"Query(plus={sorted(self.plus_words)}, minus={sorted(self.minus_words)})"


class QueryParser:
    """
    Turns a raw query string into plus and minus word sets.

    The same word may end up in both sets when the query contains it with
    and without the minus prefix; the ranking engine lets the minus word win.
    """

    def __init__(self, stop_words: StopWordSet = None):
        self.stop_words = stop_words if stop_words is not None else StopWordSet()

    def parse_query_word(self, text: str) -> QueryWord:
        """
        Parse a single query token.

        Args:
            text: Token taken from the raw query

        Returns:
            QueryWord with the minus prefix stripped

        Raises:
            MalformedQueryTermError: for a bare '-' or a '--' prefix
            InvalidCharacterError: if the word contains a control character
        """
        word = text
        is_minus = False
        if word.startswith(MINUS_PREFIX):
            is_minus = True
            word = word[len(MINUS_PREFIX):]

        if not word or word.startswith(MINUS_PREFIX):
            raise MalformedQueryTermError(f"Query word {text!r} is invalid")
        if not is_valid_word(word):
            raise InvalidCharacterError(f"Query word {text!r} contains forbidden characters")

        return QueryWord(word, is_minus, self.stop_words.contains(word))

    def parse(self, text: str) -> Query:
        """
        Parse a raw query.

        Raises:
            EmptyQueryError: if the query has no words
        """
        words = split_into_words(text)
        if not words:
            raise EmptyQueryError("Query is empty")

        plus_words = set()
        minus_words = set()
        for token in words:
            query_word = self.parse_query_word(token)
            if query_word.is_stop:
                continue
            if query_word.is_minus:
                minus_words.add(query_word.data)
            else:
                plus_words.add(query_word.data)

        query = Query(frozenset(plus_words), frozenset(minus_words))
        logger.debug(
            "Parsed query %r: %d plus words, %d minus words",
            text, len(query.plus_words), len(query.minus_words)
        )
        return query
