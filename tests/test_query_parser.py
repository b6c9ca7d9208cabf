"""
Tests for plus/minus query parsing.
"""
import pytest

from SearchServer.exceptions import EmptyQueryError, InvalidCharacterError, MalformedQueryTermError
from SearchServer.preprocessing import StopWordSet
from SearchServer.query import Query, QueryParser


@pytest.fixture
def parser():
    return QueryParser(StopWordSet("и в на"))


def test_parse_plus_and_minus_words(parser):
    query = parser.parse("пушистый ухоженный -кот")

    assert query.plus_words == {"пушистый", "ухоженный"}
    assert query.minus_words == {"кот"}


def test_parse_collapses_duplicates(parser):
    query = parser.parse("кот кот  -пёс -пёс")

    assert query.plus_words == {"кот"}
    assert query.minus_words == {"пёс"}


def test_stop_words_are_dropped(parser):
    query = parser.parse("кот и -в пёс")

    assert query == Query(frozenset({"кот", "пёс"}), frozenset())


def test_query_of_only_stop_words_is_empty_but_valid(parser):
    query = parser.parse("и в -на")

    assert not query.plus_words
    assert not query.minus_words


def test_same_word_plus_and_minus_is_kept_in_both(parser):
    query = parser.parse("кот -кот")

    assert query.plus_words == {"кот"}
    assert query.minus_words == {"кот"}


@pytest.mark.parametrize("raw_query", ["", "   "])
def test_empty_query(parser, raw_query):
    with pytest.raises(EmptyQueryError):
        parser.parse(raw_query)


@pytest.mark.parametrize("raw_query", ["a --b", "a - ", "-", "пушистый ухоженный -- "])
def test_malformed_query_word(parser, raw_query):
    with pytest.raises(MalformedQueryTermError):
        parser.parse(raw_query)


def test_invalid_character_in_query(parser):
    with pytest.raises(InvalidCharacterError):
        parser.parse("пушистый скво\x12рец кот")

    with pytest.raises(InvalidCharacterError):
        parser.parse("-ко\x01т")


def test_first_bad_word_decides_the_error(parser):
    with pytest.raises(MalformedQueryTermError):
        parser.parse("--кот скво\x12рец")

    with pytest.raises(InvalidCharacterError):
        parser.parse("скво\x12рец --кот")


def test_parse_query_word(parser):
    word = parser.parse_query_word("-и")

    assert word.data == "и"
    assert word.is_minus
    assert word.is_stop


def test_hyphen_inside_word_is_plain(parser):
    query = parser.parse("кот-пёс")

    assert query.plus_words == {"кот-пёс"}
    assert not query.minus_words
