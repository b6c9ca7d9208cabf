"""
Shared fixtures: the demonstration stop words and documents.
"""
import pytest

from SearchServer import DocumentStatus, SearchServer
from SearchServer.config import get_default_config

STOP_WORDS = "и в на"


@pytest.fixture
def config():
    return get_default_config()


@pytest.fixture
def empty_server(config):
    return SearchServer(STOP_WORDS, config=config)


@pytest.fixture
def server(empty_server):
    """Five documents: four ACTUAL, one BANNED."""
    empty_server.add_document(0, "белый кот и модный ошейник", DocumentStatus.ACTUAL, [8, -3])
    empty_server.add_document(1, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [7, 2, 7])
    empty_server.add_document(2, "ухоженный пёс выразительные глаза", DocumentStatus.ACTUAL, [5, -12, 2, 1])
    empty_server.add_document(3, "белый кот пушистый хвост", DocumentStatus.ACTUAL, [8, -3])
    empty_server.add_document(4, "ухоженный скворец евгений", DocumentStatus.BANNED, [9])
    return empty_server
