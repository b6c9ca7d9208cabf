import argparse
import json
import logging
import sys
from typing import Dict, List

from SearchServer.config import load_config
from SearchServer.exceptions import SearchServerError
from SearchServer.preprocessing.document import Document, DocumentStatus
from SearchServer.tfidf_search.search_server import SearchServer

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEMO_STOP_WORDS = "и в на"

DEMO_DOCUMENTS = [
    {"id": 0, "text": "белый кот и модный ошейник", "status": "ACTUAL", "ratings": [8, -3]},
    {"id": 1, "text": "пушистый кот пушистый хвост", "status": "ACTUAL", "ratings": [7, 2, 7]},
    {"id": 2, "text": "ухоженный пёс выразительные глаза", "status": "ACTUAL", "ratings": [5, -12, 2, 1]},
    {"id": 3, "text": "белый кот пушистый хвост", "status": "ACTUAL", "ratings": [8, -3]},
    {"id": 4, "text": "ухоженный скворец евгений", "status": "BANNED", "ratings": [9]},
]

DEMO_QUERY = "пушистый ухоженный кот"

DEMO_BAD_QUERIES = [
    "",
    "пушистый ухоженный --кот",
    "пушистый ухоженный - кот",
    "пушистый ухоженный -- ",
    "пушистый скво\x12рец кот",
]


def format_document(document: Document) -> str:
    """Render a search result as '{ document_id = 1, relevance = 0.650672, rating = 5 }'."""
    return str(document)


def print_documents(documents: List[Document]):
    for document in documents:
        print(format_document(document))


def is_even_id(document_id, status, rating):
    return document_id % 2 == 0


def load_documents(documents_path: str) -> List[Dict]:
    """
    Load documents from a JSON file.

    Args:
        documents_path: Path to a JSON list of {"id", "text", "status", "ratings"} objects

    Returns:
        List of document dictionaries
    """
    with open(documents_path, 'r', encoding='utf-8') as f:
        documents = json.load(f)

    if not isinstance(documents, list):
        raise ValueError(f"{documents_path} must contain a JSON list of documents")

    logger.info("Loaded %d documents from %s", len(documents), documents_path)
    return documents


def build_demo_server(config=None) -> SearchServer:
    server = SearchServer(DEMO_STOP_WORDS, config=config)
    server.add_documents(DEMO_DOCUMENTS)
    return server


def run_query(server: SearchServer, query: str, status_or_predicate=None) -> bool:
    """
    Run a query and print its results.

    Returns:
        True on success, False if the query was rejected
    """
    try:
        documents = server.find_top_documents(query, status_or_predicate)
    except SearchServerError as e:
        print(f"Error: {e}")
        return False

    print_documents(documents)
    return True


def run_match(server: SearchServer, query: str, document_id: int) -> bool:
    try:
        matched_words, status = server.match_document(query, document_id)
    except SearchServerError as e:
        print(f"Error: {e}")
        return False

    print(
        f"{{ document_id = {document_id}, status = {status.name}, "
        f"words = {' '.join(matched_words)} }}"
    )
    return True


def run_demo(config=None) -> bool:
    """
    Replay the built-in demonstration: ranking by default status, by BANNED
    status and by an even-id predicate, then a set of malformed queries.

    Returns:
        True if every well-formed query succeeded
    """
    server = build_demo_server(config)
    success = True

    print("ACTUAL by default:")
    success &= run_query(server, DEMO_QUERY)

    print("BANNED:")
    success &= run_query(server, DEMO_QUERY, DocumentStatus.BANNED)

    print("Even ids:")
    success &= run_query(server, DEMO_QUERY, is_even_id)

    print("Excluding documents with minus words:")
    success &= run_query(server, "пушистый ухоженный -кот")

    print("Malformed queries:")
    for query in DEMO_BAD_QUERIES:
        print(f"Query {query!r}:")
        run_query(server, query)

    return success


def main(argv=None):
    parser = argparse.ArgumentParser(description='SearchServer - TF-IDF keyword search')
    parser.add_argument('--config', help='Path to configuration JSON file')
    parser.add_argument('--documents', help='Path to documents JSON file')
    parser.add_argument('--stop-words', help='Space-separated stop words (overrides config)')
    parser.add_argument('--query', action='append', default=[],
                        help='Query to run (may be given several times)')
    parser.add_argument('--status', choices=[status.name for status in DocumentStatus],
                        help='Only return documents with this status (default: ACTUAL)')
    parser.add_argument('--even-ids', action='store_true',
                        help='Only return documents with even ids (ignores --status)')
    parser.add_argument('--match', type=int, metavar='ID',
                        help='Show which query words the document matches instead of ranking')
    parser.add_argument('--demo', action='store_true', help='Run the built-in demonstration')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS,
                        help='Logging level (default: from config)')
    args = parser.parse_args(argv)

    config = load_config(args.config)
    log_level = args.log_level or str(config.get("logging", {}).get("level", "WARNING")).upper()
    if log_level not in LOG_LEVELS:
        log_level = "WARNING"
    logging.basicConfig(level=log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.demo or not (args.documents or args.query):
        return 0 if run_demo(config) else 1

    try:
        server = SearchServer(args.stop_words, config=config)
        if args.documents:
            server.add_documents(load_documents(args.documents))
    except (SearchServerError, OSError, ValueError, KeyError) as e:
        print(f"Error: {e}")
        return 1

    if args.even_ids:
        status_or_predicate = is_even_id
    elif args.status:
        status_or_predicate = DocumentStatus[args.status]
    else:
        status_or_predicate = None

    success = True
    for query in args.query:
        print(f"Query: {query!r}")
        if args.match is not None:
            success &= run_match(server, query, args.match)
        else:
            success &= run_query(server, query, status_or_predicate)

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
