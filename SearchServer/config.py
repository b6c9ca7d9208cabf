"""
Configuration loading for the search server.
"""
import copy
import json
import logging
import os

logger = logging.getLogger(__name__)

CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")

MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_EPSILON = 1e-6

DEFAULT_CONFIG = {
    "stop_words": [],
    "ranking": {
        "max_results": MAX_RESULT_DOCUMENT_COUNT,
        "relevance_epsilon": RELEVANCE_EPSILON
    },
    "logging": {
        "level": "WARNING"
    }
}


def get_default_config():
    """Return a fresh copy of the built-in default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def load_config(config_path=None):
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the config file (defaults to the packaged config.json)

    Returns:
        Configuration dictionary. Falls back to the defaults if the file
        is missing or cannot be parsed.
    """
    config_path = config_path or CONFIG_PATH

    if not os.path.exists(config_path):
        logger.warning("No config file found at %s, using default settings", config_path)
        return get_default_config()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not load config %s: %s, using default settings", config_path, e)
        return get_default_config()

    if not isinstance(config, dict):
        logger.warning("Config %s is not a JSON object, using default settings", config_path)
        return get_default_config()

    logger.debug("Loaded configuration from %s", config_path)
    return config


def get_ranking_settings(config):
    """
    Extract ranking settings from a configuration dictionary.

    Returns:
        Tuple (max_results, relevance_epsilon)
    """
    ranking_config = (config or {}).get("ranking", {})
    max_results = int(ranking_config.get("max_results", MAX_RESULT_DOCUMENT_COUNT))
    relevance_epsilon = float(ranking_config.get("relevance_epsilon", RELEVANCE_EPSILON))
    return max_results, relevance_epsilon
