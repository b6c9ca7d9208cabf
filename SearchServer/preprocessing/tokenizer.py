"""
Whitespace tokenizer used for documents, stop words and queries.
"""
from typing import List

WORD_SEPARATOR = " "


def is_valid_word(text: str) -> bool:
    """
    Check that text contains no control characters (code points below 0x20).

    Args:
        text: Word or whole text to check

    Returns:
        True if the text is free of control characters
    """
    return not any(ord(c) < 0x20 for c in text)


def split_into_words(text: str) -> List[str]:
    """
    Split text into words on single spaces.

    Empty fragments produced by repeated spaces are dropped, word order is kept.
    Only the space character separates words; tabs and newlines stay inside
    the word (and make it invalid).

    Args:
        text: Text to split

    Returns:
        List of words
    """
    return [word for word in text.split(WORD_SEPARATOR) if word]
