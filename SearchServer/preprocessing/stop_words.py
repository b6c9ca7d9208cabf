"""
Validated stop word set.
"""
from typing import Iterable, Iterator, List, Union

from .tokenizer import is_valid_word, split_into_words
from ..exceptions import InvalidStopWordError


def make_unique_non_empty_strings(strings: Iterable[str]) -> frozenset:
    """Collapse duplicates and drop empty strings."""
    return frozenset(s for s in strings if s)


class StopWordSet:
    """
    Immutable set of words that are never indexed and never used as query words.
    """

    def __init__(self, stop_words: Union[str, Iterable[str], None] = None):
        """
        Initialize the stop word set.

        Args:
            stop_words: Iterable of words, a single space-separated string,
                or None for an empty set

        Raises:
            InvalidStopWordError: if a stop word contains a control character
        """
        if stop_words is None:
            stop_words = []
        elif isinstance(stop_words, str):
            stop_words = split_into_words(stop_words)

        words = make_unique_non_empty_strings(stop_words)
        invalid = sorted(word for word in words if not is_valid_word(word))
        if invalid:
            raise InvalidStopWordError(f"Some of stop words are invalid: {invalid!r}")

        self._words = words

    def contains(self, word: str) -> bool:
        return word in self._words

    def filter(self, words: Iterable[str]) -> List[str]:
        """Return the words that are not stop words, keeping their order."""
        return [word for word in words if word not in self._words]

    def __contains__(self, word) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __repr__(self):
        return f"StopWordSet({sorted(self._words)!r})"
