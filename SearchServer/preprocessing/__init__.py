"""
Preprocessing module: whitespace tokenization, stop word filtering and
the document model shared by the index and the ranking engine.
"""
from .tokenizer import split_into_words, is_valid_word
from .stop_words import StopWordSet
from .document import Document, DocumentData, DocumentStatus
