"""Text normalization for matching.

Turns free text (French and English) into a sequence of comparable tokens:
lowercase, split on non-word characters, drop stopwords and short tokens,
then apply Porter stemming.
"""

from __future__ import annotations

import re

from nltk.stem.porter import PorterStemmer

# Word characters are ASCII letters, basic Cyrillic, digits and underscore.
# Anything else, accented Latin letters included, separates tokens.
_TOKEN_SEPARATOR = re.compile(r"[^A-Za-zА-Яа-я0-9_]+")

MIN_TOKEN_LENGTH = 3

STOPWORDS: frozenset[str] = frozenset(
    [
        # French articles, conjunctions, prepositions
        "le", "la", "les", "un", "une", "des", "et", "ou", "de", "du", "au", "aux",
        "a", "à", "ce", "ces", "cette", "en", "par", "pour", "avec", "sans", "sur",
        # English
        "the", "a", "an", "and", "or", "of", "to", "in", "on", "by", "for", "with", "without",
        # French pronouns
        "je", "tu", "il", "elle", "nous", "vous", "ils", "elles",
        # English pronouns
        "i", "you", "he", "she", "we", "they",
    ]
)

# Martin Porter's reference implementation, including his later "bli"/"logi" rules.
_stemmer = PorterStemmer(mode=PorterStemmer.MARTIN_EXTENSIONS)


def tokenize(text: str) -> list[str]:
    """Split lowercased text into word tokens, dropping empty pieces."""
    return [token for token in _TOKEN_SEPARATOR.split(text.lower()) if token]


def stem(token: str) -> str:
    """Reduce a single token to its Porter stem."""
    return _stemmer.stem(token)


def normalize(text: str | None) -> list[str]:
    """Normalize text into a list of stemmed tokens.

    Args:
        text: Raw text, possibly empty or None.

    Returns:
        Stemmed tokens in input order. Stopwords and tokens shorter than
        three characters are removed; empty input gives an empty list.
    """
    if not text:
        return []

    return [
        stem(token)
        for token in tokenize(text)
        if token not in STOPWORDS and len(token) >= MIN_TOKEN_LENGTH
    ]
