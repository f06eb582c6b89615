"""
plurals - plural word forms for a number.

Usage:
    >>> from plurals import RUSSIAN, PluralEngine
    >>> engine = PluralEngine(RUSSIAN, "год,года,лет")
    >>> [engine.substitute(n, "год") for n in (1, 2, 5)]
    ['год', 'года', 'лет']
"""

from .dictionary import COMMENT_PREFIX, WordForms, parse_dictionary
from .engine import PREFIX_CHARACTERS, PluralEngine
from .exceptions import InvalidDictionary, PluralError, UnknownLanguage
from .rules import (
    ARABIC,
    CHINESE,
    ENGLISH,
    FRENCH,
    GERMAN,
    ITALIAN,
    JAPANESE,
    NO_PLURAL_FORM,
    NONE,
    PORTUGUESE,
    RULES,
    RUSSIAN,
    SPANISH,
    PluralRule,
    get_rule,
    supports_language,
)
from .words import ENGLISH_WORDS, RUSSIAN_WORDS

__version__ = "0.1.0"

__all__ = [
    "ARABIC",
    "CHINESE",
    "COMMENT_PREFIX",
    "ENGLISH",
    "ENGLISH_WORDS",
    "FRENCH",
    "GERMAN",
    "ITALIAN",
    "InvalidDictionary",
    "JAPANESE",
    "NONE",
    "NO_PLURAL_FORM",
    "PORTUGUESE",
    "PREFIX_CHARACTERS",
    "PluralEngine",
    "PluralError",
    "PluralRule",
    "RULES",
    "RUSSIAN",
    "RUSSIAN_WORDS",
    "SPANISH",
    "UnknownLanguage",
    "WordForms",
    "get_rule",
    "parse_dictionary",
    "supports_language",
]
