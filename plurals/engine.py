"""
Plural Engine for plurals

Picks the plural form of a word for a quantity using a PluralRule and a
dictionary of word forms.

An engine is validated once at construction and never mutated afterwards,
so it can be shared read-only across threads without locking.

Example:
    >>> from plurals import RUSSIAN, PluralEngine
    >>> engine = PluralEngine(RUSSIAN, "год,года,лет")
    >>> engine.substitute(3, "год")
    'года'
    >>> engine.substitute_with_number(5, " год")
    '5 лет'

Author: plurals Team
License: Apache 2.0
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from plurals.dictionary import WordForms, as_word_forms, parse_dictionary
from plurals.exceptions import InvalidDictionary
from plurals.rules import PluralRule, get_rule
from plurals.words import bundled_dictionary

logger = logging.getLogger(__name__)

# Characters allowed before the word; they are kept verbatim in the result
PREFIX_CHARACTERS = frozenset(" -")


class PluralEngine:
    """
    Dictionary-backed plural form lookup.

    Features:
    - Dictionary given as text or as a list of WordForms
    - Leading spaces and hyphens preserved around the substituted form
    - Unknown words and negative quantities pass through unchanged

    Example:
        engine = PluralEngine(ENGLISH, "apple,apples\\nberry,berries")
        engine.substitute(3, " berry")
        # Returns: " berries"
    """

    def __init__(
        self,
        rule: PluralRule,
        words: str | Iterable[WordForms | Sequence[str]],
    ):
        """
        Initialize engine and validate the dictionary.

        Args:
            rule: Plural rule of the dictionary's language
            words: Dictionary text, or word entries

        Raises:
            InvalidDictionary: If there are no words, an entry has a form
                count other than rule.category_count, or a key repeats
        """
        if isinstance(words, str):
            entries = parse_dictionary(words)
        else:
            entries = []
            for entry in words:
                try:
                    entries.append(as_word_forms(entry))
                except ValueError:
                    raise InvalidDictionary(
                        f"Illegal count of word forms: {list(entry)} "
                        f"(expected {rule.category_count})"
                    ) from None

        self._rule = rule
        self._words = MappingProxyType(self._index(rule, entries))
        logger.debug(f"Loaded {len(self._words)} words for rule '{rule.name}'")

    @classmethod
    def for_language(cls, language: str, words: str | None = None) -> "PluralEngine":
        """
        Build an engine from a registered language rule.

        Args:
            language: Language code or name (e.g., 'ru', 'English')
            words: Dictionary text. Defaults to the bundled dictionary
                for the language.

        Raises:
            UnknownLanguage: If no rule is registered for the language
            InvalidDictionary: If no dictionary is given and none is
                bundled, or the dictionary is invalid
        """
        rule = get_rule(language)
        if words is None:
            words = bundled_dictionary(language)
            if words is None:
                raise InvalidDictionary(f"No bundled dictionary for language: {language}")
        return cls(rule, words)

    @staticmethod
    def _index(rule: PluralRule, entries: list[WordForms]) -> dict[str, WordForms]:
        if not entries:
            logger.warning("Rejecting empty dictionary")
            raise InvalidDictionary("No words provided")

        index: dict[str, WordForms] = {}
        for entry in entries:
            if len(entry) != rule.category_count:
                logger.warning(
                    f"Rejecting '{entry}': {len(entry)} forms, "
                    f"rule '{rule.name}' needs {rule.category_count}"
                )
                raise InvalidDictionary(
                    f"Illegal count of word forms: {list(entry.forms)} "
                    f"(expected {rule.category_count})",
                    entry,
                )
            if entry.key in index:
                logger.warning(f"Rejecting duplicate word '{entry.key}'")
                raise InvalidDictionary(f"Duplicate word: {entry.key}", entry)
            index[entry.key] = entry
        return index

    @property
    def rule(self) -> PluralRule:
        return self._rule

    @property
    def words(self) -> Mapping[str, WordForms]:
        """Read-only view of the dictionary, keyed by base form."""
        return self._words

    def substitute(self, n: int, word: str) -> str:
        """
        Get the plural form of a word for a quantity.

        Leading spaces and hyphens are not part of the lookup key and are
        copied to the result as-is. Never raises.

        Args:
            n: Quantity. Negative values return the word unchanged.
            word: Word in its base form, optionally prefixed

        Returns:
            Prefix plus the selected form, or the original word if it is
            not in the dictionary

        Example:
            >>> engine.substitute(11, " - клиент")
            ' - клиентов'
        """
        if n < 0:
            return word

        prefix_len = _prefix_length(word)
        entry = self._words.get(word[prefix_len:])
        if entry is None:
            logger.debug("Word not in dictionary: %r", word)
            return word

        return word[:prefix_len] + entry[self._rule.category_index(n)]

    def substitute_with_number(self, n: int, word: str) -> str:
        """
        Same as substitute() with the number prepended, without separator.

        Example:
            >>> engine.substitute_with_number(2, "  клиент")
            '2  клиента'
        """
        return f"{n}{self.substitute(n, word)}"

    # Short names used by message templates
    pl = substitute
    npl = substitute_with_number

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return word[_prefix_length(word):] in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"PluralEngine(rule={self._rule.name!r}, words={len(self._words)})"


def _prefix_length(word: str) -> int:
    prefix_len = 0
    while prefix_len < len(word) and word[prefix_len] in PREFIX_CHARACTERS:
        prefix_len += 1
    return prefix_len
