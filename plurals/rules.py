"""
Plural Rules for plurals

Language-specific rules that classify a quantity into a plural category.
A rule is an immutable value: the number of categories a language
distinguishes plus a pure function mapping an integer to a category index.
Rules hold no state, so a single instance is shared by every engine and
thread that references it.

See http://localization-guide.readthedocs.org/en/latest/l10n/pluralforms.html
for the formulas of other languages.

Author: plurals Team
License: Apache 2.0
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from plurals.exceptions import UnknownLanguage


@dataclass(frozen=True)
class PluralRule:
    """
    A plural category classifier for a family of languages.

    Attributes:
        name: Human-readable name of the rule
        category_count: Number of distinct plural forms the language uses
        category_index: Function mapping a quantity to an index in
            ``[0, category_count)``

    Example:
        >>> rule = PluralRule("binary", 2, lambda n: 0 if n == 1 else 1)
        >>> rule.category_index(1), rule(5)
        (0, 1)
    """

    name: str
    category_count: int
    category_index: Callable[[int], int]

    def __post_init__(self):
        if self.category_count < 1:
            raise ValueError(f"Plural rule {self.name!r} needs at least one category")

    def __call__(self, n: int) -> int:
        return self.category_index(n)

    def __repr__(self) -> str:
        return f"PluralRule({self.name!r}, category_count={self.category_count})"


def _russian_plural_rule(n: int) -> int:
    """
    Russian pluralization rule (3 plural forms).

    - one: 1, 21, 31, ... but not 11
    - few: 2-4, 22-24, ... but not 12-14
    - many: everything else, including 0 and 5-20

    Python's ``%`` is floored, so negative quantities still land in range.
    """
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if 2 <= n % 10 <= 4 and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def _arabic_plural_rule(n: int) -> int:
    """
    Arabic pluralization rule (6 plural forms).

    Arabic has distinct plural forms for:
    - zero (0)
    - one (1)
    - two (2)
    - few (n % 100 in 3-10)
    - many (n % 100 in 11-99)
    - other (everything else, e.g. 100, 101, 102)
    """
    if n == 0:
        return 0
    elif n == 1:
        return 1
    elif n == 2:
        return 2
    elif 3 <= n % 100 <= 10:
        return 3
    elif n % 100 >= 11:
        return 4
    else:
        return 5


NONE = PluralRule("none", 1, lambda n: 0)
ENGLISH = PluralRule("english", 2, lambda n: 0 if n == 1 else 1)
FRENCH = PluralRule("french", 2, lambda n: 0 if n <= 1 else 1)
RUSSIAN = PluralRule("russian", 3, _russian_plural_rule)
ARABIC = PluralRule("arabic", 6, _arabic_plural_rule)

# Languages sharing a formula share the rule object
NO_PLURAL_FORM = NONE
CHINESE = NONE
JAPANESE = NONE
GERMAN = ENGLISH
ITALIAN = ENGLISH
PORTUGUESE = ENGLISH
SPANISH = ENGLISH

RULES: Mapping[str, PluralRule] = MappingProxyType(
    {
        "ar": ARABIC,
        "de": GERMAN,
        "en": ENGLISH,
        "es": SPANISH,
        "fr": FRENCH,
        "it": ITALIAN,
        "ja": JAPANESE,
        "pt": PORTUGUESE,
        "ru": RUSSIAN,
        "zh": CHINESE,
    }
)

# Human-readable names to codes (case-insensitive lookup)
NAME_TO_CODE: Mapping[str, str] = MappingProxyType(
    {
        # English names
        "arabic": "ar",
        "german": "de",
        "english": "en",
        "spanish": "es",
        "french": "fr",
        "italian": "it",
        "japanese": "ja",
        "portuguese": "pt",
        "russian": "ru",
        "chinese": "zh",
        # Native names
        "العربية": "ar",
        "deutsch": "de",
        "español": "es",
        "français": "fr",
        "italiano": "it",
        "日本語": "ja",
        "português": "pt",
        "русский": "ru",
        "中文": "zh",
    }
)


def resolve_language(language: str) -> str | None:
    """
    Resolve a language code or name to a registered code.

    Args:
        language: Code ('ru') or name ('Russian', 'русский')

    Returns:
        Language code if registered, None otherwise
    """
    key = language.strip().lower()
    if key in RULES:
        return key
    return NAME_TO_CODE.get(key)


def get_rule(language: str) -> PluralRule:
    """
    Get the plural rule for a language.

    Args:
        language: Language code or name (e.g., 'en', 'ru', 'Arabic')

    Returns:
        The shared PluralRule for the language

    Raises:
        UnknownLanguage: If no rule is registered for the language

    Example:
        >>> get_rule('ru').category_count
        3
        >>> get_rule('German') is ENGLISH
        True
    """
    code = resolve_language(language)
    if code is None:
        raise UnknownLanguage(language)
    return RULES[code]


def supports_language(language: str) -> bool:
    """Check if a plural rule exists for a language code or name."""
    return resolve_language(language) is not None
