"""
Word dictionary parsing for plurals.

Dictionary text is line oriented. Each line holds every plural form of one
word, separated by commas, with the lookup key first:

    # comment
    год,года,лет
    клиент,клиента,клиентов

Blank lines and lines starting with '#' are ignored. There is no escaping
for commas or a leading '#' inside a form.

Author: plurals Team
License: Apache 2.0
"""

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

COMMENT_PREFIX = "#"
FORM_SEPARATOR = ","

_LINE_BREAK = re.compile(r"\r?\n")


@dataclass(frozen=True)
class WordForms:
    """All plural forms of a single word, ordered by plural category."""

    forms: tuple[str, ...]

    def __post_init__(self):
        forms = tuple(self.forms)
        if not forms:
            raise ValueError("Word needs at least one form")
        object.__setattr__(self, "forms", forms)

    @classmethod
    def of(cls, *forms: str) -> "WordForms":
        """Build from positional forms: ``WordForms.of("year", "years")``."""
        return cls(forms)

    @property
    def key(self) -> str:
        """The form used as dictionary key (index 0)."""
        return self.forms[0]

    def __len__(self) -> int:
        return len(self.forms)

    def __getitem__(self, index: int) -> str:
        return self.forms[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.forms)

    def __str__(self) -> str:
        return FORM_SEPARATOR.join(self.forms)


def parse_dictionary(text: str) -> list[WordForms]:
    """
    Parse dictionary text into word entries.

    Lines are split on '\\n' or '\\r\\n' and stripped. Empty fields inside a
    line are kept in place, so 'a,,c' yields three forms. The number of
    forms is not checked here; PluralEngine validates it against its rule.

    Args:
        text: Dictionary contents

    Returns:
        Entries in file order

    Example:
        >>> parse_dictionary("# units\\nyear,years\\n")
        [WordForms(forms=('year', 'years'))]
    """
    words = []
    for line in _LINE_BREAK.split(text):
        line = line.strip()

        # Skip empty lines and comments
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        words.append(WordForms(tuple(line.split(FORM_SEPARATOR))))
    return words


def as_word_forms(entry: "WordForms | Sequence[str]") -> WordForms:
    """Wrap a plain sequence of strings into WordForms."""
    if isinstance(entry, WordForms):
        return entry
    if isinstance(entry, str):
        return WordForms(tuple(entry.split(FORM_SEPARATOR)))
    return WordForms(tuple(entry))
