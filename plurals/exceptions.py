"""
Custom exceptions for the plurals package.
"""


class PluralError(Exception):
    """Base exception for plural-form errors."""
    pass


class InvalidDictionary(PluralError):
    """
    Raised when a word dictionary cannot back a PluralEngine.

    Attributes:
        entry: The first offending WordForms entry, or None when the
            dictionary as a whole is unusable (e.g. it has no words).
    """

    def __init__(self, message: str, entry=None):
        super().__init__(message)
        self.entry = entry


class UnknownLanguage(PluralError, KeyError):
    """Raised when no plural rule is registered for a language."""

    def __init__(self, language: str):
        super().__init__(language)
        self.language = language

    def __str__(self) -> str:
        return f"No plural rule for language: {self.language!r}"
