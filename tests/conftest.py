"""Shared fixtures for the plurals test suite."""

import pytest

from plurals import ENGLISH, ENGLISH_WORDS, RUSSIAN, RUSSIAN_WORDS, PluralEngine, parse_dictionary


@pytest.fixture
def russian_words():
    return parse_dictionary(RUSSIAN_WORDS)


@pytest.fixture
def english_words():
    return parse_dictionary(ENGLISH_WORDS)


@pytest.fixture
def russian(russian_words):
    return PluralEngine(RUSSIAN, russian_words)


@pytest.fixture
def english(english_words):
    return PluralEngine(ENGLISH, english_words)
