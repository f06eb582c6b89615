"""
Bundled word dictionaries.

Small ready-made dictionaries for common time and count units, in the
text format accepted by PluralEngine.
"""

from collections.abc import Mapping
from types import MappingProxyType

from plurals.rules import resolve_language

RUSSIAN_WORDS = """\
# Русский: один, несколько (2-4), много
год,года,лет
месяц,месяца,месяцев
неделя,недели,недель
день,дня,дней
час,часа,часов
минута,минуты,минут
секунда,секунды,секунд
раз,раза,раз
клиент,клиента,клиентов
пользователь,пользователя,пользователей
сообщение,сообщения,сообщений
файл,файла,файлов
"""

ENGLISH_WORDS = """\
# English: one, other
year,years
month,months
week,weeks
day,days
hour,hours
minute,minutes
second,seconds
time,times
client,clients
user,users
message,messages
file,files
"""

BUNDLED_DICTIONARIES: Mapping[str, str] = MappingProxyType(
    {
        "en": ENGLISH_WORDS,
        "ru": RUSSIAN_WORDS,
    }
)


def bundled_dictionary(language: str) -> str | None:
    """Get the bundled dictionary text for a language code or name, if any."""
    code = resolve_language(language)
    return BUNDLED_DICTIONARIES.get(code) if code else None
