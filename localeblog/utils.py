from __future__ import annotations

import datetime as dt

from babel.core import UnknownLocaleError
from babel.dates import format_date

from .errors import LocaleFormatError

HUMAN_DATE_PATTERN = "MMMM d y"


def parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "on"}
    return False


def iso_date(value: dt.datetime) -> str:
    value = value.astimezone(dt.timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


def language_code(locale: str) -> str:
    return locale[:2]


def human_date(value: dt.datetime, locale: str) -> str:
    """Format ``value`` as a long-form date using the month names of ``locale``.

    ``en_US`` renders as ``January 2 2006``; ``fr_FR`` as ``janvier 2 2006``.
    """
    try:
        return format_date(value.date(), HUMAN_DATE_PATTERN, locale=locale)
    except (UnknownLocaleError, ValueError, TypeError) as exc:
        raise LocaleFormatError(f"cannot format date for locale {locale!r}: {exc}") from exc
