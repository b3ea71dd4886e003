"""
Picker Locale — Month Names
=============================
Month names come from Django's own translation catalogs, so
any locale Django ships ('en_US', 'id_ID', 'de_DE', ...) works.
"""

from __future__ import annotations

from django.utils import translation
from django.utils.dates import MONTHS


def _language(locale: str) -> str:
    if not locale or not isinstance(locale, str):
        raise ValueError("locale must be a non-empty string.")
    return translation.to_language(locale)


def month_name(locale: str, month: int) -> str:
    """Return the full month name (1 = January) for a locale."""
    if month not in MONTHS:
        raise ValueError(f"month must be between 1 and 12, got {month}.")
    with translation.override(_language(locale)):
        return str(MONTHS[month])


def month_names(locale: str) -> list[str]:
    """All twelve month names, January first."""
    with translation.override(_language(locale)):
        return [str(MONTHS[month]) for month in range(1, 13)]
