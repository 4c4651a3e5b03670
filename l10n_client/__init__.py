"""Locale-aware loader for server-provided text dictionaries and scripts."""

from l10n_client.domain.models import Locale
from l10n_client.i18n import L10nService, LocaleContext, LocalizedText
from l10n_client.services.exceptions import InvalidLocale, L10nError, ScriptLoadError, TextLoadError
from l10n_client.services.text_loader import TextHandle

__all__ = [
    "InvalidLocale",
    "L10nError",
    "L10nService",
    "Locale",
    "LocaleContext",
    "LocalizedText",
    "ScriptLoadError",
    "TextHandle",
    "TextLoadError",
]
