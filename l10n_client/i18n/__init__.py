from l10n_client.i18n.culture import LocaleContext, detect_ambient_locale
from l10n_client.i18n.service import L10nService
from l10n_client.i18n.text import LocalizedText

__all__ = ["L10nService", "LocaleContext", "LocalizedText", "detect_ambient_locale"]
