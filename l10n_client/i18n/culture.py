"""Current-locale context and ambient locale detection."""

from __future__ import annotations

import os
from typing import Mapping

from l10n_client.domain.models import Locale
from l10n_client.logging import logger

AMBIENT_LOCALE_VARIABLES = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")
_NEUTRAL_LOCALES = {"C", "POSIX"}


def detect_ambient_locale(environ: Mapping[str, str] | None = None, *, default: str = "en") -> str:
    """Return the language tag reported by the POSIX locale variables.

    ``de_DE.UTF-8`` becomes ``de-DE``; ``LANGUAGE`` may hold a colon list, of
    which only the first entry is used.
    """

    env = os.environ if environ is None else environ
    for name in AMBIENT_LOCALE_VARIABLES:
        raw = (env.get(name) or "").split(":")[0].strip()
        tag = raw.split(".")[0].split("@")[0]
        if not tag or tag in _NEUTRAL_LOCALES:
            continue
        return tag.replace("_", "-")
    return default


class LocaleContext:
    """Holds the live locale read by every loader operation."""

    def __init__(self, locale: Locale | str) -> None:
        self._locale = Locale.coerce(locale)

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        override: str | None = None,
        default: str = "en",
    ) -> LocaleContext:
        tag = override or detect_ambient_locale(environ, default=default)
        context = cls(tag)
        logger.info("locale_initialized", locale=context.locale.to_iso(), pinned=override is not None)
        return context

    @property
    def locale(self) -> Locale:
        return self._locale

    @locale.setter
    def locale(self, value: Locale | str) -> None:
        self._locale = Locale.coerce(value)

    def use(self, value: Locale | str) -> Locale:
        self.locale = value
        return self._locale

    def to_iso(self) -> str:
        return self._locale.to_iso()


__all__ = ["AMBIENT_LOCALE_VARIABLES", "LocaleContext", "detect_ambient_locale"]
