"""Pydantic models shared across loader layers."""

from __future__ import annotations

from pydantic import BaseModel

from l10n_client.services.exceptions import InvalidLocale

LOCALE_SEPARATOR = "-"


class Locale(BaseModel):
    """Language plus optional region, e.g. ``fr`` or ``fr-CA``.

    Parsing normalizes case (``lang`` lower, ``region`` upper) and does not
    validate the codes themselves, so ``to_iso(parse(s)) == s`` only holds
    for input that is already in canonical case.
    """

    lang: str
    region: str | None = None

    @classmethod
    def parse(cls, iso_string: str) -> Locale:
        if not iso_string or not iso_string.strip():
            raise InvalidLocale(f"Locale string must not be empty: {iso_string!r}")
        parts = iso_string.split(LOCALE_SEPARATOR)
        region = parts[1].upper() if len(parts) > 1 and parts[1] else None
        return cls(lang=parts[0].lower(), region=region)

    @classmethod
    def coerce(cls, value: Locale | str) -> Locale:
        if isinstance(value, Locale):
            return value
        return cls.parse(value)

    def to_iso(self) -> str:
        if self.region:
            return LOCALE_SEPARATOR.join((self.lang, self.region))
        return self.lang

    def __str__(self) -> str:
        return self.to_iso()


__all__ = ["LOCALE_SEPARATOR", "Locale"]
