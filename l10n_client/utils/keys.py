"""Resource key derivation shared by the store and the request table."""

from __future__ import annotations

from typing import Iterable, Union

from l10n_client.domain.models import Locale

KEY_NAMESPACE = "l10n"
SECURE_SEGMENT = "secure"

Packages = Union[str, Iterable[str], None]


def normalize_packages(packages: Packages) -> str:
    """Sort and comma-join a package collection; a single name passes through."""

    if packages is None:
        return ""
    if isinstance(packages, str):
        return packages
    return ",".join(sorted(packages))


def build_key(locale: Locale, packages: Packages, secure: bool = False) -> str:
    parts = [KEY_NAMESPACE, locale.to_iso()]
    if secure:
        parts.append(SECURE_SEGMENT)
    parts.append(normalize_packages(packages))
    return ":".join(parts)


__all__ = ["KEY_NAMESPACE", "Packages", "SECURE_SEGMENT", "build_key", "normalize_packages"]
