"""Lookup wrapper around a resolved text dictionary."""

from __future__ import annotations

from typing import Callable, Iterator, Mapping

DEFAULT_NOT_FOUND_MARKER = "!NOTFOUND!"


class LocalizedText(Mapping[str, str]):
    """Read-only view of one dictionary with a forgiving ``get``.

    Missing keys come back as ``key + marker`` so they stand out in a UI
    instead of raising.
    """

    def __init__(self, raw: Mapping[str, str], *, not_found_marker: str = DEFAULT_NOT_FOUND_MARKER) -> None:
        self._raw = dict(raw)
        self.not_found_marker = not_found_marker

    @property
    def raw(self) -> dict[str, str]:
        return dict(self._raw)

    def get(self, key: str, callback: Callable[[str], object] | None = None) -> str:  # type: ignore[override]
        if key not in self._raw:
            return f"{key}{self.not_found_marker}"
        value = self._raw[key]
        if callback is not None:
            callback(value)
        return value

    def __getitem__(self, key: str) -> str:
        return self._raw[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._raw)

    def __len__(self) -> int:
        return len(self._raw)

    def __repr__(self) -> str:
        return f"LocalizedText({self._raw!r})"


__all__ = ["DEFAULT_NOT_FOUND_MARKER", "LocalizedText"]
