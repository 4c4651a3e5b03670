"""Domain-specific exceptions."""


class L10nError(Exception):
    pass


class InvalidLocale(L10nError, ValueError):
    pass


class TextLoadError(L10nError):
    """Raised through a text handle when the dictionary request fails."""

    def __init__(self, reason: str, *, url: str | None = None, status_code: int | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.url = url
        self.status_code = status_code


class ScriptLoadError(L10nError):
    """Raised when every step of the script fallback chain fails."""

    def __init__(self, reason: str, *, url: str | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.url = url
