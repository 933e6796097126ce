class StopwordsError(Exception):
    """Base class for errors raised by langstop."""


class UnsupportedLanguageError(StopwordsError, ValueError):
    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Unsupported language {language!r}")


class ProviderError(StopwordsError):
    """The data provider could not produce a stopword set (missing or corrupt data)."""

    def __init__(self, message: str, language: str | None = None):
        self.language = language
        super().__init__(message)
