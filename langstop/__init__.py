"""
Per-language stopword lookup with explicit control over loaded languages.

The module-level functions act on one registry shared by every caller in the
process. Use `new_registry()` for an isolated instance.
"""
import logging
from typing import List

from langstop.errors import ProviderError, StopwordsError, UnsupportedLanguageError
from langstop.registry import Registry, new_registry

logger = logging.getLogger(__name__)

_default = Registry()


def default_registry() -> Registry:
    return _default


def register_language(lang: str) -> None:
    _default.register_language(lang)


def register_languages(*langs: str) -> None:
    _default.register_languages(*langs)


def is_stop_word(lang: str, word: str) -> bool:
    return _default.is_stop_word(lang, word)


def is_language_loaded(lang: str) -> bool:
    return _default.is_language_loaded(lang)


def loaded_languages() -> List[str]:
    return _default.loaded_languages()


def get_stopwords(lang: str) -> frozenset[str]:
    return _default.get_stopwords(lang)


def unregister_language(lang: str) -> None:
    _default.unregister_language(lang)


def clear() -> None:
    _default.clear()


def get_supported_languages() -> List[str]:
    """
    Every language code the default provider can load, loaded or not.

    Returns an empty list when the provider cannot enumerate its data.
    """
    try:
        return sorted(_default.provider.supported_languages())
    except StopwordsError as e:
        logger.error("Failed to list supported languages: %s", e)
        return []


__all__ = [
    "ProviderError",
    "Registry",
    "StopwordsError",
    "UnsupportedLanguageError",
    "clear",
    "default_registry",
    "get_stopwords",
    "get_supported_languages",
    "is_language_loaded",
    "is_stop_word",
    "loaded_languages",
    "new_registry",
    "register_language",
    "register_languages",
    "unregister_language",
]
