import logging
from typing import Dict, List, Optional

from langstop.providers import StopwordProvider, get_provider
from langstop.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class Registry:
    """
    Thread-safe store of per-language stopword sets.

    Languages are only held in memory once registered. Queries take the shared
    side of the lock; register, unregister and clear take the exclusive side.
    """

    def __init__(self, provider: Optional[StopwordProvider] = None):
        self.provider = provider if provider is not None else get_provider()
        self._lock = ReadWriteLock()
        self._languages: Dict[str, frozenset[str]] = {}

    def register_language(self, lang: str) -> None:
        """
        Load the stopword set for `lang` from the provider.

        No-op when `lang` is already loaded. Raises UnsupportedLanguageError or
        ProviderError from the provider and leaves the registry unchanged.
        """
        with self._lock.write():
            if lang in self._languages:
                logger.debug("Language already registered lang=%s", lang)
                return
            try:
                words = self.provider.load_language(lang)
            except Exception as e:
                logger.error("Failed to register language lang=%s: %s", lang, e)
                raise
            self._languages[lang] = frozenset(words)
        logger.info("Registered language lang=%s words=%s", lang, len(words))

    def register_languages(self, *langs: str) -> None:
        """
        Register each language in order, stopping at the first error.

        Languages registered before the failing one stay loaded.
        """
        for lang in langs:
            self.register_language(lang)

    def is_stop_word(self, lang: str, word: str) -> bool:
        with self._lock.read():
            words = self._languages.get(lang)
            return words is not None and word in words

    def is_language_loaded(self, lang: str) -> bool:
        with self._lock.read():
            return lang in self._languages

    def loaded_languages(self) -> List[str]:
        with self._lock.read():
            return list(self._languages)

    def get_stopwords(self, lang: str) -> frozenset[str]:
        with self._lock.read():
            return self._languages.get(lang, frozenset())

    def unregister_language(self, lang: str) -> None:
        with self._lock.write():
            removed = self._languages.pop(lang, None)
        if removed is not None:
            logger.debug("Unregistered language lang=%s", lang)

    def clear(self) -> None:
        with self._lock.write():
            count = len(self._languages)
            self._languages = {}
        logger.info("Cleared registry languages=%s", count)

    def __contains__(self, lang: object) -> bool:
        return isinstance(lang, str) and self.is_language_loaded(lang)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._languages)


def new_registry(provider: Optional[StopwordProvider] = None) -> Registry:
    return Registry(provider)
