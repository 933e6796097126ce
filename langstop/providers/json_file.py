"""
Provider reading a stopwords-iso formatted JSON document from disk.

The document maps language codes to word lists:

    {"en": ["a", "about", ...], "fr": ["au", "aux", ...]}
"""
import json
import logging
from pathlib import Path
from threading import Lock
from typing import Dict, List

from langstop.errors import ProviderError, UnsupportedLanguageError

logger = logging.getLogger(__name__)


class JsonFileProvider:
    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = Lock()
        self._data: Dict[str, frozenset[str]] | None = None

    def _load(self) -> Dict[str, frozenset[str]]:
        with self._lock:
            if self._data is not None:
                return self._data

            logger.debug("Reading stopwords file path=%s", self.path)
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    raw = json.load(f)
            except OSError as e:
                raise ProviderError(f"Cannot read stopwords file {self.path}: {e}") from e
            except UnicodeDecodeError as e:
                raise ProviderError(f"Invalid UTF-8 in stopwords file {self.path}: {e}") from e
            except json.JSONDecodeError as e:
                raise ProviderError(f"Invalid JSON in stopwords file {self.path}: {e}") from e

            if not isinstance(raw, dict):
                raise ProviderError(f"Stopwords file {self.path} must contain a JSON object")

            data: Dict[str, frozenset[str]] = {}
            for lang, words in raw.items():
                if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
                    raise ProviderError(
                        f"Entry for {lang!r} in {self.path} is not a list of strings", language=lang
                    )
                data[lang] = frozenset(words)

            logger.debug("Loaded stopwords file path=%s languages=%s", self.path, len(data))
            self._data = data
            return data

    def load_language(self, code: str) -> frozenset[str]:
        words = self._load().get(code)
        if words is None:
            raise UnsupportedLanguageError(code)
        return words

    def supported_languages(self) -> List[str]:
        return sorted(self._load())
