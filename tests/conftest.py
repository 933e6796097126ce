import json
import pytest

import langstop
from langstop.errors import ProviderError, UnsupportedLanguageError
from langstop.registry import Registry

FAKE_DATA = {
    "en": ["a", "and", "the", "of"],
    "fr": ["au", "aux", "avec", "ce", "ces", "le"],
    "es": ["el", "la", "los"],
    "de": ["der", "die", "das"],
}


class FakeProvider:
    def __init__(self, data=None):
        self.data = {lang: frozenset(words) for lang, words in (data or FAKE_DATA).items()}
        self.load_calls = []
        self.broken = set()

    def load_language(self, code):
        self.load_calls.append(code)
        if code in self.broken:
            raise ProviderError(f"Corrupt data for {code}", language=code)
        if code not in self.data:
            raise UnsupportedLanguageError(code)
        return self.data[code]

    def supported_languages(self):
        return sorted(self.data)


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def registry(provider):
    return Registry(provider)


@pytest.fixture
def stopwords_file(tmp_path):
    """Write a small stopwords-iso style JSON document."""
    path = tmp_path / "stopwords-iso.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(FAKE_DATA, f)
    return path


@pytest.fixture(autouse=True)
def clean_default_registry():
    langstop.clear()
    yield
    langstop.clear()
