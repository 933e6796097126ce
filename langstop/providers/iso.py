from typing import List

import stopwordsiso

from langstop.errors import UnsupportedLanguageError


class IsoProvider:
    """Stopword sets from the stopwords-iso collection."""

    def load_language(self, code: str) -> frozenset[str]:
        if not stopwordsiso.has_lang(code):
            raise UnsupportedLanguageError(code)
        return frozenset(stopwordsiso.stopwords(code))

    def supported_languages(self) -> List[str]:
        return sorted(stopwordsiso.langs())
