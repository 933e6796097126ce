from typing import List, Protocol


class StopwordProvider(Protocol):
    def load_language(self, code: str) -> frozenset[str]:
        ...

    def supported_languages(self) -> List[str]:
        ...
