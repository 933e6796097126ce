from typing import Optional

from langstop.config import Settings
from langstop.providers.iso import IsoProvider
from langstop.providers.json_file import JsonFileProvider
from langstop.providers.types import StopwordProvider


def get_provider(settings: Optional[Settings] = None) -> StopwordProvider:
    settings = settings or Settings.from_env()
    if settings.stopwords_file is not None:
        return JsonFileProvider(settings.stopwords_file)
    return IsoProvider()


__all__ = ["IsoProvider", "JsonFileProvider", "StopwordProvider", "get_provider"]
