import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel


class Settings(BaseModel):
    stopwords_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "Settings":
        stopwords_file = os.getenv("LANGSTOP_STOPWORDS_FILE") or None
        return cls(stopwords_file=stopwords_file)
