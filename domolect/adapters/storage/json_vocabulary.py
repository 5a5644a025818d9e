"""JSON file-based vocabulary adapter — implements VocabularySource.

Expected file shape::

    {"light_source": ["lamp", "bulb"], "barrier": ["gate"], ...}
"""

import json
from pathlib import Path
from typing import Union

from domolect.domain.vocabulary import Vocabulary


class VocabularyFileError(Exception):
    """Raised when a vocabulary file is missing or malformed"""
    pass


class JsonVocabulary:
    """Loads a vocabulary table from a JSON file."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    def load(self) -> Vocabulary:
        if not self._path.exists():
            raise VocabularyFileError(f"Vocabulary file not found: {self._path}")
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise VocabularyFileError(f"Could not read {self._path}: {e}") from e

        if not isinstance(raw, dict):
            raise VocabularyFileError(f"{self._path}: expected an object of category -> names")
        for category, names in raw.items():
            if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
                raise VocabularyFileError(
                    f"{self._path}: category {category!r} must be a list of strings"
                )
        return Vocabulary.from_mapping(raw)
