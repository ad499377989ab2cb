"""Abstract interfaces for the TF-IDF search engine's collaborators."""
from __future__ import annotations

from abc import ABC, abstractmethod

from domain.entities import Word


class TextExtractor(ABC):
    """Extracts text from user provided sources (files, raw payloads)."""

    @abstractmethod
    def extract(self, source: bytes | str) -> str:
        """Return the textual representation of a source."""


class Tokenizer(ABC):
    """Turns raw text into normalized words."""

    @abstractmethod
    def tokenize(self, text: str) -> list[Word]:
        """Return the normalized words of ``text`` in order of appearance."""


__all__ = [
    "TextExtractor",
    "Tokenizer",
]
