"""Tokenizer that lowercases text and splits it on non-word characters."""
from __future__ import annotations

import re

from domain.entities import Word
from domain.interfaces import Tokenizer


class RegexTokenizer(Tokenizer):
    """Split text on runs of non-word characters."""

    _SPLIT_PATTERN = re.compile(r"\W+")

    def tokenize(self, text: str) -> list[Word]:
        return [token for token in self._SPLIT_PATTERN.split(text.lower()) if token.strip()]


__all__ = ["RegexTokenizer"]
