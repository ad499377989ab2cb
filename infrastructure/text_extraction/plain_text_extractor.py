"""Text extractor that treats the payload as plain UTF-8 text."""
from __future__ import annotations

from domain.interfaces import TextExtractor


class PlainTextExtractor(TextExtractor):
    """Decode raw file contents, dropping bytes that are not valid UTF-8."""

    def extract(self, source: bytes | str) -> str:
        if isinstance(source, bytes):
            return source.decode("utf-8", errors="ignore")
        return source


__all__ = ["PlainTextExtractor"]
