"""DOCX extractor built on python-docx."""
from __future__ import annotations

from io import BytesIO

from docx import Document as DocxDocument

from domain.interfaces import TextExtractor


class DocxExtractor(TextExtractor):
    """Collect paragraph and table text from raw DOCX file contents."""

    def extract(self, source: bytes | str) -> str:
        if not isinstance(source, bytes):
            raise TypeError("DOCX sources must be raw file bytes")
        document = DocxDocument(BytesIO(source))
        parts = [paragraph.text for paragraph in document.paragraphs if paragraph.text]
        for table in document.tables:
            for row in table.rows:
                parts.extend(cell.text for cell in row.cells if cell.text)
        return "\n".join(parts).strip()


__all__ = ["DocxExtractor"]
