"""Corpus-wide document frequency bookkeeping."""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

from domain.entities import DocumentId, Word, WordVector

_EMPTY: frozenset[DocumentId] = frozenset()


class DocumentFrequencyTable:
    """Read-only mapping from a word to the documents that contain it."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[Word, frozenset[DocumentId]] | None = None) -> None:
        self._entries: Mapping[Word, frozenset[DocumentId]] = MappingProxyType(
            {word: frozenset(ids) for word, ids in (entries or {}).items()}
        )

    def documents_containing(self, word: Word) -> frozenset[DocumentId]:
        return self._entries.get(word, _EMPTY)

    def document_frequency(self, word: Word) -> int:
        return len(self.documents_containing(word))

    @property
    def vocabulary(self) -> frozenset[Word]:
        return frozenset(self._entries)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __iter__(self) -> Iterator[Word]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class DocumentFrequencyTableBuilder:
    """Accumulates document frequencies during the indexing pass.

    ``build`` hands the accumulated entries over to an immutable
    :class:`DocumentFrequencyTable`; the builder cannot be used afterwards.
    """

    def __init__(self) -> None:
        self._entries: dict[Word, set[DocumentId]] | None = {}

    def add(self, word_vector: WordVector) -> None:
        entries = self._require_entries()
        if word_vector.document_id is None:
            raise ValueError("Only document word vectors can be added to a frequency table")
        for word in word_vector.words():
            entries.setdefault(word, set()).add(word_vector.document_id)

    def build(self) -> DocumentFrequencyTable:
        entries = self._require_entries()
        self._entries = None
        return DocumentFrequencyTable(entries)

    def _require_entries(self) -> dict[Word, set[DocumentId]]:
        if self._entries is None:
            raise RuntimeError("DocumentFrequencyTableBuilder has already been built")
        return self._entries


__all__ = ["DocumentFrequencyTable", "DocumentFrequencyTableBuilder"]
