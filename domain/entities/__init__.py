"""Domain entities for the TF-IDF search engine."""
from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

Word = str
DocumentId = str


@dataclass(frozen=True, slots=True)
class WordVector:
    """A document (or query) as a mapping from word to number of occurrences.

    Query vectors have no owning document, so ``document_id`` is ``None``.
    """

    counts: Mapping[Word, int]
    document_id: DocumentId | None = None
    total_word_count: int = field(init=False)

    def __post_init__(self) -> None:
        negative = sorted(word for word, count in self.counts.items() if count < 0)
        if negative:
            raise ValueError(f"Word counts cannot be negative: {', '.join(negative)}")
        counts = {word: count for word, count in self.counts.items() if count > 0}
        object.__setattr__(self, "counts", MappingProxyType(counts))
        object.__setattr__(self, "total_word_count", sum(counts.values()))

    @classmethod
    def from_words(cls, words: Iterable[Word], document_id: DocumentId | None = None) -> WordVector:
        return cls(counts=Counter(words), document_id=document_id)

    def count_occurrences_of(self, word: Word) -> int:
        return self.counts.get(word, 0)

    def words(self) -> frozenset[Word]:
        return frozenset(self.counts)

    def __iter__(self) -> Iterator[tuple[Word, int]]:
        return iter(self.counts.items())

    def __len__(self) -> int:
        return len(self.counts)


@dataclass(frozen=True, slots=True)
class TfidfVector:
    """Sparse TF-IDF weights of a document or query.

    Words missing from ``weights`` weigh 0. ``length`` is the Euclidean norm.
    """

    weights: Mapping[Word, float]
    document_id: DocumentId | None = None
    length: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "weights", MappingProxyType(dict(self.weights)))
        object.__setattr__(self, "length", math.sqrt(sum(w * w for w in self.weights.values())))

    def weight(self, word: Word) -> float:
        return self.weights.get(word, 0.0)

    def common_words_with(self, other: TfidfVector) -> set[Word]:
        return self.weights.keys() & other.weights.keys()


@dataclass(slots=True)
class SearchResult:
    """A ranked hit returned for a query."""

    document_id: DocumentId
    score: float


@dataclass(slots=True)
class Document:
    """A raw document loaded from disk, before tokenization."""

    id: DocumentId
    content: str
    path: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


__all__ = [
    "Word",
    "DocumentId",
    "WordVector",
    "TfidfVector",
    "SearchResult",
    "Document",
]
