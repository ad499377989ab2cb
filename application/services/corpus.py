"""Indexed document space answering TF-IDF cosine similarity queries."""
from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from application.services.document_frequency import DocumentFrequencyTable
from application.services.similarity import cosine_similarity
from application.services.tfidf_vectorizer import TfidfVectorizer
from domain.entities import DocumentId, SearchResult, TfidfVector, Word, WordVector

# Scores below this are treated as "no match".
MIN_SCORE = 1e-6


class Corpus:
    """Immutable collection of TF-IDF document vectors.

    Think of the corpus as a space with one dimension per distinct word,
    where each document is a vector named by its id. Every document is
    vectorized eagerly on construction, so building a corpus requires the
    complete frequency table.
    """

    __slots__ = ("_frequency_table", "_vectorizer", "_vectors")

    def __init__(self, word_vectors: Sequence[WordVector], frequency_table: DocumentFrequencyTable) -> None:
        self._frequency_table = frequency_table
        self._vectorizer = TfidfVectorizer(frequency_table=frequency_table, doc_count=len(word_vectors))
        self._vectors: tuple[TfidfVector, ...] = tuple(self._vectorizer.vectorize(vector) for vector in word_vectors)

    @property
    def doc_count(self) -> int:
        return self._vectorizer.doc_count

    @property
    def frequency_table(self) -> DocumentFrequencyTable:
        return self._frequency_table

    @property
    def vectors(self) -> tuple[TfidfVector, ...]:
        return self._vectors

    @property
    def document_ids(self) -> list[DocumentId]:
        return [vector.document_id for vector in self._vectors]

    def vectorize_query(self, words: Iterable[Word]) -> TfidfVector:
        """Vectorize query words against the corpus without altering it."""
        return self._vectorizer.vectorize(WordVector.from_words(words))

    def search_scored(self, query_words: Iterable[Word], top_n: int) -> list[SearchResult]:
        """Rank documents by cosine similarity to the query.

        NaN scores (zero-length query or document) and scores below
        :data:`MIN_SCORE` are dropped. Equal scores keep corpus order.
        """
        if top_n <= 0:
            raise ValueError(f"Top N has to be greater than 0 but was {top_n}")

        query_vector = self.vectorize_query(query_words)
        scores = np.fromiter(
            (cosine_similarity(query_vector, vector) for vector in self._vectors),
            dtype=np.float64,
            count=len(self._vectors),
        )
        with np.errstate(invalid="ignore"):
            candidates = np.flatnonzero(~np.isnan(scores) & (scores >= MIN_SCORE))
        ranked = candidates[np.argsort(-scores[candidates], kind="stable")][:top_n]
        return [SearchResult(document_id=self._vectors[i].document_id, score=float(scores[i])) for i in ranked]

    def search(self, query_words: Iterable[Word], top_n: int) -> list[DocumentId]:
        """Return the ids of at most ``top_n`` best matching documents.

        ``query_words`` must already be normalized (e.g. lowercased).
        """
        return [result.document_id for result in self.search_scored(query_words, top_n)]

    def __contains__(self, document_id: object) -> bool:
        return any(vector.document_id == document_id for vector in self._vectors)

    def __len__(self) -> int:
        return len(self._vectors)


__all__ = ["Corpus", "MIN_SCORE"]
