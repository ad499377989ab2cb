"""TF-IDF weighting of word vectors against a document frequency table."""
from __future__ import annotations

import math
from dataclasses import dataclass

from application.services.document_frequency import DocumentFrequencyTable
from domain.entities import TfidfVector, Word, WordVector


@dataclass(frozen=True, slots=True)
class TfidfVectorizer:
    """Turns word vectors into TF-IDF vectors for a fixed corpus.

    ``idf`` is the plain ratio ``doc_count / df``; the weight uses its
    natural logarithm, so a word found in every document weighs 0.
    """

    frequency_table: DocumentFrequencyTable
    doc_count: int

    def weight(self, word: Word, word_vector: WordVector) -> float:
        if self.doc_count == 0 or word_vector.total_word_count == 0:
            return 0.0
        df = self.frequency_table.document_frequency(word)
        if df == 0:
            return 0.0
        tf = word_vector.count_occurrences_of(word) / word_vector.total_word_count
        idf = self.doc_count / df
        return tf * math.log(idf)

    def vectorize(self, word_vector: WordVector) -> TfidfVector:
        weights: dict[Word, float] = {}
        for word, _count in word_vector:
            value = self.weight(word, word_vector)
            # zero weights are implicit in the sparse vector
            if value != 0.0:
                weights[word] = value
        return TfidfVector(weights=weights, document_id=word_vector.document_id)


__all__ = ["TfidfVectorizer"]
