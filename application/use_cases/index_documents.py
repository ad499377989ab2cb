"""Use case that builds a searchable corpus from tokenized documents."""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from application.services.corpus import Corpus
from application.services.document_frequency import DocumentFrequencyTableBuilder
from domain.entities import DocumentId, Word, WordVector

logger = logging.getLogger(__name__)


def index_documents(documents: Iterable[tuple[DocumentId, Sequence[Word]]]) -> Corpus:
    """Index a stream of ``(document id, words)`` pairs in a single pass.

    The returned corpus is complete and immutable; nothing is observable
    before the whole stream has been consumed.
    """

    word_vectors: list[WordVector] = []
    seen_ids: set[DocumentId] = set()
    frequency_builder = DocumentFrequencyTableBuilder()

    for document_id, words in documents:
        if document_id in seen_ids:
            raise ValueError(f"Duplicate document id '{document_id}'")
        seen_ids.add(document_id)
        word_vector = WordVector.from_words(words, document_id=document_id)
        word_vectors.append(word_vector)
        frequency_builder.add(word_vector)

    frequency_table = frequency_builder.build()
    corpus = Corpus(word_vectors, frequency_table)
    logger.info("Indexed %d documents with %d distinct words", corpus.doc_count, len(frequency_table))
    return corpus


__all__ = ["index_documents"]
