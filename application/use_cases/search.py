"""Use case that answers free-text queries against an indexed corpus."""
from __future__ import annotations

import logging

from application.services.corpus import Corpus
from domain.entities import SearchResult
from domain.interfaces import Tokenizer

logger = logging.getLogger(__name__)


def search(
    query_text: str,
    *,
    corpus: Corpus,
    tokenizer: Tokenizer,
    top_n: int,
) -> list[SearchResult]:
    """Search for documents relevant to the provided query text."""

    words = tokenizer.tokenize(query_text)
    results = corpus.search_scored(words, top_n)
    logger.debug("Query %r (%d words) matched %d documents", query_text, len(words), len(results))
    return results


__all__ = ["search"]
