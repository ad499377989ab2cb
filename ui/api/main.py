"""FastAPI layer that exposes indexing and search operations."""
from __future__ import annotations

import logging
import os
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query as FastAPIQuery, Request
from pydantic import BaseModel

from application.services.corpus import Corpus
from application.use_cases.index_documents import index_documents
from application.use_cases.ingest_paths import ingest_paths
from application.use_cases.search import search
from infrastructure.config import Container, ContainerConfig, build_default_container

logger = logging.getLogger(__name__)


class DocumentPayload(BaseModel):
    id: str
    content: str


class IndexRequest(BaseModel):
    documents: list[DocumentPayload]


class IndexResponse(BaseModel):
    indexed: int


class SearchHit(BaseModel):
    document_id: str
    score: float


class SearchResponse(BaseModel):
    query: str
    results: list[SearchHit]


class StatsResponse(BaseModel):
    doc_count: int
    vocabulary_size: int


def _load_corpus(container: Container, corpus_root: str | None) -> Corpus:
    if not corpus_root:
        return index_documents([])
    corpus, report = ingest_paths(
        [Path(corpus_root)],
        tokenizer=container.tokenizer,
        extractors=container.extractors,
        default_extractor=container.default_extractor,
    )
    if report.errors:
        logger.warning("Skipped %d unreadable documents under %s", len(report.errors), corpus_root)
    return corpus


def create_app(corpus_root: str | None = None, container: Container | None = None) -> FastAPI:
    """Build the API, indexing ``corpus_root`` when given."""

    container = container or build_default_container(ContainerConfig.from_env())
    app = FastAPI(title="TF-IDF Search API")
    app.state.container = container
    app.state.corpus = _load_corpus(container, corpus_root)

    @app.post("/index", response_model=IndexResponse)
    def index_endpoint(payload: IndexRequest, request: Request) -> IndexResponse:
        tokenizer = request.app.state.container.tokenizer
        documents = [(doc.id, tokenizer.tokenize(doc.content)) for doc in payload.documents]
        try:
            corpus = index_documents(documents)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        request.app.state.corpus = corpus
        return IndexResponse(indexed=corpus.doc_count)

    @app.get("/documents", response_model=list[str])
    def documents_endpoint(request: Request) -> list[str]:
        return request.app.state.corpus.document_ids

    @app.get("/stats", response_model=StatsResponse)
    def stats_endpoint(request: Request) -> StatsResponse:
        corpus: Corpus = request.app.state.corpus
        return StatsResponse(doc_count=corpus.doc_count, vocabulary_size=len(corpus.frequency_table))

    @app.get("/search", response_model=SearchResponse)
    def search_endpoint(
        request: Request,
        q: str = FastAPIQuery(..., description="User query"),
        top_n: int | None = FastAPIQuery(None, gt=0, description="Maximum number of results"),
    ) -> SearchResponse:
        state = request.app.state
        results = search(
            q,
            corpus=state.corpus,
            tokenizer=state.container.tokenizer,
            top_n=top_n or state.container.top_n,
        )
        hits = [SearchHit(document_id=result.document_id, score=result.score) for result in results]
        return SearchResponse(query=q, results=hits)

    return app


app = create_app(os.getenv("TFIDFSEARCH_CORPUS_DIR"))
