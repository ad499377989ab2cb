"""Use case for indexing documents discovered on the filesystem."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Mapping

from application.services.corpus import Corpus
from application.use_cases.index_documents import index_documents
from domain.entities import Document, DocumentId, Word
from domain.interfaces import TextExtractor, Tokenizer
from infrastructure.text_extraction.plain_text_extractor import PlainTextExtractor

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 200


@dataclass(slots=True)
class IngestError:
    path: str
    reason: str


@dataclass(slots=True)
class IngestReport:
    total: int
    indexed: int = 0
    errors: list[IngestError] = field(default_factory=list)


def ingest_paths(
    paths: Iterable[Path],
    *,
    tokenizer: Tokenizer,
    extractors: Mapping[str, TextExtractor] | None = None,
    default_extractor: TextExtractor | None = None,
) -> tuple[Corpus, IngestReport]:
    """Index every file found under the given files or directories.

    Directories are walked recursively. Files that cannot be read are
    recorded in the report and left out of the corpus.
    """

    files = collect_files(paths)
    logger.info("Found %d documents", len(files))
    report = IngestReport(total=len(files))
    stream = _tokenized_documents(
        files,
        tokenizer=tokenizer,
        extractors=extractors or {},
        default_extractor=default_extractor or PlainTextExtractor(),
        report=report,
    )
    corpus = index_documents(stream)
    return corpus, report


def collect_files(paths: Iterable[Path]) -> list[tuple[Path, DocumentId]]:
    """Return ``(path, document id)`` for every regular file, in sorted order."""

    collected: list[tuple[Path, DocumentId]] = []
    for path in paths:
        path = Path(path)
        if path.is_dir():
            for file_path in sorted(path.rglob("*")):
                if file_path.is_file():
                    collected.append((file_path, file_path.relative_to(path).as_posix()))
        elif path.is_file():
            collected.append((path, path.name))
        else:
            logger.warning("Skipping missing path %s", path)
    return collected


def load_document(path: Path, document_id: DocumentId, extractor: TextExtractor) -> Document:
    raw_bytes = path.read_bytes()
    return Document(
        id=document_id,
        content=extractor.extract(raw_bytes),
        path=str(path),
        metadata={"size_bytes": len(raw_bytes), "extension": path.suffix.lower().lstrip(".")},
    )


def _tokenized_documents(
    files: list[tuple[Path, DocumentId]],
    *,
    tokenizer: Tokenizer,
    extractors: Mapping[str, TextExtractor],
    default_extractor: TextExtractor,
    report: IngestReport,
) -> Iterator[tuple[DocumentId, list[Word]]]:
    seen_ids: dict[DocumentId, Path] = {}
    for position, (path, document_id) in enumerate(files, start=1):
        if position % PROGRESS_EVERY == 0:
            logger.info("Loaded %d documents so far", position)
        if document_id in seen_ids:
            reason = f"Duplicate document id '{document_id}' (already used by {seen_ids[document_id]})"
            logger.warning("Skipping %s: %s", path, reason)
            report.errors.append(IngestError(path=str(path), reason=reason))
            continue
        seen_ids[document_id] = path
        extractor = extractors.get(path.suffix.lower(), default_extractor)
        try:
            document = load_document(path, document_id, extractor)
        except Exception as exc:  # extractor failures depend on third-party parsers
            logger.warning("Failed to load %s: %s", path, exc)
            report.errors.append(IngestError(path=str(path), reason=str(exc)))
            continue
        report.indexed += 1
        yield document.id, tokenizer.tokenize(document.content)


__all__ = ["ingest_paths", "collect_files", "load_document", "IngestReport", "IngestError"]
