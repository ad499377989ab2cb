"""Filesystem ingestion tests on temporary document folders."""
from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from application.use_cases.ingest_paths import collect_files, ingest_paths
from domain.interfaces import TextExtractor
from infrastructure.config import build_default_container


class _FailingExtractor(TextExtractor):
    def extract(self, source: bytes | str) -> str:
        raise ValueError("corrupt file")


class TestIngestPaths(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        (self.root / "nested" / "deeper").mkdir(parents=True)
        (self.root / "scala.txt").write_text("Welcome to Scala labs!", encoding="utf-8")
        (self.root / "nested" / "toronto.txt").write_text("Welcome to\nToronto.", encoding="utf-8")
        (self.root / "nested" / "deeper" / "page.html").write_text(
            "<html><head><style>p {}</style></head><body><p>Hello, Scala</p></body></html>",
            encoding="utf-8",
        )
        self.container = build_default_container()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_collects_files_recursively_with_relative_ids(self):
        ids = [document_id for _path, document_id in collect_files([self.root])]
        self.assertEqual(ids, ["nested/deeper/page.html", "nested/toronto.txt", "scala.txt"])

    def test_explicit_file_uses_its_name(self):
        files = collect_files([self.root / "scala.txt", self.root / "missing.txt"])
        self.assertEqual([document_id for _path, document_id in files], ["scala.txt"])

    def test_indexes_every_file(self):
        corpus, report = ingest_paths(
            [self.root],
            tokenizer=self.container.tokenizer,
            extractors=self.container.extractors,
            default_extractor=self.container.default_extractor,
        )

        self.assertEqual(report.total, 3)
        self.assertEqual(report.indexed, 3)
        self.assertEqual(report.errors, [])
        self.assertEqual(corpus.doc_count, 3)
        self.assertEqual(corpus.search(["toronto"], 10), ["nested/toronto.txt"])
        self.assertEqual(corpus.search(["hello"], 10), ["nested/deeper/page.html"])
        self.assertNotIn("p", corpus.frequency_table)

    def test_unreadable_files_are_reported_and_skipped(self):
        corpus, report = ingest_paths(
            [self.root],
            tokenizer=self.container.tokenizer,
            extractors={".html": _FailingExtractor()},
        )

        self.assertEqual(report.total, 3)
        self.assertEqual(report.indexed, 2)
        self.assertEqual(len(report.errors), 1)
        self.assertIn("corrupt file", report.errors[0].reason)
        self.assertNotIn("nested/deeper/page.html", corpus)

    def test_empty_folder_gives_empty_corpus(self):
        with tempfile.TemporaryDirectory() as empty:
            corpus, report = ingest_paths([Path(empty)], tokenizer=self.container.tokenizer)
        self.assertEqual(report.total, 0)
        self.assertEqual(corpus.search(["anything"], 10), [])

    def test_colliding_ids_across_folders_are_reported_and_skipped(self):
        with tempfile.TemporaryDirectory() as first, tempfile.TemporaryDirectory() as second:
            (Path(first) / "readme.txt").write_text("scala notes", encoding="utf-8")
            (Path(second) / "readme.txt").write_text("toronto notes", encoding="utf-8")
            (Path(second) / "other.txt").write_text("hello world", encoding="utf-8")

            corpus, report = ingest_paths([Path(first), Path(second)], tokenizer=self.container.tokenizer)

        self.assertEqual(report.total, 3)
        self.assertEqual(report.indexed, 2)
        self.assertEqual(len(report.errors), 1)
        self.assertIn("Duplicate document id 'readme.txt'", report.errors[0].reason)
        self.assertEqual(sorted(corpus.document_ids), ["other.txt", "readme.txt"])
        self.assertEqual(corpus.search(["scala"], 10), ["readme.txt"])
        self.assertEqual(corpus.search(["toronto"], 10), [])

    def test_same_folder_twice_indexes_each_file_once(self):
        corpus, report = ingest_paths([self.root, self.root], tokenizer=self.container.tokenizer)

        self.assertEqual(corpus.doc_count, 3)
        self.assertEqual(report.indexed, 3)
        self.assertEqual(len(report.errors), 3)


if __name__ == "__main__":
    unittest.main()
