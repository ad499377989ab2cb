import math
import unittest
from unittest import mock

from application.services.corpus import MIN_SCORE, Corpus
from application.services.document_frequency import DocumentFrequencyTable
from application.services.similarity import cosine_similarity
from application.use_cases.index_documents import index_documents
from domain.entities import WordVector

SCALA_DOCUMENTS = [
    ("doc1", ["welcome", "to", "scala", "labs"]),
    ("doc2", ["welcome", "to", "toronto"]),
    ("doc3", ["introduce", "scala", "and", "enjoy", "scala"]),
    ("doc4", ["hello", "scala"]),
]


class TestCorpusSearch(unittest.TestCase):
    def setUp(self) -> None:
        self.corpus: Corpus = index_documents(SCALA_DOCUMENTS)

    def test_ranks_documents_sharing_more_query_words_first(self):
        results = self.corpus.search(["welcome", "scala"], 10)

        self.assertEqual(results, ["doc1", "doc2", "doc3", "doc4"])

    def test_scores_are_descending(self):
        results = self.corpus.search_scored(["welcome", "scala"], 10)
        scores = [result.score for result in results]

        self.assertEqual(scores, sorted(scores, reverse=True))
        self.assertTrue(all(score >= MIN_SCORE for score in scores))

    def test_never_returns_more_than_top_n(self):
        for top_n in (1, 2, 3):
            results = self.corpus.search(["welcome", "scala"], top_n)
            self.assertLessEqual(len(results), top_n)
        self.assertEqual(self.corpus.search(["welcome", "scala"], 1), ["doc1"])

    def test_results_come_from_the_corpus(self):
        for query in (["scala"], ["toronto", "hello"], ["enjoy", "labs", "to"]):
            for document_id in self.corpus.search(query, 10):
                self.assertIn(document_id, self.corpus)

    def test_non_positive_top_n_is_rejected(self):
        for top_n in (0, -1):
            with self.assertRaises(ValueError):
                self.corpus.search(["scala"], top_n)
        with self.assertRaises(ValueError):
            index_documents([]).search(["scala"], 0)

    def test_empty_query_returns_nothing(self):
        self.assertEqual(self.corpus.search([], 10), [])

    def test_out_of_vocabulary_query_returns_nothing(self):
        self.assertEqual(self.corpus.search(["haskell", "clojure"], 10), [])

    def test_query_of_universal_words_returns_nothing(self):
        corpus = index_documents([("a", ["common", "x"]), ("b", ["common", "y"])])
        self.assertEqual(corpus.search(["common"], 5), [])

    def test_query_does_not_change_corpus(self):
        vocabulary = self.corpus.frequency_table.vocabulary
        self.corpus.search(["brand", "new", "words"], 10)

        self.assertEqual(self.corpus.frequency_table.vocabulary, vocabulary)
        self.assertEqual(self.corpus.doc_count, 4)

    def test_equal_scores_keep_corpus_order(self):
        corpus = index_documents([
            ("second", ["x", "y"]),
            ("first", ["x", "y"]),
            ("other", ["z"]),
        ])
        self.assertEqual(corpus.search(["x"], 10), ["second", "first"])

    def test_document_is_most_similar_to_itself(self):
        for vector in self.corpus.vectors:
            self.assertAlmostEqual(cosine_similarity(vector, vector), 1.0)

    def test_self_query_ranks_document_first(self):
        self.assertEqual(self.corpus.search(SCALA_DOCUMENTS[2][1], 1), ["doc3"])


class TestScoreThreshold(unittest.TestCase):
    def setUp(self) -> None:
        # "shared" is a vanishing fraction of the heavy document.
        word_vectors = [
            WordVector(counts={"shared": 1, "heavy": 10_000_000}, document_id="heavy"),
            WordVector(counts={"shared": 1}, document_id="light"),
            WordVector(counts={"filler": 1}, document_id="filler"),
        ]
        table = DocumentFrequencyTable({
            "shared": frozenset({"heavy", "light"}),
            "heavy": frozenset({"heavy"}),
            "filler": frozenset({"filler"}),
        })
        self.corpus = Corpus(word_vectors, table)
        self.heavy_score = cosine_similarity(self.corpus.vectorize_query(["shared"]), self.corpus.vectors[0])

    def test_tiny_positive_score_is_dropped(self):
        self.assertGreater(self.heavy_score, 0.0)
        self.assertLess(self.heavy_score, MIN_SCORE)
        self.assertEqual(self.corpus.search(["shared"], 10), ["light"])

    def test_score_equal_to_threshold_is_kept(self):
        with mock.patch("application.services.corpus.MIN_SCORE", self.heavy_score):
            self.assertEqual(self.corpus.search(["shared"], 10), ["light", "heavy"])


class TestEmptyCorpus(unittest.TestCase):
    def test_search_returns_nothing(self):
        corpus = index_documents([])

        self.assertEqual(corpus.doc_count, 0)
        self.assertEqual(corpus.search(["scala"], 10), [])
        self.assertEqual(corpus.search([], 10), [])


class TestCosineSimilarity(unittest.TestCase):
    def test_zero_length_vector_gives_nan(self):
        corpus = index_documents(SCALA_DOCUMENTS)
        empty = corpus.vectorize_query([])

        self.assertTrue(math.isnan(cosine_similarity(empty, corpus.vectors[0])))

    def test_empty_document_is_never_returned(self):
        corpus = index_documents([("empty", []), ("doc", ["scala", "rocks"]), ("other", ["java"])])
        self.assertEqual(corpus.search(["scala"], 10), ["doc"])


if __name__ == "__main__":
    unittest.main()
