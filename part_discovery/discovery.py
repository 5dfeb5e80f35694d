"""
Keyword discovery module.
Runs the word statistics pipeline over a corpus of part catalogs.
"""
from tqdm import tqdm

from .word_statistics import (
    DEFAULT_TOP_K,
    calculate_idf_scores,
    count_words,
    get_best_scored_words,
    get_tf_idf_scores,
    most_frequent_word,
    remove_word,
)


class DevicePartDiscovery:
    """
    Exposes key words from new editions of part catalogs.

    Structure:
    - word_counts: {catalog_id: {word: count}}
    - idf_scores: {word: idf} over every added catalog, recomputed after
      add_catalog() changes the corpus

    Args:
        ignored_words: words dropped from every catalog's counts.
        top_k: number of words returned by get_best_scored_words().
    """

    def __init__(self, ignored_words=(), top_k=DEFAULT_TOP_K):
        self.ignored_words = tuple(ignored_words)
        self.top_k = top_k
        self.word_counts = {}
        self.total_catalogs = 0
        self._idf_scores = None

    def add_catalog(self, catalog):
        """Count a catalog's words and store them under its id."""
        counts = count_words(catalog)
        for word in self.ignored_words:
            remove_word(word, counts)

        self.word_counts[catalog.catalog_id] = counts
        self.total_catalogs = len(self.word_counts)
        self._idf_scores = None

    @property
    def idf_scores(self):
        """Corpus IDF scores, computed on first use after the corpus changes."""
        if self._idf_scores is None:
            self._idf_scores = calculate_idf_scores(list(self.word_counts.values()))
        return self._idf_scores

    def build(self, catalogs):
        """Add every catalog, then compute corpus IDF scores."""
        catalogs = list(catalogs)
        print(f"[Discovery] Counting words for {len(catalogs)} catalogs...")

        for catalog in tqdm(catalogs, desc="Counting"):
            self.add_catalog(catalog)

        print(f"[Discovery] Done. {self.total_catalogs} catalogs, {len(self.idf_scores)} unique words")
        return self

    def get_word_counts(self, catalog_id):
        return self.word_counts[catalog_id]

    def get_most_frequent_word(self, catalog_id):
        return most_frequent_word(self.word_counts[catalog_id])

    def get_tf_idf_scores(self, catalog_id):
        return get_tf_idf_scores(self.word_counts[catalog_id], self.idf_scores)

    def get_best_scored_words(self, catalog_id):
        """Top-k TF-IDF words of one catalog, unordered."""
        return get_best_scored_words(self.get_tf_idf_scores(catalog_id), k=self.top_k)

    def discover(self):
        """
        Best scored words for every catalog.

        Returns: {catalog_id: [word, ...]}
        """
        return {
            catalog_id: self.get_best_scored_words(catalog_id)
            for catalog_id in self.word_counts
        }
