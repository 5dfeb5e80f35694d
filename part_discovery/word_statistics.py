"""
Word statistics module.
Word counts, corpus-wide IDF and TF-IDF keyword scoring for part catalogs.

Scoring:
    idf(w) = log10(N / df(w))
    tfidf(w) = count(w) * idf(w)

N is the number of catalogs in the corpus and df(w) the number of catalogs
containing w at least once.
"""
import heapq
import math
from collections import defaultdict

DEFAULT_TOP_K = 10


def count_words(catalog):
    """
    Count how often each word appears in a catalog.

    Args:
        catalog: PartCatalog or any iterable of word tokens. A bare string
            is rejected, since it would be counted character by character.

    Returns: {word: count}
    """
    if isinstance(catalog, str):
        raise TypeError("count_words expects a sequence of words, not a str")

    words = catalog.get_catalog_words() if hasattr(catalog, "get_catalog_words") else catalog

    word_counts = defaultdict(int)
    for word in words:
        word_counts[word] += 1
    return dict(word_counts)


def remove_word(word, word_counts):
    """
    Remove a word from word_counts in place. Absent words are ignored.

    The mapping is mutated directly; callers sharing it must not touch it
    during the call.
    """
    word_counts.pop(word, None)


def without_word(word, word_counts):
    """Return a copy of word_counts without word."""
    return {w: count for w, count in word_counts.items() if w != word}


def most_frequent_word(word_counts):
    """
    Find the word with the highest count.

    Ties go to whichever word the mapping yields first.
    Returns "" when no word has a positive count.
    """
    max_word = ""
    max_count = 0
    for word, count in word_counts.items():
        if count > max_count:
            max_word = word
            max_count = count
    return max_word


def calculate_idf_scores(catalog_word_counts):
    """
    Compute the IDF score of every word across a corpus.

    Args:
        catalog_word_counts: list of {word: count}, one per catalog.

    Returns: {word: log10(N / df)}
    """
    total_catalogs = len(catalog_word_counts)

    doc_freq = defaultdict(int)
    for word_counts in catalog_word_counts:
        for word in word_counts:
            doc_freq[word] += 1

    return {word: math.log10(total_catalogs / df) for word, df in doc_freq.items()}


def get_tf_idf_scores(word_counts, idf_scores):
    """
    Score each word of a catalog as count * idf.

    Every word in word_counts must have an entry in idf_scores,
    otherwise KeyError is raised.
    """
    return {word: count * idf_scores[word] for word, count in word_counts.items()}


def get_best_scored_words(tf_idf_scores, k=DEFAULT_TOP_K):
    """
    Return the k highest scored words, in no particular order.

    Keeps a min-heap of at most k entries, so the cost is O(n log k).
    Words tied with the heap minimum may be evicted in any order.
    """
    if k <= 0:
        return []

    heap = []
    for word, score in tf_idf_scores.items():
        heapq.heappush(heap, (score, word))
        if len(heap) > k:
            heapq.heappop(heap)

    return [word for _, word in heap]
