from .catalog import PartCatalog
from .discovery import DevicePartDiscovery
from .word_statistics import (
    DEFAULT_TOP_K,
    calculate_idf_scores,
    count_words,
    get_best_scored_words,
    get_tf_idf_scores,
    most_frequent_word,
    remove_word,
    without_word,
)

__all__ = [
    "DEFAULT_TOP_K",
    "DevicePartDiscovery",
    "PartCatalog",
    "calculate_idf_scores",
    "count_words",
    "get_best_scored_words",
    "get_tf_idf_scores",
    "most_frequent_word",
    "remove_word",
    "without_word",
]
