"""
Keyword discovery script.
Reads part catalogs from a TSV file and prints each catalog's key words.
"""
import argparse
import os
import sys

from tqdm import tqdm

from part_discovery.catalog import PartCatalog
from part_discovery.discovery import DevicePartDiscovery
from part_discovery.word_statistics import DEFAULT_TOP_K

DATA_DIR = "data"
CATALOGS_PATH = os.path.join(DATA_DIR, "catalogs.tsv")


def load_catalogs(path):
    """Load catalogs from a TSV file (header, then catalog_id<TAB>text rows)."""
    print(f"[Catalogs] Loading catalogs from {path}")

    rows = []
    with open(path, 'r', encoding='utf-8') as f:
        next(f, None)  # header
        for line in f:
            parts = line.rstrip('\n').split('\t', 1)
            if len(parts) == 2:
                rows.append((parts[0], parts[1]))

    catalogs = [PartCatalog.from_text(catalog_id, text) for catalog_id, text in tqdm(rows, desc="Loading")]
    print(f"[Catalogs] Loaded {len(catalogs)} catalogs")
    return catalogs


def main(argv=None):
    parser = argparse.ArgumentParser(description="Discover key words of part catalogs")
    parser.add_argument("--catalogs", default=CATALOGS_PATH, help="TSV file with catalog_id and text columns")
    parser.add_argument("--top-k", type=int, default=DEFAULT_TOP_K, help="Number of key words per catalog")
    parser.add_argument("--ignore", action="append", default=[], metavar="WORD", help="Word to drop from counts (repeatable)")
    parser.add_argument("--catalog-id", default=None, help="Only print this catalog")
    args = parser.parse_args(argv)

    if not os.path.exists(args.catalogs):
        print(f"Error: {args.catalogs} not found")
        return 1

    catalogs = load_catalogs(args.catalogs)

    discovery = DevicePartDiscovery(ignored_words=args.ignore, top_k=args.top_k)
    discovery.build(catalogs)

    catalog_ids = [args.catalog_id] if args.catalog_id is not None else list(discovery.word_counts)
    for catalog_id in catalog_ids:
        if catalog_id not in discovery.word_counts:
            print(f"Error: catalog {catalog_id} not found in {args.catalogs}")
            return 1

        scores = discovery.get_tf_idf_scores(catalog_id)
        best = sorted(discovery.get_best_scored_words(catalog_id), key=lambda w: scores[w], reverse=True)

        print("\n" + "=" * 50)
        print(f"Catalog: {catalog_id}")
        print(f"Most frequent word: {discovery.get_most_frequent_word(catalog_id) or '-'}")
        print(f"Top {len(best)} words:")
        for word in best:
            print(f"- {word} | tfidf={scores[word]:.4f}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
