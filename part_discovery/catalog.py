"""
Part catalog module.
A catalog is the ordered word sequence of one edition of a part catalog.
"""


class PartCatalog:
    """
    One part catalog.

    Args:
        catalog_id: catalog identifier.
        words: ordered word tokens, already tokenized by the caller.
    """

    def __init__(self, catalog_id, words):
        self.catalog_id = catalog_id
        self.words = list(words)

    @classmethod
    def from_text(cls, catalog_id, text):
        """Build a catalog by splitting text on whitespace."""
        return cls(catalog_id, (text or "").split())

    def get_catalog_words(self):
        return self.words

    def __len__(self):
        return len(self.words)

    def __eq__(self, other):
        if not isinstance(other, PartCatalog):
            return NotImplemented
        return self.catalog_id == other.catalog_id and self.words == other.words

    def __repr__(self):
        return f"PartCatalog(catalog_id={self.catalog_id!r}, words={len(self.words)})"
