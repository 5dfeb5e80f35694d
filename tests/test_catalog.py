from part_discovery.catalog import PartCatalog


def test_from_text_splits_on_whitespace_only():
    catalog = PartCatalog.from_text("c1", "Screw, screw\tM3  nut\n")
    assert catalog.catalog_id == "c1"
    assert catalog.get_catalog_words() == ["Screw,", "screw", "M3", "nut"]
    assert len(catalog) == 4


def test_from_text_handles_empty_and_none():
    assert PartCatalog.from_text("a", "").get_catalog_words() == []
    assert PartCatalog.from_text("b", None).get_catalog_words() == []


def test_catalog_equality():
    assert PartCatalog("a", ["x"]) == PartCatalog("a", iter(["x"]))
    assert PartCatalog("a", ["x"]) != PartCatalog("b", ["x"])
