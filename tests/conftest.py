import os, sys
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

from part_discovery.catalog import PartCatalog


@pytest.fixture
def catalogs():
    """Three small catalogs sharing a few words."""
    return [
        PartCatalog("screen", "display panel display glass bezel screw".split()),
        PartCatalog("battery", "battery cell cell cell screw connector".split()),
        PartCatalog("camera", "lens sensor lens screw connector".split()),
    ]
