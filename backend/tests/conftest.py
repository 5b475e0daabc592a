"""Pytest fixtures for storefront engine testing.

Provides reusable test fixtures for:
- Catalogue records and variant combinations built from content API JSON
- In-memory key-value store
- Settings with test-friendly defaults

Usage:
    def test_add_twice(cart, dump_truck):
        cart.add(dump_truck)
        cart.add(dump_truck)
        assert cart.count() == 2
"""

import sys
from pathlib import Path

import pytest

# Adjust imports based on your project structure
backend_src = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(backend_src))

from catalog.schemas import CatalogueRecord, VariantCombination
from cart.aggregator import CartAggregator
from config import Settings
from infrastructure.storage.in_memory_store import InMemoryKeyValueStore


def _make_record(**overrides) -> CatalogueRecord:
    """Build a catalogue record from content API style keys."""
    data = {
        "_id": "P1",
        "bodyType": {"_id": "bt1", "name": "Dump Truck", "shortName": "DT"},
        "article": "",
        "leadTime": "",
        "notes": "",
        "sizes": [],
        "chassis": [],
        "shopCatalogue": [],
    }
    data.update(overrides)
    return CatalogueRecord.model_validate(data)


def _make_variant(combination_id: str, chassis_id=None, details=None, name=None, **selections) -> VariantCombination:
    """Build a variant combination; keyword arguments become variant selections."""
    data = {"combinationId": combination_id, "variantSelections": selections, "price": "ask"}
    if chassis_id is not None or details is not None or name is not None:
        chassis_type = {"_id": chassis_id, "name": name} if chassis_id is not None or name is not None else None
        data["chassisData"] = {"chassisType": chassis_type, "chassisDetails": details or []}
    return VariantCombination.model_validate(data)


@pytest.fixture
def make_record():
    """Factory fixture for catalogue records."""
    return _make_record


@pytest.fixture
def make_variant():
    """Factory fixture for variant combinations."""
    return _make_variant


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def cart(store) -> CartAggregator:
    return CartAggregator(store)


@pytest.fixture
def dump_truck() -> CatalogueRecord:
    return _make_record()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        CATALOGUE_API_URL="http://api.test/api",
        KV_STORE_BACKEND="memory",
        LOG_JSON=False,
    )
