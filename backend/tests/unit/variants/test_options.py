"""Unit tests for product finder option extraction

Tests cover:
- Chassis key derivation (shared with the variant filter)
- Distinct chassis options with first-seen labels
- Sorted distinct values per variant category
- Option cache invalidation
"""

import pytest

import variants.options as options_module
from variants.options import (
    ChassisOption,
    VariantOptionCache,
    chassis_key,
    extract_chassis_options,
    extract_variant_options,
)


@pytest.fixture
def variants(make_variant):
    return [
        make_variant("V1", chassis_id="A", name="MAN", details=["Euro 6", "6x4"], size="S", color="red"),
        make_variant("V2", chassis_id="B", name="Volvo", size="M"),
        make_variant("V3", chassis_id="A", name="MAN TGS", details=["6x4", "Euro 6"], size="S", color="blue"),
        make_variant("V4", size="L"),
    ]


class TestChassisKey:
    """Test chassis identity derivation"""

    def test_type_and_sorted_details(self, variants):
        assert chassis_key(variants[0].chassis_data) == "A_6x4|Euro 6"

    def test_detail_order_does_not_matter(self, variants):
        assert chassis_key(variants[0].chassis_data) == chassis_key(variants[2].chassis_data)

    def test_sorting_does_not_reorder_source_details(self, variants):
        chassis_key(variants[0].chassis_data)
        assert variants[0].chassis_data.chassis_details == ("Euro 6", "6x4")

    def test_no_details(self, variants):
        assert chassis_key(variants[1].chassis_data) == "B_no-details"

    def test_no_chassis(self):
        assert chassis_key(None) == "no-type_no-details"

    def test_no_type(self, make_variant):
        variant = make_variant("V9", details=["x"])
        assert chassis_key(variant.chassis_data) == "no-type_x"


class TestExtractChassisOptions:
    """Test distinct chassis options"""

    def test_distinct_options_first_seen(self, variants):
        options = extract_chassis_options(variants)

        assert [option.key for option in options] == ["A_6x4|Euro 6", "B_no-details"]
        assert options[0].label == "MAN (6x4, Euro 6)"
        assert options[0].chassis_data == variants[0].chassis_data
        assert options[1].label == "Volvo"

    def test_label_lists_details_sorted(self, make_variant):
        variant = make_variant("V1", chassis_id="A", name="MAN TGS", details=["Euro 6", "6x4", "Crane"])

        option = extract_chassis_options([variant])[0]
        assert option.label == "MAN TGS (6x4, Crane, Euro 6)"
        assert option.chassis_data.chassis_details == ("Euro 6", "6x4", "Crane")

    def test_label_falls_back_to_short_name_then_unknown(self, make_variant):
        from catalog.schemas import VariantCombination

        short = VariantCombination.model_validate({
            "combinationId": "S1",
            "chassisData": {"chassisType": {"_id": "C", "shortName": "SC"}, "chassisDetails": []},
        })
        unknown = make_variant("U1", details=["x"])

        options = extract_chassis_options([short, unknown])
        assert [option.label for option in options] == ["SC", "Unknown (x)"]

    def test_two_chassis_example(self, make_variant):
        v1 = make_variant("V1", chassis_id="A", size="S")
        v2 = make_variant("V2", chassis_id="B", size="S")
        assert len(extract_chassis_options([v1, v2])) == 2

    def test_empty(self):
        assert extract_chassis_options([]) == []
        assert extract_chassis_options(None) == []


class TestExtractVariantOptions:
    """Test category value sets"""

    def test_sorted_distinct_values(self, variants):
        assert extract_variant_options(variants) == {
            "size": ["L", "M", "S"],
            "color": ["blue", "red"],
        }

    def test_no_selections(self, make_variant):
        assert extract_variant_options([make_variant("V1")]) == {}
        assert extract_variant_options(None) == {}


class TestVariantOptionCache:
    """Test single-entry option cache"""

    def test_reuses_result_for_same_variants(self, variants, monkeypatch):
        calls = []
        original = options_module.extract_chassis_options

        def counting(items):
            calls.append(1)
            return original(items)

        monkeypatch.setattr(options_module, "extract_chassis_options", counting)
        cache = VariantOptionCache()

        first = cache.chassis_options(variants)
        second = cache.chassis_options(list(variants))
        cache.variant_options(variants)

        assert first == second
        assert len(calls) == 1

    def test_recomputes_when_variants_change(self, variants, make_variant):
        cache = VariantOptionCache()
        assert len(cache.chassis_options(variants)) == 2

        changed = variants + [make_variant("V5", chassis_id="C", name="Scania")]
        assert len(cache.chassis_options(changed)) == 3
        assert len(cache.chassis_options(variants[:1])) == 1

    def test_returned_lists_are_copies(self, variants):
        cache = VariantOptionCache()
        cache.variant_options(variants)["size"].append("XXL")
        assert cache.variant_options(variants)["size"] == ["L", "M", "S"]

    def test_option_is_frozen(self, variants):
        option = extract_chassis_options(variants)[0]
        assert isinstance(option, ChassisOption)
        with pytest.raises(AttributeError):
            option.key = "other"
