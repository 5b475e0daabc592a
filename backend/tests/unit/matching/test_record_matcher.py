"""Unit tests for catalogue record matching

Tests cover:
- Searchable field collection (body type, sizes, chassis)
- Exact short-circuit, containment, subsequence and overlap scores
- Match threshold
"""

import pytest

from matching.record_matcher import match_record, searchable_fields, RecordMatch


class TestSearchableFields:
    """Test which record fields take part in search"""

    def test_fields_in_order_and_empty_skipped(self, make_record):
        record = make_record(
            article="ART-1",
            notes="Heavy duty",
            sizes=[{"sizeType": {"name": "Large", "shortName": "L"}, "sizeCustom": "12m3"}],
            chassis=[{"chassisType": {"_id": "c1", "name": "MAN TGS", "shortName": ""}, "chassisDetails": ["6x4", "Euro 6"]}],
        )

        assert searchable_fields(record) == [
            "Dump Truck", "DT", "ART-1", "Heavy duty",
            "Large", "L", "12m3",
            "MAN TGS", "6x4", "Euro 6",
        ]

    def test_missing_body_type(self, make_record):
        record = make_record(bodyType=None, article="A")
        assert searchable_fields(record) == ["A"]


class TestMatchRecord:
    """Test match verdicts and scores"""

    def test_empty_term_matches_everything(self, make_record):
        assert match_record(make_record(), "") == RecordMatch(is_match=True, score=1.0)
        assert match_record(make_record(), "   ") == RecordMatch(is_match=True, score=1.0)

    def test_substring_of_body_type(self, make_record):
        result = match_record(make_record(), "dump")
        assert result.is_match is True
        assert result.score == 0.8

    def test_exact_match_is_trimmed_and_case_insensitive(self, make_record):
        assert match_record(make_record(), "  DUMP TRUCK ").score == 1.0

    def test_exact_match_on_short_name(self, make_record):
        assert match_record(make_record(), "dt").score == 1.0

    def test_exact_match_on_size_custom_label(self, make_record):
        record = make_record(sizes=[{"sizeCustom": "12m3"}])
        assert match_record(record, "12M3").score == 1.0

    def test_exact_match_on_chassis_detail(self, make_record):
        record = make_record(chassis=[{"chassisType": {"_id": "c1", "name": "Volvo"}, "chassisDetails": ["6x4"]}])
        assert match_record(record, "6x4").score == 1.0

    def test_subsequence_match(self, make_record):
        result = match_record(make_record(bodyType={"name": "Dump Truck"}), "dmptrk")
        assert result.is_match is True
        assert result.score == 0.6

    def test_field_contained_in_longer_term(self, make_record):
        result = match_record(make_record(bodyType={"name": "Dump Truck"}), "dump trucks")
        assert result.score == 0.8

    def test_overlap_match_above_threshold(self, make_record):
        """'d' and 'u' of "dux" occur in "dump": 2/4"""
        result = match_record(make_record(bodyType={"name": "Dump"}), "dux")
        assert result.is_match is True
        assert result.score == pytest.approx(0.5)

    def test_unrelated_term_is_rejected(self, make_record):
        result = match_record(make_record(), "xyz")
        assert result.is_match is False
        assert result.score < 0.3

    def test_record_without_text_fields(self, make_record):
        result = match_record(make_record(bodyType=None), "dump")
        assert result == RecordMatch(is_match=False, score=0.0)

    def test_custom_threshold(self, make_record):
        result = match_record(make_record(bodyType={"name": "Dump"}), "dux", threshold=0.6)
        assert result.is_match is False

    def test_none_term_matches_everything(self, make_record):
        assert match_record(make_record(), None).is_match is True
