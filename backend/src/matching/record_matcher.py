"""Relevance matching of a single catalogue record against a search term."""

from dataclasses import dataclass
from typing import Any, List

from catalog.schemas import CatalogueRecord
from .similarity import (
    CONTAINS_SCORE,
    EXACT_SCORE,
    SUBSEQUENCE_SCORE,
    is_subsequence,
    similarity,
)

# Minimum best-field score for a record to match
MATCH_THRESHOLD = 0.3


@dataclass(frozen=True)
class RecordMatch:
    """Match verdict for one record.

    Attributes:
        is_match: True if score reached the threshold
        score: Best field score (0.0-1.0)
    """
    is_match: bool
    score: float


def searchable_fields(record: CatalogueRecord) -> List[str]:
    """Collect the text fields of a record that take part in search.

    Order: body type name/short name, article, lead time, notes, then per
    size its type name/short name and custom label, then per chassis its
    type name/short name and every detail. Empty fields are dropped.
    """
    fields = []
    if record.body_type:
        fields.extend([record.body_type.name, record.body_type.short_name])
    fields.extend([record.article, record.lead_time, record.notes])

    for size in record.sizes:
        if size.size_type:
            fields.extend([size.size_type.name, size.size_type.short_name])
        fields.append(size.size_custom)

    for chassis in record.chassis:
        if chassis.chassis_type:
            fields.extend([chassis.chassis_type.name, chassis.chassis_type.short_name])
        fields.extend(chassis.chassis_details)

    return [field for field in fields if field]


def match_record(record: CatalogueRecord, term: Any, threshold: float = MATCH_THRESHOLD) -> RecordMatch:
    """Score a record against a search term.

    An empty (or whitespace-only) term matches every record with score 1.0.
    An exact field match short-circuits with 1.0; otherwise the best of
    containment (0.8), subsequence (0.6) and the similarity heuristic wins.

    Args:
        record: Catalogue record to score
        term: Raw search term (non-strings are coerced)
        threshold: Minimum score for a match

    Returns:
        RecordMatch with verdict and best score
    """
    term = term if isinstance(term, str) else ("" if term is None else str(term))
    term = term.strip().lower()
    if not term:
        return RecordMatch(is_match=True, score=EXACT_SCORE)

    max_score = 0.0
    for field in searchable_fields(record):
        field_lower = field.lower()

        if field_lower == term:
            return RecordMatch(is_match=True, score=EXACT_SCORE)

        if term in field_lower:
            candidate = CONTAINS_SCORE
        elif is_subsequence(term, field_lower):
            candidate = SUBSEQUENCE_SCORE
        else:
            candidate = similarity(term, field_lower)

        max_score = max(max_score, candidate)

    return RecordMatch(is_match=max_score >= threshold, score=max_score)
