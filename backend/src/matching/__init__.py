"""Matching module for catalogue search.

This module implements free-text relevance search combining:
- A cheap string similarity heuristic
- Per-record field scanning with a low match threshold
- Stable ranking by descending score
"""

from .similarity import similarity, is_subsequence
from .record_matcher import RecordMatch, MATCH_THRESHOLD, match_record, searchable_fields
from .search import search_catalogue

__all__ = [
    "similarity",
    "is_subsequence",
    "RecordMatch",
    "MATCH_THRESHOLD",
    "match_record",
    "searchable_fields",
    "search_catalogue",
]
