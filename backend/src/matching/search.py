"""Free-text catalogue search."""

import logging
from typing import Any, Iterable, List, Optional

from catalog.schemas import CatalogueRecord
from .record_matcher import MATCH_THRESHOLD, match_record

logger = logging.getLogger(__name__)


def search_catalogue(
    records: Optional[Iterable[CatalogueRecord]],
    term: Any,
    threshold: float = MATCH_THRESHOLD,
) -> List[CatalogueRecord]:
    """Filter records by relevance to term and rank them best first.

    Pure and idempotent: the input is never mutated. An empty or
    whitespace-only term returns the records in their original order.
    Records with equal scores keep their relative input order.

    Args:
        records: Catalogue records (None is treated as empty)
        term: Search term
        threshold: Minimum relevance score for a record to be kept

    Returns:
        Matching records sorted by descending score
    """
    records = list(records or ())
    if term is None:
        term = ""
    elif not isinstance(term, str):
        term = str(term)
    if not term.strip():
        return records

    scored = []
    for record in records:
        result = match_record(record, term, threshold=threshold)
        if result.is_match:
            scored.append((result.score, record))

    # list.sort is stable, equal scores keep input order
    scored.sort(key=lambda item: item[0], reverse=True)

    logger.debug(
        "Catalogue search finished",
        extra={"term": term, "result_count": len(scored)},
    )
    return [record for _, record in scored]
