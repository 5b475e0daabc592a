"""String similarity heuristics used by catalogue search.

Scoring rules, first match wins (case-insensitive):
- equal strings -> 1.0
- one contains the other -> 0.8
- shorter is an in-order subsequence of longer -> 0.6
- otherwise: characters of the shorter string found anywhere in the longer
  string (counted per position, repeats included) / len(longer)

The heuristic is cheap and deterministic, not an edit distance.
"""

from typing import Any

EXACT_SCORE = 1.0
CONTAINS_SCORE = 0.8
SUBSEQUENCE_SCORE = 0.6


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def is_subsequence(pattern: str, text: str) -> bool:
    """Check that every character of pattern appears in text, in order.

    Single left-to-right scan without backtracking. Case-insensitive.
    """
    pattern = _as_text(pattern).lower()
    text = _as_text(text).lower()

    pattern_idx = 0
    for char in text:
        if pattern_idx == len(pattern):
            break
        if char == pattern[pattern_idx]:
            pattern_idx += 1

    return pattern_idx == len(pattern)


def similarity(a: Any, b: Any) -> float:
    """Score two strings in [0, 1].

    Args:
        a: First string (non-strings are coerced)
        b: Second string (non-strings are coerced)

    Returns:
        Similarity score between 0.0 and 1.0
    """
    a = _as_text(a).lower()
    b = _as_text(b).lower()

    if a == b:
        return EXACT_SCORE
    if a in b or b in a:
        return CONTAINS_SCORE

    # Ties go to b as the longer string
    longer, shorter = (a, b) if len(a) > len(b) else (b, a)

    if len(longer) == 0:
        return EXACT_SCORE

    if is_subsequence(shorter, longer):
        return SUBSEQUENCE_SCORE

    matches = sum(1 for char in shorter if char in longer)
    return matches / len(longer)
