"""Approximate matching of free-text queries against directory keys."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from rapidfuzz import fuzz

DEFAULT_MATCH_THRESHOLD: Final = 0.4


@dataclass(frozen=True)
class MatchResult:
    """Best candidate for a query; lower score is a closer match."""

    key: str
    score: float


@dataclass(frozen=True)
class NoMatch:
    """No candidate scored within the threshold."""


NO_MATCH: Final = NoMatch()


def normalize_query(query: str) -> str:
    """Trim surrounding whitespace and lowercase for comparison."""

    return query.strip().lower()


def score_candidate(*, query: str, candidate: str) -> float:
    """Return distance in [0, 1] between a normalized query and a candidate key.

    A query that fits inside the candidate is aligned wherever it scores best,
    so the match position within the key is irrelevant. A query longer than the
    candidate is compared against the whole key.
    """

    normalized_candidate = candidate.strip().lower()
    if not query or not normalized_candidate:
        return 1.0

    if len(query) <= len(normalized_candidate):
        similarity = fuzz.partial_ratio(query, normalized_candidate)
    else:
        similarity = fuzz.ratio(query, normalized_candidate)
    return 1.0 - similarity / 100.0


def resolve_query(
    query: str,
    candidates: Sequence[str],
    threshold: float = DEFAULT_MATCH_THRESHOLD,
) -> MatchResult | NoMatch:
    """Resolve query to the closest candidate scoring at or below threshold.

    Ties on the best score go to the candidate listed first.
    """

    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"threshold must be within [0, 1], got {threshold}")

    normalized = normalize_query(query)
    if not normalized:
        return NO_MATCH

    best: MatchResult | None = None
    for candidate in candidates:
        score = score_candidate(query=normalized, candidate=candidate)
        if score > threshold:
            continue
        if best is None or score < best.score:
            best = MatchResult(key=candidate, score=score)

    if best is None:
        return NO_MATCH
    return best
