"""Application service resolving slash-command text to a directory expert."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from expert_finder.application.ports.expert_directory_port import (
    ExpertDirectoryError,
    ExpertDirectoryPort,
)
from expert_finder.domain.query_resolver import (
    DEFAULT_MATCH_THRESHOLD,
    MatchResult,
    normalize_query,
    resolve_query,
)

logger = logging.getLogger(__name__)


class LookupOutcome(StrEnum):
    """Supported expert lookup outcomes."""

    MATCH = "match"
    NO_MATCH = "no_match"
    EMPTY_QUERY = "empty_query"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class LookupResult:
    """Expert lookup result model."""

    outcome: LookupOutcome
    query: str
    domain_key: str | None = None
    expert: str | None = None
    score: float | None = None


class ExpertLookupService:
    """Resolve free text against the current expert directory contents."""

    def __init__(
        self,
        *,
        directory: ExpertDirectoryPort,
        threshold: float = DEFAULT_MATCH_THRESHOLD,
    ) -> None:
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be within [0, 1], got {threshold}")
        self._directory = directory
        self._threshold = threshold

    def lookup(self, text: str) -> LookupResult:
        """Look up the expert for text; directory failures fail closed."""

        query = normalize_query(text)
        if not query:
            return LookupResult(outcome=LookupOutcome.EMPTY_QUERY, query=query)

        try:
            experts = self._directory.load_experts()
        except ExpertDirectoryError:
            logger.exception("expert_directory_unavailable")
            return LookupResult(outcome=LookupOutcome.INTERNAL_ERROR, query=query)

        resolved = resolve_query(query, list(experts), self._threshold)
        if not isinstance(resolved, MatchResult):
            logger.info("expert_lookup_no_match query=%r", query)
            return LookupResult(outcome=LookupOutcome.NO_MATCH, query=query)

        logger.info(
            "expert_lookup_match query=%r domain_key=%s score=%.3f",
            query,
            resolved.key,
            resolved.score,
        )
        return LookupResult(
            outcome=LookupOutcome.MATCH,
            query=query,
            domain_key=resolved.key,
            expert=experts[resolved.key],
            score=resolved.score,
        )
