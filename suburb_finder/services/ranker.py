"""
services/ranker.py
──────────────────────────────────────────────────────────────────────────────
Stage 2 of a lookup: order each candidate list by distance and keep the
closest MAX_RESULTS.

Python's sort is stable, so suburbs at the same distance keep their scan
(dataset) order and the output is deterministic under ties.
"""
from __future__ import annotations

import logging

from suburb_finder.domain.models import SuburbResult

logger = logging.getLogger(__name__)

MAX_RESULTS = 15


class ResultRanker:
    """Sort-and-truncate policy applied independently to near and fringe."""

    def __init__(self, max_results: int = MAX_RESULTS) -> None:
        self._max_results = max_results

    def rank(self, candidates: list[SuburbResult]) -> list[SuburbResult]:
        """Return the closest candidates, nearest first."""
        ranked = rank(candidates, self._max_results)
        logger.debug("Ranked %d candidates → %d", len(candidates), len(ranked))
        return ranked


def rank(candidates: list[SuburbResult], limit: int = MAX_RESULTS) -> list[SuburbResult]:
    """Stable ascending sort on distance, truncated to *limit* entries."""
    return sorted(candidates, key=lambda c: c.distance)[:limit]
