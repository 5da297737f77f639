"""
services/nearby_search.py
──────────────────────────────────────────────────────────────────────────────
Stage 1 of a lookup: scan the home suburb's region and bucket every other
locality into the near or fringe band.

Architecture:
  • classify_band() is a pure function: no I/O, easily unit-tested.
  • NearbySearch.search() is the single public entry point.

Band rule (km):
  near    0 < d ≤ 10
  fringe 10 < d ≤ 50
  anything else (0 for the home suburb itself, > 50, or the missing-
  coordinates sentinel) is dropped.

Early exit:
  The scan stops as soon as BOTH lists hold more than SCAN_LIMIT entries.
  600 candidates per band is enough for the top 15 to be present in
  practice, without walking every locality of a large state.  Candidates are
  visited in dataset order, not distance order, so which 600 are collected
  depends on that order.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal

from suburb_finder.domain.models import Band, Suburb, SuburbResult
from suburb_finder.services.distance import distance_between

logger = logging.getLogger(__name__)

NEAR_LIMIT_KM = Decimal(10)
FRINGE_LIMIT_KM = Decimal(50)
SCAN_LIMIT = 600


class NearbySearch:
    """Linear scan of a candidate list for near and fringe suburbs."""

    def __init__(self, scan_limit: int = SCAN_LIMIT) -> None:
        self._scan_limit = scan_limit

    # ── Public API ─────────────────────────────────────────────────────────

    def search(
        self,
        home: Suburb,
        candidates: Sequence[Suburb],
    ) -> tuple[list[SuburbResult], list[SuburbResult]]:
        """Collect unranked near and fringe candidates around *home*.

        Args:
            home:       The queried suburb (must have coordinates for any
                        candidate to qualify).
            candidates: Suburbs to consider, in the order to scan them.

        Returns:
            (near, fringe) lists in scan order, unsorted.
        """
        near: list[SuburbResult] = []
        fringe: list[SuburbResult] = []
        scanned = 0

        for scanned, suburb in enumerate(candidates, start=1):
            d = distance_between(home, suburb)
            band = classify_band(d)
            if band is Band.NEAR:
                near.append(SuburbResult.from_suburb(suburb, d))
            elif band is Band.FRINGE:
                fringe.append(SuburbResult.from_suburb(suburb, d))

            if len(near) > self._scan_limit and len(fringe) > self._scan_limit:
                logger.debug(
                    "Early exit after %d of %d candidates", scanned, len(candidates)
                )
                break

        logger.info(
            "Search complete | home=%s scanned=%d near=%d fringe=%d",
            home.key,
            scanned,
            len(near),
            len(fringe),
        )
        return near, fringe


# ── Pure function: band classification ────────────────────────────────────

def classify_band(distance_km: Decimal) -> Band | None:
    """Map a distance to its band, or None if it belongs to neither.

    Examples:
        >>> classify_band(Decimal("1.69"))
        <Band.NEAR: 'near'>
        >>> classify_band(Decimal("10.00"))
        <Band.NEAR: 'near'>
        >>> classify_band(Decimal("10.01"))
        <Band.FRINGE: 'fringe'>
        >>> classify_band(Decimal(0)) is None
        True
    """
    if Decimal(0) < distance_km <= NEAR_LIMIT_KM:
        return Band.NEAR
    if NEAR_LIMIT_KM < distance_km <= FRINGE_LIMIT_KM:
        return Band.FRINGE
    return None
