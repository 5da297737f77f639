"""
services/finder.py
──────────────────────────────────────────────────────────────────────────────
Lookup pipeline: wires exact-match validation, NearbySearch and ResultRanker
into a single find(name, postcode) → SearchResults call.

This is the entry point for both the interactive session and the one-shot
CLI.  It knows nothing about the terminal or the dataset file; it only
speaks in domain objects and raises domain exceptions:

  UnknownCombination  the name + postcode pair is not in the index
  NonPhysicalAddress  the locality has no coordinates to measure from

An empty SearchResults (both lists empty) is a normal return value.
"""
from __future__ import annotations

import logging

from suburb_finder.domain.exceptions import NonPhysicalAddress, UnknownCombination
from suburb_finder.domain.models import SearchResults
from suburb_finder.services.nearby_search import NearbySearch
from suburb_finder.services.ranker import ResultRanker
from suburb_finder.services.suburb_index import SuburbIndex

logger = logging.getLogger(__name__)


class SuburbFinder:
    """Nearby / fringe suburb lookup over a prebuilt SuburbIndex.

    Build via services/container.py in application code.

    Args:
        index:  Immutable index over the full dataset.
        search: Band-classifying candidate scan (Stage 1).
        ranker: Sort-and-truncate policy (Stage 2).
    """

    def __init__(
        self,
        index: SuburbIndex,
        search: NearbySearch | None = None,
        ranker: ResultRanker | None = None,
    ) -> None:
        self._index = index
        self._search = search or NearbySearch()
        self._ranker = ranker or ResultRanker()

    @property
    def index(self) -> SuburbIndex:
        return self._index

    # ── Public API ─────────────────────────────────────────────────────────

    def find(self, name: str, postcode: str) -> SearchResults:
        """Find the near and fringe suburbs of *name* / *postcode*.

        Matching is case-insensitive; the returned SearchResults echo the
        normalised (upper-case) query.

        Raises:
            UnknownCombination: If the pair is not a known locality.
            NonPhysicalAddress: If the locality carries no coordinates.
        """
        name, postcode = normalise_query(name, postcode)
        logger.info("find | suburb=%r postcode=%r", name, postcode)

        home = self._index.find_exact(name, postcode)
        if home is None:
            raise UnknownCombination(name, postcode)
        if home.coordinates is None:
            raise NonPhysicalAddress(name, postcode)

        local_suburbs = self._index.candidates_for_region(home.state)
        near, fringe = self._search.search(home, local_suburbs)

        return SearchResults(
            suburb=name,
            postcode=postcode,
            near=self._ranker.rank(near),
            fringe=self._ranker.rank(fringe),
        )


# ── Helper ─────────────────────────────────────────────────────────────────

def normalise_query(name: str, postcode: str) -> tuple[str, str]:
    """Upper-case both query fields; whitespace is kept as typed."""
    return name.upper(), postcode.upper()
