"""
services/suburb_index.py
──────────────────────────────────────────────────────────────────────────────
In-memory lookup structures built once from the loaded dataset.

  exact index  NAME-POSTCODE → Suburb   (validates a user query)
  by region    STATE → (Suburb, …)      (candidate pool for a search)

Both maps are frozen behind MappingProxyType / tuples as soon as the
constructor returns; the index is read-only for the rest of the process.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType

from suburb_finder.domain.models import Suburb, make_key

logger = logging.getLogger(__name__)


class SuburbIndex:
    """Exact-match and per-region views over the locality dataset.

    Args:
        suburbs: Every loaded record, in dataset order.  May be empty.
    """

    def __init__(self, suburbs: Iterable[Suburb]) -> None:
        exact: dict[str, Suburb] = {}
        by_region: dict[str, list[Suburb]] = {}
        for suburb in suburbs:
            # Dataset is assumed key-unique; on a clash the later record wins
            exact[suburb.key] = suburb
            by_region.setdefault(suburb.state, []).append(suburb)

        self._exact = MappingProxyType(exact)
        self._by_region = MappingProxyType(
            {state: tuple(members) for state, members in by_region.items()}
        )
        logger.info(
            "SuburbIndex built | suburbs=%d regions=%d",
            len(self._exact),
            len(self._by_region),
        )

    # ── Public API ─────────────────────────────────────────────────────────

    def find_exact(self, name: str, postcode: str) -> Suburb | None:
        """Return the record for *name* + *postcode* (any case), or None."""
        return self._exact.get(make_key(name, postcode))

    def candidates_for_region(self, region: str) -> tuple[Suburb, ...]:
        """Return every record in *region*, in load order; () if unknown."""
        return self._by_region.get(region, ())

    @property
    def regions(self) -> list[str]:
        """State codes present in the index, sorted."""
        return sorted(self._by_region)

    def __len__(self) -> int:
        return len(self._exact)
