"""
services/session.py
──────────────────────────────────────────────────────────────────────────────
Interactive query loop.

State machine:

    AWAITING_QUERY ──(name, postcode)──▶ AWAITING_QUERY
    AWAITING_QUERY ──("", "")──────────▶ TERMINATED   (absorbing)

Every cycle reads one query from the QuerySource, runs it through
SuburbFinder and reports exactly one outcome to the ResultSink:

  unknown combination   → notice, keep going
  non-physical address  → notice, keep going
  nothing in either band → notice, keep going
  otherwise             → ranked Nearby / Fringe sections

Per-query errors never end the session; only an empty query does.
"""
from __future__ import annotations

import logging
from enum import Enum

from suburb_finder.config import messages
from suburb_finder.domain.exceptions import NonPhysicalAddress, UnknownCombination
from suburb_finder.ports.console_port import QuerySource, ResultSink
from suburb_finder.services.finder import SuburbFinder

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    AWAITING_QUERY = "awaiting_query"
    TERMINATED     = "terminated"


class SearchSession:
    """Reads queries until an empty one arrives.

    Args:
        finder: Lookup pipeline over the loaded dataset.
        source: Where queries come from (console, scripted test input).
        sink:   Where notices and results go.
    """

    def __init__(
        self,
        finder: SuburbFinder,
        source: QuerySource,
        sink: ResultSink,
    ) -> None:
        self._finder = finder
        self._source = source
        self._sink = sink
        self._state = SessionState.AWAITING_QUERY

    @property
    def state(self) -> SessionState:
        return self._state

    # ── Public API ─────────────────────────────────────────────────────────

    def run(self) -> int:
        """Process queries until the session terminates.

        Returns:
            Number of (non-empty) queries handled.
        """
        handled = 0
        while self.step():
            handled += 1
        logger.info("Session terminated after %d queries", handled)
        return handled

    def step(self) -> bool:
        """Process a single query cycle.

        Returns:
            True if a query was handled, False once the session is (or has
            just become) TERMINATED.
        """
        if self._state is SessionState.TERMINATED:
            return False

        name, postcode = self._source.read_query()
        if not name and not postcode:
            self._state = SessionState.TERMINATED
            return False

        try:
            results = self._finder.find(name, postcode)
        except UnknownCombination as exc:
            logger.debug("Unknown combination: %s", exc)
            self._sink.notice(messages.unknown_combination(exc.name, exc.postcode))
        except NonPhysicalAddress as exc:
            logger.debug("Non-physical address: %s", exc)
            self._sink.notice(messages.non_physical_address(exc.name, exc.postcode))
        else:
            if results.is_empty:
                self._sink.notice(messages.nothing_found(results.suburb, results.postcode))
            else:
                self._sink.results(results)
        return True
