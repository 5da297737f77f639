"""
adapters/console.py
──────────────────────────────────────────────────────────────────────────────
Terminal implementations of QuerySource and ResultSink.

Output format (one query):

    Nearby Suburbs:
        SURRY HILLS  2010
        DULWICH HILL  2203

    Fringe Suburbs:
        BURWOOD HEIGHTS  2136

Everything goes to stdout via print(); diagnostics go through logging, which
the CLI points at stderr, so the transcript stays clean.
"""
from __future__ import annotations

import logging

from suburb_finder.config import messages
from suburb_finder.domain.models import SearchResults, SuburbResult

logger = logging.getLogger(__name__)


class ConsoleQuerySource:
    """Prompts for a suburb name and a postcode on stdin."""

    def read_query(self) -> tuple[str, str]:
        name = self._prompt(messages.SUBURB_PROMPT)
        postcode = self._prompt(messages.POSTCODE_PROMPT)
        return name, postcode

    @staticmethod
    def _prompt(text: str) -> str:
        # Exhausted stdin reads as an empty answer
        try:
            return input(text)
        except EOFError:
            logger.debug("stdin exhausted while prompting %r", text)
            return ""


class ConsoleResultSink:
    """Prints notices and ranked result sections to stdout."""

    def notice(self, message: str) -> None:
        print(message)

    def results(self, results: SearchResults) -> None:
        self._section(messages.NEARBY_HEADING, results.near)
        self._section(messages.FRINGE_HEADING, results.fringe)
        print("\n")

    @staticmethod
    def _section(heading: str, entries: list[SuburbResult]) -> None:
        print(heading)
        for entry in entries:
            print(messages.RESULT_LINE.format(suburb=entry.suburb, postcode=entry.postcode))
