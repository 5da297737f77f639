"""
ports/console_port.py
──────────────────────────────────────────────────────────────────────────────
Abstract interfaces for the interactive session's input and output.

SearchSession never touches stdin/stdout directly: it reads queries from a
QuerySource and writes notices and results to a ResultSink.  Tests drive the
session with in-memory fakes; the CLI wires in the console adapters.

Current implementation: ConsoleQuerySource / ConsoleResultSink
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from suburb_finder.domain.models import SearchResults


@runtime_checkable
class QuerySource(Protocol):
    """Supplies one (suburb name, postcode) pair per session cycle."""

    def read_query(self) -> tuple[str, str]:
        """Return the next raw query.

        Returns:
            (name, postcode) exactly as entered.  Both empty signals the end
            of the session; exhausted input must also return ("", "").
        """
        ...


@runtime_checkable
class ResultSink(Protocol):
    """Receives everything the session wants to show the user."""

    def notice(self, message: str) -> None:
        """Show a one-off message (unknown combination, nothing found, …)."""
        ...

    def results(self, results: SearchResults) -> None:
        """Render the ranked Nearby / Fringe sections."""
        ...
