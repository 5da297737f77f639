"""
domain/exceptions.py
──────────────────────────────────────────────────────────────────────────────
Custom exception hierarchy.

All exceptions are rooted at SuburbFinderError so callers can catch broadly
(except SuburbFinderError) or narrowly (except UnknownCombination).

None of these end an interactive session: SearchSession converts the lookup
errors into user-facing notices and keeps waiting for the next query.
"""
from __future__ import annotations


class SuburbFinderError(Exception):
    """Base exception for all application errors."""


class ConfigurationError(SuburbFinderError):
    """Raised when required configuration is missing or invalid."""


class DatasetError(SuburbFinderError):
    """Raised when the locality dataset cannot be read or parsed."""


class QueryError(SuburbFinderError):
    """Base for per-query lookup failures; carries the echoed query."""

    def __init__(self, name: str, postcode: str, message: str) -> None:
        self.name = name
        self.postcode = postcode
        super().__init__(message)


class UnknownCombination(QueryError):
    """The suburb name + postcode pair is not in the exact-match index."""

    def __init__(self, name: str, postcode: str) -> None:
        super().__init__(
            name, postcode, f"Unknown suburb and postcode combination: {name} and {postcode}"
        )


class NonPhysicalAddress(QueryError):
    """The locality exists but has no coordinates (e.g. PO-box-only postcode)."""

    def __init__(self, name: str, postcode: str) -> None:
        super().__init__(
            name, postcode, f"Non-physical address: {name}, {postcode}"
        )
