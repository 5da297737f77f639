"""
tests/conftest.py
──────────────────────────────────────────────────────────────────────────────
Shared pytest fixtures and fake adapter implementations.

Fake adapters implement the Port Protocols via structural subtyping; they do
NOT inherit from any base class.  pytest uses them to test service logic
without a dataset file or a terminal.

Fixture hierarchy:
  nsw_suburbs    → a handful of real Sydney-area localities
  mock_dataset   → implements SuburbDatasetPort over nsw_suburbs
  index          → SuburbIndex built from mock_dataset
  finder         → SuburbFinder over index
  make_session   → factory: SearchSession fed by ScriptedQuerySource,
                   reporting into a RecordingSink
  dataset_file   → the same localities written to a JSON file on disk
  settings       → Settings pointing at dataset_file
"""
from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

import pytest

from suburb_finder.config.settings import Settings
from suburb_finder.domain.models import SearchResults, Suburb
from suburb_finder.services.finder import SuburbFinder
from suburb_finder.services.session import SearchSession
from suburb_finder.services.suburb_index import SuburbIndex


# ── Record helper ──────────────────────────────────────────────────────────

def make_suburb(
    locality: str,
    postcode: int,
    longitude: str | None = None,
    latitude: str | None = None,
    state: str = "NSW",
) -> Suburb:
    """Build a Suburb; coordinates are given as strings for exact Decimals."""
    return Suburb(
        postcode=postcode,
        locality=locality,
        state=state,
        longitude=Decimal(longitude) if longitude is not None else None,
        latitude=Decimal(latitude) if latitude is not None else None,
    )


SYDNEY          = make_suburb("SYDNEY",          2000, "151.2099", "-33.8697")
SURRY_HILLS     = make_suburb("SURRY HILLS",     2010, "151.21",   "-33.8849")
BURWOOD_HEIGHTS = make_suburb("BURWOOD HEIGHTS", 2136, "151.1039", "-33.8893")
DULWICH_HILL    = make_suburb("DULWICH HILL",    2203, "151.1382", "-33.9046")
ROSEBERY        = make_suburb("ROSEBERY",        2018, "151.2048", "-33.9186")
WAVERTON        = make_suburb("WAVERTON",        2060, "151.1988", "-33.8381")
CHATSWOOD_PO    = make_suburb("CHATSWOOD",       2057)   # PO boxes only
DARWIN          = make_suburb("DARWIN",          800,  "130.8434", "-12.4633", state="NT")


# ── Fake adapters ──────────────────────────────────────────────────────────

class MockDatasetAdapter:
    """In-memory SuburbDatasetPort."""

    def __init__(self, suburbs: list[Suburb]) -> None:
        self._suburbs = suburbs
        self.load_count = 0

    def load_suburbs(self) -> list[Suburb]:
        self.load_count += 1
        return list(self._suburbs)


class ScriptedQuerySource:
    """QuerySource that replays fixed lines, then behaves like closed stdin."""

    def __init__(self, *queries: tuple[str, str]) -> None:
        self._queries = list(queries)
        self.reads = 0

    def read_query(self) -> tuple[str, str]:
        self.reads += 1
        if self._queries:
            return self._queries.pop(0)
        return "", ""


class RecordingSink:
    """ResultSink that keeps everything it is given."""

    def __init__(self) -> None:
        self.notices: list[str] = []
        self.result_sets: list[SearchResults] = []

    def notice(self, message: str) -> None:
        self.notices.append(message)

    def results(self, results: SearchResults) -> None:
        self.result_sets.append(results)


# ── pytest fixtures ────────────────────────────────────────────────────────

@pytest.fixture
def nsw_suburbs() -> list[Suburb]:
    return [SYDNEY, SURRY_HILLS, BURWOOD_HEIGHTS, DULWICH_HILL, CHATSWOOD_PO, DARWIN]


@pytest.fixture
def mock_dataset(nsw_suburbs):
    return MockDatasetAdapter(nsw_suburbs)


@pytest.fixture
def index(mock_dataset) -> SuburbIndex:
    return SuburbIndex(mock_dataset.load_suburbs())


@pytest.fixture
def finder(index) -> SuburbFinder:
    return SuburbFinder(index)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_session(finder, sink):
    """Factory: ``make_session(("sydney", "2000"), ...)`` → SearchSession."""

    def _make(*queries: tuple[str, str]) -> SearchSession:
        return SearchSession(finder=finder, source=ScriptedQuerySource(*queries), sink=sink)

    return _make


@pytest.fixture
def dataset_file(tmp_path: Path) -> Path:
    """Write a small aus_suburbs.json in the original file layout."""
    records = [
        {"Pcode": 200, "Locality": "AUSTRALIAN NATIONAL UNIVERSITY", "State": "ACT",
         "Comments": "", "Category": "Post Office Boxes"},
        {"Pcode": 800, "Locality": "DARWIN", "State": "NT", "Comments": "",
         "Category": "Delivery Area", "Longitude": 130.8434, "Latitude": -12.4633},
        {"Pcode": 2000, "Locality": "SYDNEY", "State": "NSW", "Comments": "",
         "Category": "Delivery Area", "Longitude": 151.2099, "Latitude": -33.8697},
        {"Pcode": 2010, "Locality": "SURRY HILLS", "State": "NSW", "Comments": None,
         "Category": None, "Longitude": 151.21, "Latitude": -33.8849},
        {"Pcode": 2136, "Locality": "BURWOOD HEIGHTS", "State": "NSW",
         "Longitude": 151.1039, "Latitude": -33.8893},
    ]
    path = tmp_path / "aus_suburbs.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


@pytest.fixture
def settings(dataset_file: Path) -> Settings:
    """Return a Settings instance pointing at the temporary dataset."""
    return Settings(
        suburbs_json_path=dataset_file,
        dataset_encoding="utf-8",
        log_level="WARNING",
    )
