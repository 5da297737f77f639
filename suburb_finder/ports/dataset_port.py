"""
ports/dataset_port.py
──────────────────────────────────────────────────────────────────────────────
Abstract interface for the locality reference dataset.

The dataset is read exactly once, at start-up, and handed to SuburbIndex.
Everything after that is in-memory, so the port has a single method.

Current implementation: JsonSuburbDataset (aus_suburbs.json)
To swap: write a new adapter (e.g. a CSV or SQLite reader) implementing this
Protocol and change ONE line in services/container.py.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from suburb_finder.domain.models import Suburb


@runtime_checkable
class SuburbDatasetPort(Protocol):
    """Contract for a source of locality records."""

    def load_suburbs(self) -> list[Suburb]:
        """Load every locality record, in dataset order.

        Returns:
            List of Suburb objects.  An empty list (not an exception) when
            the source is missing or unreadable; the rest of the system
            treats that as "no suburb ever matches".
        """
        ...
