"""
adapters/json_dataset.py
──────────────────────────────────────────────────────────────────────────────
Implements SuburbDatasetPort by reading the aus_suburbs.json reference file.

File layout:
  A single JSON array of objects, one per locality:
    {"Pcode": 2000, "Locality": "SYDNEY", "State": "NSW",
     "Comments": "", "Category": "Delivery Area",
     "Longitude": 151.2099, "Latitude": -33.8697}
  Longitude / Latitude are absent or null for non-physical localities.

Loading behaviour:
  - Numbers with a fraction are parsed straight to Decimal, so coordinates
    keep the exact digits written in the file.
  - A missing, unreadable or non-array file is logged and yields [].
  - Individual records that fail validation are skipped with a warning;
    the rest of the file still loads.
"""
from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from suburb_finder.config.settings import Settings
from suburb_finder.domain.exceptions import DatasetError
from suburb_finder.domain.models import Suburb

logger = logging.getLogger(__name__)


class JsonSuburbDataset:
    """JSON-file implementation of SuburbDatasetPort.

    Injected into SuburbIndex construction via services/container.py.
    """

    def __init__(self, settings: Settings) -> None:
        self._path = Path(settings.suburbs_json_path)
        self._encoding = settings.dataset_encoding
        logger.debug("JsonSuburbDataset ready | path=%s", self._path)

    # ── SuburbDatasetPort implementation ───────────────────────────────────

    def load_suburbs(self) -> list[Suburb]:
        """Load and validate every record in the dataset file.

        Returns an empty list if the file cannot be read at all.
        """
        try:
            raw_records = self._read_records()
        except DatasetError as exc:
            logger.error("An error occurred while loading the suburbs: %s", exc)
            return []

        suburbs: list[Suburb] = []
        for position, record in enumerate(raw_records):
            try:
                suburbs.append(Suburb.model_validate(record))
            except ValidationError as exc:
                logger.warning(
                    "Skipping malformed suburb record #%d: %s",
                    position,
                    exc.errors()[0]["msg"] if exc.errors() else exc,
                )

        logger.info(
            "Suburbs loaded: %d of %d records from %s",
            len(suburbs),
            len(raw_records),
            self._path,
        )
        return suburbs

    # ── File helpers ───────────────────────────────────────────────────────

    def _read_records(self) -> list[Any]:
        """Parse the file into a list of raw record dicts.

        Raises:
            DatasetError: If the file is missing, unreadable, not JSON, or
                          not a top-level array.
        """
        if not self._path.is_file():
            raise DatasetError(f"dataset not found at: {self._path}")
        try:
            with self._path.open(encoding=self._encoding) as fh:
                data = json.load(fh, parse_float=Decimal)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DatasetError(f"cannot read {self._path}: {exc}") from exc

        if not isinstance(data, list):
            raise DatasetError(
                f"expected a JSON array in {self._path}, got {type(data).__name__}"
            )
        return data
