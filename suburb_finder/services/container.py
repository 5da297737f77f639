"""
services/container.py
──────────────────────────────────────────────────────────────────────────────
Dependency Injection container.

THIS IS THE ONLY FILE THAT NAMES CONCRETE ADAPTER CLASSES.

  Dataset  → JsonSuburbDataset   (SUBURBS_JSON_PATH)
  Console  → ConsoleQuerySource / ConsoleResultSink

Replace the dataset source:
  - from suburb_finder.adapters.json_dataset import JsonSuburbDataset
  + from suburb_finder.adapters.sqlite_dataset import SqliteSuburbDataset

Caching:
  get_finder() is wrapped in @lru_cache, so the dataset is read and the
  index built once per distinct Settings value for the life of the process.
"""
from __future__ import annotations

import logging
from functools import lru_cache

from suburb_finder.adapters.console import ConsoleQuerySource, ConsoleResultSink
from suburb_finder.adapters.json_dataset import JsonSuburbDataset
from suburb_finder.config.settings import Settings, get_settings
from suburb_finder.ports.console_port import ResultSink
from suburb_finder.ports.dataset_port import SuburbDatasetPort
from suburb_finder.services.finder import SuburbFinder
from suburb_finder.services.session import SearchSession
from suburb_finder.services.suburb_index import SuburbIndex

logger = logging.getLogger(__name__)


def _build_dataset(settings: Settings) -> SuburbDatasetPort:
    logger.info("Dataset: JSON (%s)", settings.suburbs_json_path)
    return JsonSuburbDataset(settings)


@lru_cache(maxsize=4)
def get_finder(settings: Settings | None = None) -> SuburbFinder:
    """Build and return the SuburbFinder for *settings*.

    Args:
        settings: Settings to use; defaults to get_settings().

    Returns:
        SuburbFinder over a fully built, immutable SuburbIndex.  If the
        dataset could not be loaded the index is empty and every lookup
        reports an unknown combination.
    """
    settings = settings or get_settings()
    dataset = _build_dataset(settings)
    index = SuburbIndex(dataset.load_suburbs())
    if not len(index):
        logger.warning("SuburbIndex is empty; every lookup will fail")
    return SuburbFinder(index)


def build_console_session(finder: SuburbFinder) -> SearchSession:
    """Wire *finder* to stdin/stdout for an interactive session."""
    return SearchSession(
        finder=finder,
        source=ConsoleQuerySource(),
        sink=build_result_sink(),
    )


def build_result_sink() -> ResultSink:
    """Return the stdout sink used by single-lookup mode."""
    return ConsoleResultSink()
