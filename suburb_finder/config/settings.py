"""
config/settings.py
──────────────────────────────────────────────────────────────────────────────
Single source of truth for all tuneable parameters.

All values can be overridden via environment variables or a .env file placed
at the project root.  The frozen dataclass ensures settings are never mutated
at runtime.

  SUBURBS_JSON_PATH  → point at a different locality dataset
  SUBURBS_ENCODING   → dataset file encoding
  LOG_LEVEL          → default logging level for the CLI

The search contract itself (band edges, early-exit bound, result limit) is
fixed in services/ and is deliberately not configurable.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root (two levels up from this file)
load_dotenv(Path(__file__).parent.parent.parent / ".env")


def _env(key: str, default: str) -> str:
    return os.getenv(key, default)


def _env_path(key: str, default: Path) -> Path:
    return Path(os.getenv(key, str(default)))


@dataclass(frozen=True)
class Settings:
    """Immutable application settings loaded from environment variables."""

    # ── Dataset ────────────────────────────────────────────────────────────
    suburbs_json_path: Path = field(
        default_factory=lambda: _env_path(
            "SUBURBS_JSON_PATH",
            Path(__file__).parent.parent.parent / "aus_suburbs.json",
        )
    )
    dataset_encoding: str = field(
        default_factory=lambda: _env("SUBURBS_ENCODING", "utf-8")
    )

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = field(
        default_factory=lambda: _env("LOG_LEVEL", "WARNING")
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Returns a cached singleton Settings instance.

    Use this everywhere instead of instantiating Settings() directly so a
    single object is shared across the entire process.
    """
    return Settings()
