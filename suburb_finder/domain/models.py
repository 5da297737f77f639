"""
domain/models.py
──────────────────────────────────────────────────────────────────────────────
Pure domain objects: Pydantic models with no imports from adapters or ports.

These models are the lingua franca of the entire system:
  • adapters produce them (the JSON dataset) and consume them (the console)
  • services build the index, search and rank over them
  • the CLI serialises them with --json

Field aliases match the keys of the locality dataset (Pcode, Locality, …),
so a raw JSON record validates straight into a Suburb.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ── Enums ──────────────────────────────────────────────────────────────────────

class Band(str, Enum):
    """Distance band a candidate suburb falls into."""
    NEAR   = "near"     # (0, 10] km
    FRINGE = "fringe"   # (10, 50] km


# ── Locality records ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Coordinates:
    """A WGS84 point in decimal degrees."""

    latitude: Decimal
    longitude: Decimal


class Suburb(BaseModel):
    """A single locality from the reference dataset.

    Coordinates are optional because some localities are non-physical
    (PO-box-only postcodes); a record carries both or neither.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    postcode:  int                = Field(..., alias="Pcode", gt=0)
    locality:  str                = Field(..., alias="Locality", min_length=1)
    state:     str                = Field(..., alias="State")
    comments:  Optional[str]      = Field("", alias="Comments")
    category:  Optional[str]      = Field("", alias="Category")
    longitude: Optional[Decimal]  = Field(None, alias="Longitude")
    latitude:  Optional[Decimal]  = Field(None, alias="Latitude")

    @model_validator(mode="after")
    def check_coordinate_pair(self) -> Suburb:
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError(
                f"{self.locality} {self.postcode}: latitude and longitude "
                "must both be present or both be absent"
            )
        return self

    @property
    def coordinates(self) -> Coordinates | None:
        """The locality's position, or None for a non-physical address."""
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinates(latitude=self.latitude, longitude=self.longitude)

    @property
    def key(self) -> str:
        """Exact-match index key, e.g. ``SYDNEY-2000``."""
        return make_key(self.locality, str(self.postcode))


def make_key(name: str, postcode: str) -> str:
    """Build the composite, case-insensitive NAME-POSTCODE lookup key."""
    return f"{name.upper()}-{postcode.upper()}"


# ── Search output ──────────────────────────────────────────────────────────────

class SuburbResult(BaseModel):
    """A candidate suburb with its distance from the queried suburb."""

    model_config = ConfigDict(frozen=True)

    suburb:   str
    postcode: int
    distance: Decimal   # km, two decimal places

    @classmethod
    def from_suburb(cls, suburb: Suburb, distance: Decimal) -> SuburbResult:
        return cls(suburb=suburb.locality, postcode=suburb.postcode, distance=distance)


class SearchResults(BaseModel):
    """Ranked near and fringe lists for one query.

    This is the object serialised to JSON by ``suburb-finder --json``.
    """

    suburb:   str
    postcode: str
    near:     list[SuburbResult] = Field(default_factory=list)
    fringe:   list[SuburbResult] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when neither band produced a single suburb."""
        return not self.near and not self.fringe

    def to_dict(self) -> dict:
        """Serialise to a plain dict (distances become strings, JSON-safe)."""
        return self.model_dump(mode="json")
