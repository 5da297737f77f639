"""
config/messages.py
──────────────────────────────────────────────────────────────────────────────
All user-facing console strings in one place.

Prompts and notices are matched verbatim by the e2e tests, so edit them here
and nowhere else.
"""
from __future__ import annotations

# ── Prompts ────────────────────────────────────────────────────────────────────
SUBURB_PROMPT = "Please enter a suburb name: "
POSTCODE_PROMPT = "Please enter the postcode: "

# ── Notices ────────────────────────────────────────────────────────────────────
_TRY_AGAIN = "Please check the details and try again"

UNKNOWN_COMBINATION = (
    "Incorrect suburb and postcode combination - {name} and {postcode}\n"
    + _TRY_AGAIN
)

NON_PHYSICAL_ADDRESS = (
    "The supplied suburb and postcode combination ({name}, {postcode}) "
    "is a non-physical address\n"
    + _TRY_AGAIN
)

NOTHING_FOUND = "Nothing found for {name}, {postcode}!!\n"

# ── Result sections ────────────────────────────────────────────────────────────
NEARBY_HEADING = "\nNearby Suburbs:"
FRINGE_HEADING = "\nFringe Suburbs:"
RESULT_LINE = "\t{suburb}  {postcode}"


def unknown_combination(name: str, postcode: str) -> str:
    return UNKNOWN_COMBINATION.format(name=name, postcode=postcode)


def non_physical_address(name: str, postcode: str) -> str:
    return NON_PHYSICAL_ADDRESS.format(name=name, postcode=postcode)


def nothing_found(name: str, postcode: str) -> str:
    return NOTHING_FOUND.format(name=name, postcode=postcode)
