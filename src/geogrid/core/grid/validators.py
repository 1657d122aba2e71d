"""
Validator chains for UTM and MGRS tokens.

Each validator takes lexed GridTokens and returns an error message, or an
empty string when the tokens pass. Chains run in order and stop at the first
message (fail fast): later validators may assume earlier ones passed.
"""

import logging
from typing import Callable, Sequence

from geogrid.core.config import settings
from geogrid.core.crs.mgrs import resolve_row_northing
from geogrid.core.crs.utm import utm_northing_at, wgs_from_utm
from geogrid.core.grid.tables import (
    GRID_COLUMN_LETTERS,
    GRID_ROW_LETTERS,
    GRID_ZONE_LETTERS,
    GRID_ZONE_LIMITS,
    X_BAND_EXCLUDED_ZONES,
    allowed_columns,
    hemisphere_for_letter,
    zone_half_width,
)
from geogrid.models.tokens import GridTokens

logger = logging.getLogger(__name__)

Validator = Callable[[GridTokens], str]

# Digit limits for UTM values as written
MAX_UTM_EASTING_DIGITS = 6
MAX_UTM_NORTHING_DIGITS = 7
MIN_UTM_EASTING = 100000
MAX_UTM_EASTING = 900000
MAX_UTM_NORTHING = 10000000
MAX_MGRS_DIGITS = 5


def _missing_limits_message(zone_letter: str) -> str:
    return (
        f'Missing northing limits for zone letter "{zone_letter}"; an earlier '
        "validator should have rejected the zone letter"
    )


def missing_zone_number(tokens: GridTokens) -> str:
    if tokens.zone_number is None:
        return "No zone number found"
    return ""


def invalid_zone_number(tokens: GridTokens) -> str:
    if tokens.zone_number is not None and not 1 <= tokens.zone_number <= 60:
        return f'Invalid zone number "{tokens.zone_number}" - must be between 1 and 60'
    return ""


def missing_zone_letter(tokens: GridTokens) -> str:
    if not tokens.zone_letter:
        return "No zone letter found"
    return ""


def invalid_zone_letter(tokens: GridTokens) -> str:
    if tokens.zone_letter and tokens.zone_letter not in GRID_ZONE_LETTERS:
        return f'Invalid zone letter "{tokens.zone_letter}"'
    return ""


def exceptions_for_zone(tokens: GridTokens) -> str:
    """Band X does not exist in zones 32, 34, 36 and 60."""
    if tokens.zone_letter == "X" and tokens.zone_number in X_BAND_EXCLUDED_ZONES:
        return f'Invalid zone letter "X" for zone "{tokens.zone_number}"'
    return ""


def missing_grid_column(tokens: GridTokens) -> str:
    if not tokens.grid_col:
        return "No grid square column found"
    return ""


def invalid_grid_column(tokens: GridTokens) -> str:
    if tokens.grid_col not in GRID_COLUMN_LETTERS:
        return f'Invalid grid square column letter "{tokens.grid_col}"'
    return ""


def missing_grid_row(tokens: GridTokens) -> str:
    if not tokens.grid_row:
        return "No grid square row found"
    return ""


def invalid_grid_row(tokens: GridTokens) -> str:
    if tokens.grid_row not in GRID_ROW_LETTERS:
        return f'Invalid grid square row letter "{tokens.grid_row}"'
    return ""


def validate_precision_mgrs(tokens: GridTokens) -> str:
    """Digits must be numeric, split evenly and at most five per axis."""
    digits = tokens.easting + tokens.northing
    if digits and not digits.isdigit():
        return "Invalid (non-numeric) characters in easting/northing"
    if len(tokens.easting) != len(tokens.northing):
        return "Invalid easting/northing pair - must be even number of digits"
    if len(tokens.easting) > MAX_MGRS_DIGITS:
        return "Invalid easting/northing precision - greater than 5 digits"
    return ""


def validate_col_for_zone(tokens: GridTokens) -> str:
    """The column must exist in the zone, honoring Norway and Svalbard."""
    if tokens.zone_number is None:
        return ""
    if tokens.grid_col not in allowed_columns(tokens.zone_number, tokens.zone_letter):
        return (
            f'Invalid grid square column "{tokens.grid_col}" for zone '
            f'"{tokens.zone_number}{tokens.zone_letter}"'
        )
    return ""


def validate_row_for_zone(tokens: GridTokens) -> str:
    """
    The row must start inside the latitude band.

    The row letter fixes the northing modulo 2,000km. Cycling it up to the
    band's minimum gives the only candidate; it is valid when it starts below
    the band's top edge, measured where that edge reaches furthest north
    (the zone edge in the north, the central meridian in the south).
    """
    if tokens.zone_number is None:
        return ""

    band = GRID_ZONE_LIMITS.get(tokens.zone_letter)
    if band is None:
        return _missing_limits_message(tokens.zone_letter)

    candidate = resolve_row_northing(tokens.zone_number, tokens.grid_row, band)

    hemisphere = hemisphere_for_letter(tokens.zone_letter)
    if hemisphere == "N":
        offset = zone_half_width(tokens.zone_number, tokens.zone_letter)
    else:
        offset = 0.0
    top = utm_northing_at(band.lat_max, tokens.zone_number, offset, hemisphere)

    if candidate >= top:
        return (
            f'Invalid grid square row "{tokens.grid_row}" for zone '
            f'"{tokens.zone_number}{tokens.zone_letter}"'
        )
    return ""


def validate_precision_utm(tokens: GridTokens) -> str:
    """
    Easting/northing must be numeric, in range and inside the zone letter's band.

    The band check unprojects the point and compares its latitude with the
    band limits, allowing the tolerances from settings.
    """
    if not tokens.easting or not tokens.northing:
        return "No easting/northing pair found"
    if tokens.extra:
        return f'Unexpected characters after northing: "{tokens.extra}"'
    if not tokens.easting.isdigit():
        return "Invalid (non-numeric) characters in easting"
    if not tokens.northing.isdigit():
        return "Invalid (non-numeric) characters in northing"
    if len(tokens.easting) > MAX_UTM_EASTING_DIGITS:
        return "Invalid easting precision - greater than 6 digits"
    if len(tokens.northing) > MAX_UTM_NORTHING_DIGITS:
        return "Invalid northing precision - greater than 7 digits"

    easting = int(tokens.easting)
    northing = int(tokens.northing)
    if not MIN_UTM_EASTING <= easting < MAX_UTM_EASTING:
        return "Invalid easting value - outside expected range 100000-900000"

    band = GRID_ZONE_LIMITS.get(tokens.zone_letter)
    if band is None or tokens.zone_number is None:
        return _missing_limits_message(tokens.zone_letter)

    hemisphere = hemisphere_for_letter(tokens.zone_letter)
    if northing > MAX_UTM_NORTHING or (hemisphere == "S" and northing == 0):
        return (
            "Invalid northing value - outside expected range for zone letter "
            f'"{tokens.zone_letter}"'
        )

    latitude, _ = wgs_from_utm(tokens.zone_number, hemisphere, easting, northing)
    lowest = band.lat_min - settings.band_tolerance_south_deg
    highest = band.lat_max + settings.band_tolerance_north_deg
    if not lowest <= latitude <= highest:
        logger.debug(
            f"Northing {northing} puts latitude {latitude:.6f} outside band "
            f"{band.letter} ({band.lat_min}..{band.lat_max})"
        )
        return (
            "Invalid northing value - outside expected range for zone letter "
            f'"{tokens.zone_letter}"'
        )
    return ""


UTM_VALIDATORS: Sequence[Validator] = (
    missing_zone_number,
    invalid_zone_number,
    missing_zone_letter,
    invalid_zone_letter,
    exceptions_for_zone,
    validate_precision_utm,
)

MGRS_VALIDATORS: Sequence[Validator] = (
    missing_zone_number,
    invalid_zone_number,
    missing_zone_letter,
    invalid_zone_letter,
    exceptions_for_zone,
    missing_grid_column,
    invalid_grid_column,
    missing_grid_row,
    invalid_grid_row,
    validate_precision_mgrs,
    validate_col_for_zone,
    validate_row_for_zone,
)


def run_validators(tokens: GridTokens, validators: Sequence[Validator]) -> str:
    """
    Run a validator chain.

    Args:
        tokens: Lexed tokens
        validators: Ordered validators

    Returns:
        The first error message, or an empty string when all pass
    """
    for validator in validators:
        message = validator(tokens)
        if message:
            return message
    return ""
