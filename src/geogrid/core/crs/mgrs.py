"""
UTM <-> MGRS conversion.

An MGRS reference is a UTM coordinate whose easting/northing are split into
a lettered 100km grid square and the truncated digits inside that square.
Columns cycle through three 8-letter sets every three zones; rows cycle
through 20 letters every 2,000km, with even zones offset by five letters.
"""

import math
from typing import NamedTuple, Tuple

from geogrid.core.errors import InvariantViolationError
from geogrid.core.grid.tables import (
    GRID_ROW_CYCLE_METERS,
    GRID_SQUARE_SIZE,
    ZoneBand,
    column_set,
    row_sequence,
)

MAX_MGRS_PRECISION = 5
ROUND_OFF_DECIMALS = 6


class MGRSPoint(NamedTuple):
    """Unvalidated MGRS components."""

    zone_number: int
    zone_letter: str
    grid_col: str
    grid_row: str
    easting: int
    northing: int
    precision: int


def grid_unit(precision: int) -> int:
    """Size in meters of one digit step at a precision (0-5)."""
    return 10 ** (MAX_MGRS_PRECISION - precision)


def mgrs_from_utm(
    zone_number: int,
    zone_letter: str,
    easting: float,
    northing: float,
    precision: int = MAX_MGRS_PRECISION,
) -> MGRSPoint:
    """
    Derive the MGRS grid square and digits for a UTM coordinate.

    Digits are truncated, never rounded, so the reference names the cell
    containing the point. Values are first rounded to micrometers so that
    floating point noise a hair below a meter boundary does not drop a digit.

    Args:
        zone_number: UTM zone (1-60)
        zone_letter: Latitude band letter
        easting: Easting in meters
        northing: Northing in meters
        precision: Digits per axis (0-5)

    Returns:
        MGRSPoint

    Raises:
        ValueError: If the precision is out of range or the easting has no
            100km column
    """
    if not 0 <= precision <= MAX_MGRS_PRECISION:
        raise ValueError(f"MGRS precision must be between 0 and 5, got {precision}")

    easting = round(easting, ROUND_OFF_DECIMALS)
    northing = round(northing, ROUND_OFF_DECIMALS)

    columns = column_set(zone_number)
    col_index = int(math.floor(easting / GRID_SQUARE_SIZE)) - 1
    if not 0 <= col_index < len(columns):
        raise ValueError(f"Easting {easting} is outside the 100km grid columns")

    rows = row_sequence(zone_number)
    row_index = int(math.floor(northing / GRID_SQUARE_SIZE)) % len(rows)

    unit = grid_unit(precision)
    return MGRSPoint(
        zone_number=zone_number,
        zone_letter=zone_letter,
        grid_col=columns[col_index],
        grid_row=rows[row_index],
        easting=int(math.floor((easting % GRID_SQUARE_SIZE) / unit)),
        northing=int(math.floor((northing % GRID_SQUARE_SIZE) / unit)),
        precision=precision,
    )


def resolve_row_northing(zone_number: int, grid_row: str, band: ZoneBand) -> int:
    """
    Northing of the south edge of a grid row inside a latitude band.

    The row letter gives the northing modulo 2,000km; row cycles are added
    until the candidate reaches the band's minimum northing.

    Args:
        zone_number: UTM zone (1-60)
        grid_row: Row letter
        band: Latitude band the row must fall in

    Returns:
        Northing in meters

    Raises:
        ValueError: If the row letter is not a row letter
        InvariantViolationError: If the candidate overshoots the band by a
            full row cycle
    """
    rows = row_sequence(zone_number)
    candidate = rows.index(grid_row) * GRID_SQUARE_SIZE
    while candidate < band.northing_min:
        candidate += GRID_ROW_CYCLE_METERS

    # Cycling down is never needed: the loop above stops in the first cycle
    # at or above the band minimum, and every band is narrower than a cycle.
    if candidate >= band.northing_min + GRID_ROW_CYCLE_METERS:
        raise InvariantViolationError(
            f"Row {grid_row!r} overshot band {band.letter!r} by a full cycle; "
            "every band is narrower than a row cycle",
            details={"zone_number": zone_number, "candidate": candidate},
        )

    return candidate


def grid_square_base(
    zone_number: int, grid_col: str, grid_row: str, band: ZoneBand
) -> Tuple[int, int]:
    """
    UTM easting/northing of a grid square's south-west corner.

    Args:
        zone_number: UTM zone (1-60)
        grid_col: Column letter
        grid_row: Row letter
        band: Latitude band of the reference

    Returns:
        Tuple of (easting, northing) in meters

    Raises:
        ValueError: If a letter does not belong to the zone's sets
    """
    easting = (column_set(zone_number).index(grid_col) + 1) * GRID_SQUARE_SIZE
    northing = resolve_row_northing(zone_number, grid_row, band)
    return easting, northing


def utm_from_mgrs(
    zone_number: int,
    grid_col: str,
    grid_row: str,
    easting: int,
    northing: int,
    precision: int,
    band: ZoneBand,
) -> Tuple[int, int]:
    """
    Rebuild full UTM easting/northing from an MGRS reference.

    Args:
        zone_number: UTM zone (1-60)
        grid_col: Column letter
        grid_row: Row letter
        easting: Easting digits as an integer
        northing: Northing digits as an integer
        precision: Digits per axis (0-5)
        band: Latitude band of the reference

    Returns:
        Tuple of (easting, northing) in meters, the cell's south-west corner
    """
    base_easting, base_northing = grid_square_base(zone_number, grid_col, grid_row, band)
    unit = grid_unit(precision)
    return base_easting + easting * unit, base_northing + northing * unit
