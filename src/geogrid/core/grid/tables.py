"""
Static MGRS/UTM grid tables.

Every table here is process-wide read-only data: strings, tuples,
frozensets and MappingProxyType views.
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple


class ZoneBand(NamedTuple):
    """Latitude band limits and the 100km-floored northings of its edges."""

    letter: str
    lat_min: float
    lat_max: float
    northing_min: int
    northing_max: int


# Latitude bands south to north; I and O are never used
GRID_ZONE_LETTERS = "CDEFGHJKLMNPQRSTUVWX"
NORTHERN_ZONE_LETTERS = frozenset("NPQRSTUVWX")

GRID_ZONE_LIMITS: Mapping[str, ZoneBand] = MappingProxyType(
    {
        band.letter: band
        for band in (
            ZoneBand("C", -80, -72, 1100000, 1900000),
            ZoneBand("D", -72, -64, 2000000, 2800000),
            ZoneBand("E", -64, -56, 2800000, 3600000),
            ZoneBand("F", -56, -48, 3700000, 4500000),
            ZoneBand("G", -48, -40, 4600000, 5400000),
            ZoneBand("H", -40, -32, 5500000, 6300000),
            ZoneBand("J", -32, -24, 6400000, 7200000),
            ZoneBand("K", -24, -16, 7300000, 8100000),
            ZoneBand("L", -16, -8, 8200000, 9000000),
            ZoneBand("M", -8, 0, 9100000, 9900000),
            ZoneBand("N", 0, 8, 0, 800000),
            ZoneBand("P", 8, 16, 800000, 1600000),
            ZoneBand("Q", 16, 24, 1700000, 2500000),
            ZoneBand("R", 24, 32, 2600000, 3400000),
            ZoneBand("S", 32, 40, 3500000, 4300000),
            ZoneBand("T", 40, 48, 4400000, 5200000),
            ZoneBand("U", 48, 56, 5300000, 6100000),
            ZoneBand("V", 56, 64, 6200000, 7000000),
            ZoneBand("W", 64, 72, 7000000, 7800000),
            ZoneBand("X", 72, 84, 7900000, 9100000),
        )
    }
)

# Zones where band X does not exist
X_BAND_EXCLUDED_ZONES = frozenset({32, 34, 36, 60})

# 100km square letters
GRID_SQUARE_SIZE = 100000
GRID_COLUMN_LETTERS = "ABCDEFGHJKLMNPQRSTUVWXYZ"
GRID_COLUMN_SETS = ("ABCDEFGH", "JKLMNPQR", "STUVWXYZ")
GRID_ROW_LETTERS = "ABCDEFGHJKLMNPQRSTUV"
GRID_ROW_CYCLE_METERS = 2000000

# Row letters by 100km northing index; even zones start at F
ODD_ZONE_ROWS = GRID_ROW_LETTERS
EVEN_ZONE_ROWS = GRID_ROW_LETTERS[5:] + GRID_ROW_LETTERS[:5]

# Norway: zone 32 in band V
NORWAY_ZONE = 32
NORWAY_BAND = "V"
NORWAY_COLUMNS = "JKLMN"

# Svalbard: the widened band X zones and the columns each one reaches
SVALBARD_BAND = "X"
SVALBARD_EXCLUDED_ZONES = frozenset({32, 34, 36})
SVALBARD_COLUMNS: Mapping[int, str] = MappingProxyType(
    {
        31: "CDEFG",
        33: "TUVWXY",
        35: "KLMNPQ",
        37: "BCDEF",
    }
)

# Half-width in degrees of a zone, widened where Norway and Svalbard apply
STANDARD_ZONE_HALF_WIDTH = 3.0
EXTENDED_ZONE_HALF_WIDTH = 6.0


def column_set(zone_number: int) -> str:
    """The 8-letter column set used by a zone."""
    return GRID_COLUMN_SETS[(zone_number - 1) % 3]


def row_sequence(zone_number: int) -> str:
    """The 20-letter row sequence used by a zone."""
    return EVEN_ZONE_ROWS if zone_number % 2 == 0 else ODD_ZONE_ROWS


def allowed_columns(zone_number: int, zone_letter: str) -> str:
    """
    Column letters that exist in a zone and band.

    Args:
        zone_number: UTM zone (1-60)
        zone_letter: Latitude band letter

    Returns:
        Allowed letters; empty when the zone/band combination does not exist
    """
    if zone_letter == NORWAY_BAND and zone_number == NORWAY_ZONE:
        return NORWAY_COLUMNS
    if zone_letter == SVALBARD_BAND:
        if zone_number in SVALBARD_EXCLUDED_ZONES:
            return ""
        if zone_number in SVALBARD_COLUMNS:
            return SVALBARD_COLUMNS[zone_number]
    return column_set(zone_number)


def zone_half_width(zone_number: int, zone_letter: str) -> float:
    """Degrees from the central meridian to the zone edge."""
    if zone_letter == NORWAY_BAND and zone_number == NORWAY_ZONE:
        return EXTENDED_ZONE_HALF_WIDTH
    if zone_letter == SVALBARD_BAND and zone_number in SVALBARD_COLUMNS:
        return EXTENDED_ZONE_HALF_WIDTH
    return STANDARD_ZONE_HALF_WIDTH


def hemisphere_for_letter(zone_letter: str) -> str:
    """N for bands N through X, S otherwise."""
    return "N" if zone_letter in NORTHERN_ZONE_LETTERS else "S"
