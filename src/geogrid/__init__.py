"""
geogrid - parse, validate and convert WGS84, UTM and MGRS coordinates.
"""

from geogrid.core.errors import (
    EmptyInputError,
    GeoGridException,
    InvariantViolationError,
    ParseError,
    ValidationError,
)
from geogrid.core.factory import create_coordinate, create_mgrs, create_utm, create_wgs
from geogrid.models.coordinates import (
    CoordinateOrder,
    CoordinateSystem,
    Hemisphere,
    MGRSCoordinate,
    UTMCoordinate,
    UTMPrecision,
    WGSCoordinate,
    WGSFormat,
)

__version__ = "0.1.0"

__all__ = [
    # Factories
    "create_coordinate",
    "create_mgrs",
    "create_utm",
    "create_wgs",
    # Coordinates
    "CoordinateOrder",
    "CoordinateSystem",
    "Hemisphere",
    "MGRSCoordinate",
    "UTMCoordinate",
    "UTMPrecision",
    "WGSCoordinate",
    "WGSFormat",
    # Errors
    "EmptyInputError",
    "GeoGridException",
    "InvariantViolationError",
    "ParseError",
    "ValidationError",
]
