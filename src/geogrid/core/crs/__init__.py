"""
Geodetic math and the WGS84 / UTM / MGRS converters.
"""

from .ellipsoid import (
    A,
    E2,
    EP2,
    F,
    FALSE_EASTING,
    FALSE_NORTHING,
    UTM_K0,
    central_meridian,
    footpoint_latitude,
    meridian_radius,
    meridional_arc,
    prime_vertical_radius,
)
from .mgrs import (
    MGRSPoint,
    grid_square_base,
    grid_unit,
    mgrs_from_utm,
    resolve_row_northing,
    utm_from_mgrs,
)
from .utm import (
    UTMPoint,
    calculate_utm_central_meridian,
    detect_utm_zone,
    get_utm_letter_designator,
    normalize_longitude,
    utm_from_wgs,
    utm_northing_at,
    wgs_from_utm,
)

__all__ = [
    # Ellipsoid
    "A",
    "E2",
    "EP2",
    "F",
    "FALSE_EASTING",
    "FALSE_NORTHING",
    "UTM_K0",
    "central_meridian",
    "footpoint_latitude",
    "meridian_radius",
    "meridional_arc",
    "prime_vertical_radius",
    # UTM
    "UTMPoint",
    "calculate_utm_central_meridian",
    "detect_utm_zone",
    "get_utm_letter_designator",
    "normalize_longitude",
    "utm_from_wgs",
    "utm_northing_at",
    "wgs_from_utm",
    # MGRS
    "MGRSPoint",
    "grid_square_base",
    "grid_unit",
    "mgrs_from_utm",
    "resolve_row_northing",
    "utm_from_mgrs",
]
