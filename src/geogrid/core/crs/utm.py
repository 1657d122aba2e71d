"""
UTM zone detection and the WGS84 <-> UTM transverse Mercator transforms.

The forward and inverse transforms are the classic series expansions
(USGS Professional Paper 1395) built on the helpers in ellipsoid.py. The
inverse is refined against the forward series so that projecting it back
reproduces the input grid coordinate. Neither transform validates; callers
serialize the result and parse it again.
"""

import math
from typing import NamedTuple, Optional, Tuple

from geogrid.core.crs.ellipsoid import (
    EP2,
    FALSE_EASTING,
    FALSE_NORTHING,
    UTM_K0,
    central_meridian,
    footpoint_latitude,
    meridian_radius,
    meridional_arc,
    prime_vertical_radius,
)
from geogrid.core.grid.tables import GRID_ZONE_LETTERS

# UTM latitude limits; beyond them the polar UPS grid applies
UTM_MIN_LATITUDE = -80.0
UTM_MAX_LATITUDE = 84.0

# Forward and inverse agree to this many meters after refinement
INVERSE_TOLERANCE_M = 1e-9
INVERSE_REFINE_STEPS = 4
_JACOBIAN_STEP_DEG = 1e-7


class UTMPoint(NamedTuple):
    """Unvalidated result of a forward projection."""

    zone_number: int
    zone_letter: str
    hemisphere: str
    easting: float
    northing: float


def normalize_longitude(longitude: float) -> float:
    """Wrap a longitude into [-180, 180)."""
    return (longitude + 180) % 360 - 180


def detect_utm_zone(longitude: float, latitude: float) -> Tuple[int, bool]:
    """
    Detect the UTM zone for WGS84 coordinates.

    Zones are numbered 1 to 60, each 6 degrees of longitude wide, starting
    at 180°W. Longitudes are wrapped, so 180°E falls in zone 1.

    Special cases:
    - Norway: zone 32 is widened to cover 3°E-12°E between 56°N and 64°N
    - Svalbard: between 72°N and 84°N only zones 31, 33, 35 and 37 are used

    Args:
        longitude: Longitude in decimal degrees
        latitude: Latitude in decimal degrees (-90 to 90)

    Returns:
        Tuple of (zone_number, is_northern_hemisphere)

    Raises:
        ValueError: If latitude is out of range
    """
    if not -90 <= latitude <= 90:
        raise ValueError(f"Latitude must be between -90 and 90, got {latitude}")

    longitude = normalize_longitude(longitude)
    is_northern = latitude >= 0

    zone_number = int(math.floor((longitude + 180) / 6)) + 1
    if zone_number > 60:
        zone_number = 1

    if 56.0 <= latitude < 64.0 and 3.0 <= longitude < 12.0:
        zone_number = 32

    if 72.0 <= latitude <= 84.0:
        if 0.0 <= longitude < 9.0:
            zone_number = 31
        elif 9.0 <= longitude < 21.0:
            zone_number = 33
        elif 21.0 <= longitude < 33.0:
            zone_number = 35
        elif 33.0 <= longitude < 42.0:
            zone_number = 37

    return zone_number, is_northern


def calculate_utm_central_meridian(zone_number: int) -> float:
    """
    Central meridian of a UTM zone.

    Args:
        zone_number: UTM zone number (1-60)

    Returns:
        Central meridian in decimal degrees

    Raises:
        ValueError: If zone_number is out of valid range
    """
    if not 1 <= zone_number <= 60:
        raise ValueError(f"UTM zone must be between 1 and 60, got {zone_number}")

    return -180 + (zone_number - 1) * 6 + 3


def get_utm_letter_designator(latitude: float) -> str:
    """
    Get the UTM latitude band letter.

    Bands are 8 degrees tall from 80°S, lettered C to X without I and O;
    band X stretches 12 degrees to 84°N.

    Args:
        latitude: Latitude in decimal degrees (-80 to 84)

    Returns:
        Letter designator (C-X)

    Raises:
        ValueError: If latitude is out of UTM range
    """
    if latitude < UTM_MIN_LATITUDE or latitude > UTM_MAX_LATITUDE:
        raise ValueError(f"UTM is only defined between 80°S and 84°N, got {latitude}")

    if latitude >= 72:
        return "X"

    index = int(math.floor((latitude + 80) / 8))
    return GRID_ZONE_LETTERS[index]


def _forward_series(
    latitude: float, longitude: float, zone_number: int
) -> Tuple[float, float]:
    """Forward series for one zone, without the southern false northing."""
    lat = math.radians(latitude)
    sin_lat = math.sin(lat)
    cos_lat = math.cos(lat)
    tan_lat = math.tan(lat)

    n = prime_vertical_radius(sin_lat)
    t = tan_lat * tan_lat
    c = EP2 * cos_lat * cos_lat
    a = cos_lat * (math.radians(longitude) - central_meridian(zone_number))
    m = meridional_arc(lat)

    easting = (
        UTM_K0
        * n
        * (
            a
            + (1 - t + c) * a**3 / 6
            + (5 - 18 * t + t * t + 72 * c - 58 * EP2) * a**5 / 120
        )
        + FALSE_EASTING
    )
    northing = UTM_K0 * (
        m
        + n
        * tan_lat
        * (
            a * a / 2
            + (5 - t + 9 * c + 4 * c * c) * a**4 / 24
            + (61 - 58 * t + t * t + 600 * c - 330 * EP2) * a**6 / 720
        )
    )
    return easting, northing


def _transverse_mercator(
    latitude: float, longitude: float, zone_number: int
) -> Tuple[float, float]:
    """Forward projection for one zone; returns (easting, northing) in meters."""
    easting, northing = _forward_series(latitude, longitude, zone_number)
    if latitude < 0:
        northing += FALSE_NORTHING
    return easting, northing


def utm_from_wgs(latitude: float, longitude: float) -> UTMPoint:
    """
    Project a WGS84 coordinate to UTM.

    Args:
        latitude: Latitude in decimal degrees (-80 to 84)
        longitude: Longitude in decimal degrees

    Returns:
        UTMPoint with unrounded easting/northing

    Raises:
        ValueError: If latitude is outside the UTM range
    """
    longitude = normalize_longitude(longitude)
    zone_number, is_northern = detect_utm_zone(longitude, latitude)
    zone_letter = get_utm_letter_designator(latitude)
    easting, northing = _transverse_mercator(latitude, longitude, zone_number)

    return UTMPoint(
        zone_number=zone_number,
        zone_letter=zone_letter,
        hemisphere="N" if is_northern else "S",
        easting=easting,
        northing=northing,
    )


def wgs_from_utm(
    zone_number: int, hemisphere: str, easting: float, northing: float
) -> Tuple[float, float]:
    """
    Unproject a UTM coordinate to WGS84.

    Args:
        zone_number: UTM zone (1-60)
        hemisphere: "N" or "S"
        easting: Easting in meters
        northing: Northing in meters

    Returns:
        Tuple of (latitude, longitude) in decimal degrees
    """
    x = easting - FALSE_EASTING
    y = northing if hemisphere == "N" else northing - FALSE_NORTHING

    phi1 = footpoint_latitude(y / UTM_K0)
    sin_phi1 = math.sin(phi1)
    cos_phi1 = math.cos(phi1)
    tan_phi1 = math.tan(phi1)

    n1 = prime_vertical_radius(sin_phi1)
    r1 = meridian_radius(sin_phi1)
    t1 = tan_phi1 * tan_phi1
    c1 = EP2 * cos_phi1 * cos_phi1
    d = x / (n1 * UTM_K0)

    lat = phi1 - (n1 * tan_phi1 / r1) * (
        d * d / 2
        - (5 + 3 * t1 + 10 * c1 - 4 * c1 * c1 - 9 * EP2) * d**4 / 24
        + (61 + 90 * t1 + 298 * c1 + 45 * t1 * t1 - 252 * EP2 - 3 * c1 * c1)
        * d**6
        / 720
    )
    lon = central_meridian(zone_number) + (
        d
        - (1 + 2 * t1 + c1) * d**3 / 6
        + (5 - 2 * c1 + 28 * t1 - 3 * c1 * c1 + 8 * EP2 + 24 * t1 * t1) * d**5 / 120
    ) / cos_phi1

    latitude, longitude = _refine_inverse(
        math.degrees(lat), math.degrees(lon), zone_number, easting, y
    )
    return latitude, normalize_longitude(longitude)


def _refine_inverse(
    latitude: float, longitude: float, zone_number: int, easting: float, northing: float
) -> Tuple[float, float]:
    """
    Newton steps that make the inverse agree with the forward series.

    The two series truncate at different orders and disagree by up to a few
    centimeters near zone edges, which is enough to move a truncated MGRS
    digit. Each step solves the forward series' finite difference Jacobian;
    northing excludes the false northing.
    """
    for _ in range(INVERSE_REFINE_STEPS):
        e0, n0 = _forward_series(latitude, longitude, zone_number)
        de = easting - e0
        dn = northing - n0
        if abs(de) < INVERSE_TOLERANCE_M and abs(dn) < INVERSE_TOLERANCE_M:
            break

        e_lat, n_lat = _forward_series(latitude + _JACOBIAN_STEP_DEG, longitude, zone_number)
        e_lon, n_lon = _forward_series(latitude, longitude + _JACOBIAN_STEP_DEG, zone_number)
        de_dlat = (e_lat - e0) / _JACOBIAN_STEP_DEG
        dn_dlat = (n_lat - n0) / _JACOBIAN_STEP_DEG
        de_dlon = (e_lon - e0) / _JACOBIAN_STEP_DEG
        dn_dlon = (n_lon - n0) / _JACOBIAN_STEP_DEG

        det = de_dlat * dn_dlon - de_dlon * dn_dlat
        latitude += (dn_dlon * de - de_dlon * dn) / det
        longitude += (de_dlat * dn - dn_dlat * de) / det

    return latitude, longitude


def utm_northing_at(
    latitude: float,
    zone_number: int,
    lon_offset: float = 0.0,
    hemisphere: Optional[str] = None,
) -> float:
    """
    Northing of a latitude at a given distance from the central meridian.

    Turns the latitude band table into northing limits.

    Args:
        latitude: Latitude in decimal degrees
        zone_number: UTM zone (1-60)
        lon_offset: Degrees east of the zone's central meridian
        hemisphere: "S" forces the false northing, so the equator maps to
            10,000,000; by default it applies south of the equator only

    Returns:
        Northing in meters
    """
    longitude = calculate_utm_central_meridian(zone_number) + lon_offset
    northing = _transverse_mercator(latitude, longitude, zone_number)[1]
    if hemisphere == "S" and latitude >= 0:
        northing += FALSE_NORTHING
    return northing
