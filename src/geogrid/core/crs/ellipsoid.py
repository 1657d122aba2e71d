"""
WGS84 ellipsoid constants and the series used by the transverse Mercator
projection.

All angles are radians unless a name says otherwise.
"""

import math

# WGS84 ellipsoid
A = 6378137.0  # semi-major axis (m)
F = 1 / 298.257223563  # flattening
E2 = F * (2 - F)  # first eccentricity squared
EP2 = E2 / (1 - E2)  # second eccentricity squared

# UTM projection
UTM_K0 = 0.9996
FALSE_EASTING = 500000.0
FALSE_NORTHING = 10000000.0  # southern hemisphere only
UTM_ZONE_WIDTH_DEG = 6


def central_meridian(zone_number: int) -> float:
    """
    Longitude of a UTM zone's central meridian.

    Args:
        zone_number: UTM zone (1-60)

    Returns:
        Central meridian in radians
    """
    return math.radians((zone_number - 1) * UTM_ZONE_WIDTH_DEG - 180 + 3)


def meridional_arc(lat_rad: float, a: float = A, e2: float = E2) -> float:
    """
    Distance along the meridian from the equator to a latitude.

    Four-term series expansion in the eccentricity.

    Args:
        lat_rad: Latitude in radians
        a: Semi-major axis
        e2: First eccentricity squared

    Returns:
        Arc length in meters (negative south of the equator)
    """
    e4 = e2 * e2
    e6 = e4 * e2
    return a * (
        (1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256) * lat_rad
        - (3 * e2 / 8 + 3 * e4 / 32 + 45 * e6 / 1024) * math.sin(2 * lat_rad)
        + (15 * e4 / 256 + 45 * e6 / 1024) * math.sin(4 * lat_rad)
        - (35 * e6 / 3072) * math.sin(6 * lat_rad)
    )


def footpoint_latitude(m: float, a: float = A, e2: float = E2) -> float:
    """
    Latitude whose meridional arc equals ``m``.

    Inverts meridional_arc() through the rectifying latitude ``mu`` and the
    series coefficients J1..J4 in ``e1``.

    Args:
        m: Meridional arc length in meters
        a: Semi-major axis
        e2: First eccentricity squared

    Returns:
        Footpoint latitude in radians
    """
    e4 = e2 * e2
    e6 = e4 * e2
    mu = m / (a * (1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256))

    root = math.sqrt(1 - e2)
    e1 = (1 - root) / (1 + root)

    j1 = 3 * e1 / 2 - 27 * e1**3 / 32
    j2 = 21 * e1**2 / 16 - 55 * e1**4 / 32
    j3 = 151 * e1**3 / 96
    j4 = 1097 * e1**4 / 512

    return (
        mu
        + j1 * math.sin(2 * mu)
        + j2 * math.sin(4 * mu)
        + j3 * math.sin(6 * mu)
        + j4 * math.sin(8 * mu)
    )


def prime_vertical_radius(sin_lat: float, a: float = A, e2: float = E2) -> float:
    """Radius of curvature in the prime vertical, ``a / sqrt(1 - e2 sin^2)``."""
    return a / math.sqrt(1 - e2 * sin_lat * sin_lat)


def meridian_radius(sin_lat: float, a: float = A, e2: float = E2) -> float:
    """Radius of curvature in the meridian."""
    return a * (1 - e2) / (1 - e2 * sin_lat * sin_lat) ** 1.5
