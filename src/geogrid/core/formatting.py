"""
String formatting for coordinates.

Every string produced here parses back through the matching create_*
factory, which is what the cross-format conversions rely on.
"""

import math
from typing import Optional, Union

from geogrid.core.config import settings
from geogrid.models.coordinates import CoordinateOrder, UTMPrecision, WGSFormat
from geogrid.models.options import WGSFormatOptions, build_options


def format_number(value: float) -> str:
    """
    Shortest decimal text for a number, without exponent or trailing ``.0``.

    Args:
        value: Number to format

    Returns:
        Text such as ``40.7489``, ``-73`` or ``0.00001``
    """
    text = repr(float(value))
    if "e" in text or "E" in text:
        text = f"{value:.20f}".rstrip("0").rstrip(".")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _is_negative(value: float) -> bool:
    return value < 0 or (value == 0 and math.copysign(1.0, value) < 0)


def _format_axis(
    value: float, letters: str, fmt: WGSFormat, compass: bool, decimals: int
) -> str:
    negative = _is_negative(value)
    if compass:
        sign = ""
        suffix = letters[1] if negative else letters[0]
    else:
        sign = "-" if negative else ""
        suffix = ""
    magnitude = abs(value)

    if fmt is WGSFormat.DD:
        return f"{sign}{format_number(magnitude)}°{suffix}"

    degrees = int(magnitude)
    if fmt is WGSFormat.DDM:
        minutes = round((magnitude - degrees) * 60, decimals)
        if minutes >= 60:
            degrees += 1
            minutes = 0.0
        return f"{sign}{degrees}° {format_number(minutes)}'{suffix}"

    total_minutes = (magnitude - degrees) * 60
    minutes = int(total_minutes)
    seconds = round((total_minutes - minutes) * 60, decimals)
    if seconds >= 60:
        seconds = 0.0
        minutes += 1
    if minutes >= 60:
        minutes = 0
        degrees += 1
    return f"{sign}{degrees}° {minutes}' {format_number(seconds)}\"{suffix}"


def format_wgs(
    lat: float,
    lon: float,
    format: Union[WGSFormat, str] = WGSFormat.DD,
    order: Union[CoordinateOrder, str] = CoordinateOrder.LAT_LON,
    compass: bool = False,
) -> str:
    """
    Format a latitude/longitude pair.

    Args:
        lat: Latitude in decimal degrees
        lon: Longitude in decimal degrees
        format: dd, ddm or dms
        order: latlon or lonlat
        compass: Use N/S/E/W instead of signs

    Returns:
        Formatted pair, e.g. ``40° 44' 56.04", -73° 58' 4.8"``

    Raises:
        ValidationError: If an option is invalid
    """
    options = build_options(WGSFormatOptions, format=format, order=order, compass=compass)
    decimals = settings.wgs_format_decimals

    lat_text = _format_axis(lat, "NS", options.format, options.compass, decimals)
    lon_text = _format_axis(lon, "EW", options.format, options.compass, decimals)

    if options.order is CoordinateOrder.LON_LAT:
        return f"{lon_text}, {lat_text}"
    return f"{lat_text}, {lon_text}"


def format_utm(
    zone_number: int,
    zone_letter: str,
    easting: float,
    northing: float,
    precision: Optional[UTMPrecision] = None,
) -> str:
    """
    Format a UTM coordinate as ``31U 448251 5411932``.

    Easting/northing are rounded to whole meters and zero padded to the
    recorded precision.
    """
    easting_m = int(math.floor(easting + 0.5))
    northing_m = int(math.floor(northing + 0.5))
    easting_width = precision.easting if precision else 0
    northing_width = precision.northing if precision else 0
    return (
        f"{zone_number}{zone_letter} "
        f"{str(easting_m).zfill(easting_width)} {str(northing_m).zfill(northing_width)}"
    )


def format_mgrs(
    zone_number: int,
    zone_letter: str,
    grid_col: str,
    grid_row: str,
    easting: int,
    northing: int,
    precision: int,
    spaced: bool = False,
) -> str:
    """
    Format an MGRS reference.

    The zone is padded to two digits; digits are zero padded to the precision.
    """
    digits_e = str(easting).zfill(precision) if precision else ""
    digits_n = str(northing).zfill(precision) if precision else ""
    zone = f"{zone_number:02d}{zone_letter}"
    square = f"{grid_col}{grid_row}"

    if spaced:
        return " ".join(part for part in (zone, square, digits_e, digits_n) if part)
    return f"{zone}{square}{digits_e}{digits_n}"
