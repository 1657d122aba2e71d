"""
Coordinate factories and the conversions between coordinate systems.

create_wgs(), create_utm() and create_mgrs() are the only way coordinates
are built: they lex, validate and return a frozen value object, or raise
ParseError. Conversions run the geodetic math, serialize the result and
feed it back through the target factory, so each converted coordinate is
validated like user input.
"""

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from geogrid.core.config import settings
from geogrid.core.crs.mgrs import mgrs_from_utm, utm_from_mgrs
from geogrid.core.crs.utm import (
    UTM_MAX_LATITUDE,
    UTM_MIN_LATITUDE,
    utm_from_wgs,
    wgs_from_utm,
)
from geogrid.core.errors import EmptyInputError, ParseError, ValidationError
from geogrid.core.formatting import format_mgrs, format_utm, format_wgs
from geogrid.core.grid.tables import GRID_ZONE_LIMITS, hemisphere_for_letter
from geogrid.core.grid.validators import MGRS_VALIDATORS, UTM_VALIDATORS, run_validators
from geogrid.core.parsers.mgrs_parser import lex_mgrs
from geogrid.core.parsers.utm_parser import lex_utm
from geogrid.core.parsers.wgs_lexer import lex_wgs
from geogrid.core.parsers.wgs_parser import check_ranges, parse_wgs
from geogrid.models.coordinates import (
    CoordinateOrder,
    CoordinateSystem,
    Hemisphere,
    MGRSCoordinate,
    UTMCoordinate,
    UTMPrecision,
    WGSCoordinate,
)
from geogrid.models.options import GridParseOptions, MGRSOptions, WGSParseOptions, build_options
from geogrid.models.tokens import GridTokens, WGSTokens

logger = logging.getLogger(__name__)

WGSInput = Union[str, Sequence[float], Mapping[str, Any]]

_LAT_KEYS = ("lat", "latitude")
_LON_KEYS = ("lon", "lng", "long", "longitude")


def _require_text(raw: Any) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise EmptyInputError(raw)
    return raw


def _number(value: Any, field: str, raw: Any) -> float:
    if isinstance(value, bool):
        raise ParseError(f"{field} must be a number, got {value!r}", raw=raw)
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ParseError(f"{field} must be a number, got {value!r}", raw=raw) from e


def _wgs_from_mapping(raw: Mapping[str, Any]) -> WGSCoordinate:
    """Build from a mapping with lat/latitude and lon/lng/longitude keys."""
    lowered = {str(key).lower(): value for key, value in raw.items()}
    lat_key = next((key for key in _LAT_KEYS if key in lowered), None)
    lon_key = next((key for key in _LON_KEYS if key in lowered), None)
    if lat_key is None or lon_key is None:
        raise ParseError("Mapping input needs latitude and longitude keys", raw=raw)

    lat = _number(lowered[lat_key], "Latitude", raw)
    lon = _number(lowered[lon_key], "Longitude", raw)
    check_ranges(lat, lon, raw=raw)
    return WGSCoordinate(lat=lat, lon=lon)


def _wgs_from_sequence(raw: Sequence[Any], order: Optional[CoordinateOrder]) -> WGSCoordinate:
    """Build from a two-number sequence in the given order."""
    if len(raw) != 2:
        raise ParseError(f"Sequence input needs exactly two values, got {len(raw)}", raw=raw)

    first = _number(raw[0], "Coordinate", raw)
    second = _number(raw[1], "Coordinate", raw)
    if order is CoordinateOrder.LON_LAT:
        lat, lon = second, first
    else:
        lat, lon = first, second
    check_ranges(lat, lon, raw=raw)
    return WGSCoordinate(lat=lat, lon=lon)


def create_wgs(
    raw: WGSInput,
    order: Optional[Union[CoordinateOrder, str]] = None,
    skip_validation: bool = False,
) -> Union[WGSCoordinate, WGSTokens]:
    """
    Create a WGS coordinate.

    Args:
        raw: Coordinate text (decimal, DDM, DMS or compact), a two-number
            sequence, or a mapping with latitude/longitude keys
        order: latlon or lonlat, used when the text has no hemisphere
            letters; when given, contradicting letters are an error
        skip_validation: Return the lexed tokens instead of a coordinate;
            text input only

    Returns:
        WGSCoordinate, or WGSTokens when skip_validation is set

    Raises:
        EmptyInputError: If no input was given
        ParseError: If the input is not a valid coordinate
        ValidationError: If an option is invalid, or skip_validation is set
            for a sequence or mapping
    """
    options = build_options(WGSParseOptions, order=order, skip_validation=skip_validation)

    if isinstance(raw, (Mapping, list, tuple)):
        if options.skip_validation:
            raise ValidationError(
                "skip_validation only applies to text input",
                field="skip_validation",
                suggestions=["Pass the coordinate as text to get its lexed tokens"],
            )
        if isinstance(raw, Mapping):
            return _wgs_from_mapping(raw)
        return _wgs_from_sequence(raw, options.order)

    text = _require_text(raw)
    if options.skip_validation:
        return lex_wgs(text)

    lat, lon = parse_wgs(text, options.order)
    return WGSCoordinate(lat=lat, lon=lon)


def create_utm(raw: str, skip_validation: bool = False) -> Union[UTMCoordinate, GridTokens]:
    """
    Create a UTM coordinate from text such as ``31U 448251 5411932``.

    Args:
        raw: Coordinate text
        skip_validation: Return the lexed tokens instead of a coordinate

    Returns:
        UTMCoordinate, or GridTokens when skip_validation is set

    Raises:
        EmptyInputError: If no input was given
        ParseError: If a validator rejects the input
    """
    options = build_options(GridParseOptions, skip_validation=skip_validation)
    tokens = lex_utm(_require_text(raw))
    if options.skip_validation:
        return tokens

    message = run_validators(tokens, UTM_VALIDATORS)
    if message:
        logger.debug(
            f"Rejected UTM input {raw!r}: {message}",
            extra={"raw_input": raw, "system": "utm"},
        )
        raise ParseError(message, raw=raw)

    return UTMCoordinate(
        zone_number=tokens.zone_number,
        zone_letter=tokens.zone_letter,
        hemisphere=Hemisphere(hemisphere_for_letter(tokens.zone_letter)),
        easting=float(tokens.easting),
        northing=float(tokens.northing),
        precision=UTMPrecision(easting=len(tokens.easting), northing=len(tokens.northing)),
    )


def create_mgrs(raw: str, skip_validation: bool = False) -> Union[MGRSCoordinate, GridTokens]:
    """
    Create an MGRS coordinate from text such as ``33VVE7220287839``.

    Args:
        raw: Grid reference text; whitespace is ignored
        skip_validation: Return the lexed tokens instead of a coordinate

    Returns:
        MGRSCoordinate, or GridTokens when skip_validation is set

    Raises:
        EmptyInputError: If no input was given
        ParseError: If a validator rejects the input
    """
    options = build_options(GridParseOptions, skip_validation=skip_validation)
    tokens = lex_mgrs(_require_text(raw))
    if options.skip_validation:
        return tokens

    message = run_validators(tokens, MGRS_VALIDATORS)
    if message:
        logger.debug(
            f"Rejected MGRS input {raw!r}: {message}",
            extra={"raw_input": raw, "system": "mgrs"},
        )
        raise ParseError(message, raw=raw)

    return MGRSCoordinate(
        zone_number=tokens.zone_number,
        zone_letter=tokens.zone_letter,
        grid_col=tokens.grid_col,
        grid_row=tokens.grid_row,
        easting=int(tokens.easting) if tokens.easting else 0,
        northing=int(tokens.northing) if tokens.northing else 0,
        precision=len(tokens.easting),
    )


# WGS with a fixed axis order
_ORDER_ALIASES = {
    "latlon": CoordinateOrder.LAT_LON,
    "lonlat": CoordinateOrder.LON_LAT,
}


def create_coordinate(
    raw: Any, system: Union[CoordinateSystem, str], **options: Any
) -> Any:
    """
    Create a coordinate of the named system.

    Args:
        raw: Input for the system's factory
        system: wgs, utm or mgrs; latlon and lonlat select wgs with that order
        **options: Passed to the factory

    Returns:
        The factory's result

    Raises:
        ValidationError: If the system is unknown
    """
    key = system.value if isinstance(system, CoordinateSystem) else str(system).lower()
    if key in _ORDER_ALIASES:
        options["order"] = _ORDER_ALIASES[key]
        return create_wgs(raw, **options)

    try:
        resolved = CoordinateSystem(key)
    except ValueError as e:
        raise ValidationError(
            f"Unknown coordinate system {system!r}",
            field="system",
            suggestions=["Use one of: wgs, utm, mgrs, latlon, lonlat"],
        ) from e

    if resolved is CoordinateSystem.WGS:
        return create_wgs(raw, **options)
    if resolved is CoordinateSystem.UTM:
        return create_utm(raw, **options)
    return create_mgrs(raw, **options)


def _mgrs_precision(precision: Optional[int]) -> int:
    if precision is None:
        precision = settings.default_mgrs_precision
    return build_options(MGRSOptions, precision=precision).precision


def _wgs_text(lat: float, lon: float) -> str:
    return format_wgs(lat, lon, order=CoordinateOrder.LAT_LON)


def _check_utm_latitude(coord: WGSCoordinate) -> None:
    if not UTM_MIN_LATITUDE <= coord.lat <= UTM_MAX_LATITUDE:
        raise ParseError(
            f"Latitude {coord.lat} is outside the UTM range (80°S to 84°N)",
            raw=str(coord),
        )


def wgs_to_wgs(coord: WGSCoordinate) -> WGSCoordinate:
    return create_wgs(_wgs_text(coord.lat, coord.lon), order=CoordinateOrder.LAT_LON)


def wgs_to_utm(coord: WGSCoordinate) -> UTMCoordinate:
    """Project a WGS coordinate to UTM, rounded to whole meters."""
    _check_utm_latitude(coord)
    point = utm_from_wgs(coord.lat, coord.lon)
    logger.debug(f"Projected {coord.lat}, {coord.lon} to {point}")
    text = format_utm(point.zone_number, point.zone_letter, point.easting, point.northing)
    return create_utm(text)


def wgs_to_mgrs(coord: WGSCoordinate, precision: Optional[int] = None) -> MGRSCoordinate:
    """Convert a WGS coordinate to MGRS, truncating the unrounded projection."""
    digits = _mgrs_precision(precision)
    _check_utm_latitude(coord)
    point = utm_from_wgs(coord.lat, coord.lon)
    try:
        mgrs = mgrs_from_utm(
            point.zone_number, point.zone_letter, point.easting, point.northing, digits
        )
    except ValueError as e:
        raise ParseError(str(e), raw=str(coord)) from e
    return create_mgrs(format_mgrs(*mgrs))


def utm_to_wgs(coord: UTMCoordinate) -> WGSCoordinate:
    lat, lon = wgs_from_utm(
        coord.zone_number, coord.hemisphere.value, coord.easting, coord.northing
    )
    return create_wgs(_wgs_text(lat, lon), order=CoordinateOrder.LAT_LON)


def utm_to_utm(coord: UTMCoordinate) -> UTMCoordinate:
    return create_utm(coord.to_string())


def utm_to_mgrs(coord: UTMCoordinate, precision: Optional[int] = None) -> MGRSCoordinate:
    digits = _mgrs_precision(precision)
    try:
        mgrs = mgrs_from_utm(
            coord.zone_number, coord.zone_letter, coord.easting, coord.northing, digits
        )
    except ValueError as e:
        raise ParseError(str(e), raw=str(coord)) from e
    return create_mgrs(format_mgrs(*mgrs))


def mgrs_to_utm(coord: MGRSCoordinate) -> UTMCoordinate:
    easting, northing = utm_from_mgrs(
        coord.zone_number,
        coord.grid_col,
        coord.grid_row,
        coord.easting,
        coord.northing,
        coord.precision,
        GRID_ZONE_LIMITS[coord.zone_letter],
    )
    return create_utm(format_utm(coord.zone_number, coord.zone_letter, easting, northing))


def mgrs_to_mgrs(coord: MGRSCoordinate, precision: Optional[int] = None) -> MGRSCoordinate:
    """Re-create an MGRS reference, optionally truncated to fewer digits."""
    if precision is None:
        return create_mgrs(coord.to_string())
    return coord.to_utm().to_mgrs(precision)
