"""
WGS assembly: refines the two lexed parts into signed decimal degrees and
assigns them to latitude and longitude.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from geogrid.core.errors import ParseError
from geogrid.core.parsers.wgs_lexer import lex_wgs
from geogrid.models.coordinates import CoordinateOrder
from geogrid.models.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

LAT = "lat"
LON = "lon"

MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0

_POSITIONS = {TokenKind.DEGREES: 0, TokenKind.MINUTES: 1, TokenKind.SECONDS: 2}
_POSITION_NAMES = ("degrees", "minutes", "seconds")
_LETTER_NAMES = {"N": "North", "S": "South", "E": "East", "W": "West"}


@dataclass(frozen=True)
class RefinedPart:
    """
    One coordinate part as signed decimal degrees.

    Attributes:
        value: Signed decimal degrees
        axis: "lat" or "lon" when a hemisphere letter was given
        letter: The hemisphere letter, if any
    """

    value: float
    axis: Optional[str] = None
    letter: Optional[str] = None


def refine_part(tokens: Sequence[Token]) -> Tuple[Optional[RefinedPart], List[str]]:
    """
    Turn the tokens of one coordinate part into decimal degrees.

    Numbers take the position named by their unit, or the next position when
    bare. S and W negate; a leading minus with N or E is a conflict.

    Args:
        tokens: Tokens of one part

    Returns:
        Tuple of (part, errors); part is None whenever errors is non-empty
    """
    errors: List[str] = []

    for token in tokens:
        if token.kind is TokenKind.UNKNOWN:
            errors.append(f'Unrecognized value "{token.text}"')

    letters = [token.text for token in tokens if token.kind is TokenKind.HEMISPHERE]
    numbers = [token for token in tokens if token.is_number]

    if len(letters) > 1:
        errors.append(f"Multiple hemisphere indicators in one part: {' '.join(letters)}")
    if not numbers:
        errors.append("No numeric value found")
    if len(numbers) > 3:
        errors.append(f"Too many values ({len(numbers)}) in one part")
    if errors:
        return None, errors

    components = [0.0, 0.0, 0.0]
    used: List[int] = []
    for index, token in enumerate(numbers):
        position = _POSITIONS[token.kind] if token.has_unit else (used[-1] + 1 if used else 0)
        if (used and position <= used[-1]) or position > 2:
            errors.append(
                f'Unexpected value "{token.text}" - degrees, minutes and seconds '
                "must appear in that order"
            )
            continue
        value = token.value or 0.0
        components[position] = -value if (index > 0 and token.negative) else value
        used.append(position)

    degrees, minutes, seconds = components
    if 1 in used:
        if minutes >= 60:
            errors.append("Minutes value too high (must be less than 60)")
        elif minutes < 0:
            errors.append("Minutes value too low (must not be negative)")
    if 2 in used:
        if seconds >= 60:
            errors.append("Seconds value too high (must be less than 60)")
        elif seconds < 0:
            errors.append("Seconds value too low (must not be negative)")

    if 0 in used and len(used) > 1 and not degrees.is_integer():
        errors.append("Degrees must be whole when minutes or seconds follow")
    if 1 in used and 2 in used and not minutes.is_integer():
        errors.append("Minutes must be whole when seconds follow")

    letter = letters[0] if letters else None
    negative = numbers[0].negative
    if negative and letter in ("N", "E"):
        errors.append(f"Conflicting indicators: negative value with {_LETTER_NAMES[letter]}")

    if errors:
        return None, errors

    value = degrees + minutes / 60 + seconds / 3600
    if negative or letter in ("S", "W"):
        value = -value

    axis = None
    if letter:
        axis = LAT if letter in ("N", "S") else LON
    return RefinedPart(value=value, axis=axis, letter=letter), []


def _other(axis: str) -> str:
    return LON if axis == LAT else LAT


def assign_axes(
    first: RefinedPart,
    second: RefinedPart,
    order: Optional[CoordinateOrder] = None,
    raw: Optional[str] = None,
) -> Tuple[float, float]:
    """
    Decide which part is latitude and which is longitude.

    Hemisphere letters win; a part without one takes the remaining axis.
    With no letters at all, ``order`` decides (latlon when unset). When
    ``order`` is given explicitly, letters that contradict it are an error.

    Args:
        first: First part in input order
        second: Second part in input order
        order: Caller-specified axis order
        raw: Raw input, for error reporting

    Returns:
        Tuple of (latitude, longitude)

    Raises:
        ParseError: If both parts claim the same axis or contradict ``order``
    """
    first_axis, second_axis = first.axis, second.axis

    if first_axis and first_axis == second_axis:
        raise ParseError("Both parts assigned to the same axis", raw=raw)

    if first_axis is None and second_axis is None:
        if order is CoordinateOrder.LON_LAT:
            first_axis, second_axis = LON, LAT
        else:
            first_axis, second_axis = LAT, LON
    elif first_axis is None:
        first_axis = _other(second_axis)
    elif second_axis is None:
        second_axis = _other(first_axis)

    if order is not None and (first_axis == LAT) != (order is CoordinateOrder.LAT_LON):
        raise ParseError(
            f'Coordinate parts contradict specified order "{order.value}"', raw=raw
        )

    if first_axis == LAT:
        return first.value, second.value
    return second.value, first.value


def check_ranges(lat: float, lon: float, raw: Optional[str] = None) -> None:
    """
    Reject latitudes beyond ±90 and longitudes beyond ±180.

    Raises:
        ParseError: Naming the axis and value that failed
    """
    if not -MAX_LATITUDE <= lat <= MAX_LATITUDE:
        raise ParseError(
            f"Latitude value out of range (must be between -90 and 90): {lat}", raw=raw
        )
    if not -MAX_LONGITUDE <= lon <= MAX_LONGITUDE:
        raise ParseError(
            f"Longitude value out of range (must be between -180 and 180): {lon}", raw=raw
        )


def parse_wgs(raw: str, order: Optional[CoordinateOrder] = None) -> Tuple[float, float]:
    """
    Parse free-text WGS input.

    Args:
        raw: Raw input text
        order: Axis order used when no hemisphere letters are present

    Returns:
        Tuple of (latitude, longitude) in decimal degrees

    Raises:
        ParseError: If the text is not a valid coordinate
    """
    lexed = lex_wgs(raw)
    parts = lexed.parts
    if parts is None:
        logger.debug(
            f"No WGS split for {raw!r} (mask {lexed.mask_text!r})",
            extra={"raw_input": raw, "system": "wgs"},
        )
        raise ParseError(f'Input is not in a valid WGS format; input: "{raw}"', raw=raw)

    first, first_errors = refine_part(parts[0])
    second, second_errors = refine_part(parts[1])
    errors = first_errors + second_errors
    if first is None or second is None:
        logger.debug(
            f"Rejected WGS input {raw!r}: {errors}",
            extra={"raw_input": raw, "system": "wgs"},
        )
        raise ParseError("; ".join(errors), raw=raw, errors=errors)

    lat, lon = assign_axes(first, second, order, raw=raw)
    check_ranges(lat, lon, raw=raw)
    return lat, lon
