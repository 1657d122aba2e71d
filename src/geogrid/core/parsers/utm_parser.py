"""
UTM lexer.

Accepts ``<zone><band> <easting> <northing>`` with flexible whitespace,
e.g. ``31U 448251 5411932`` or ``31 u 448251 5411932``.
"""

import re

from geogrid.models.tokens import GridTokens

_ZONE = re.compile(r"^[+\-]?\d{1,2}")
_WHITESPACE = re.compile(r"\s+")


def lex_utm(raw: str) -> GridTokens:
    """
    Split UTM text into zone, band and easting/northing tokens.

    Args:
        raw: Raw input text

    Returns:
        GridTokens; missing parts are empty and a missing zone is None
    """
    text = _WHITESPACE.sub(" ", raw.upper()).strip()

    match = _ZONE.match(text)
    if match is None:
        return GridTokens(raw=raw)

    zone_number = int(match.group(0))
    rest = text[match.end() :].lstrip()
    zone_letter, rest = rest[:1], rest[1:]

    values = rest.split()
    easting = values[0] if values else ""
    northing = values[1] if len(values) > 1 else ""
    extra = " ".join(values[2:])

    return GridTokens(
        raw=raw,
        zone_number=zone_number,
        zone_letter=zone_letter,
        easting=easting,
        northing=northing,
        extra=extra,
    )
