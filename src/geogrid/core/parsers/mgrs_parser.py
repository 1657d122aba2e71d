"""
MGRS lexer.

Whitespace is ignored, so ``33VVE7220287839`` and ``33V VE 72202 87839``
lex identically. The digits after the grid square are split in half into
easting and northing; an odd count leaves the halves unequal for the
precision validator to report.
"""

import re

from geogrid.models.tokens import GridTokens

_ZONE = re.compile(r"^[+\-]?\d{1,2}")
_WHITESPACE = re.compile(r"\s+")


def lex_mgrs(raw: str) -> GridTokens:
    """
    Split MGRS text into zone, band, grid square and digit tokens.

    Args:
        raw: Raw input text

    Returns:
        GridTokens; missing parts are empty and a missing zone is None
    """
    text = _WHITESPACE.sub("", raw.upper())

    match = _ZONE.match(text)
    if match is None:
        return GridTokens(raw=raw)

    zone_number = int(match.group(0))
    rest = text[match.end() :]
    zone_letter, grid_col, grid_row = rest[0:1], rest[1:2], rest[2:3]

    digits = rest[3:]
    half = len(digits) // 2

    return GridTokens(
        raw=raw,
        zone_number=zone_number,
        zone_letter=zone_letter,
        grid_col=grid_col,
        grid_row=grid_row,
        easting=digits[:half],
        northing=digits[half:],
    )
