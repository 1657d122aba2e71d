"""
Data models: coordinate value objects, lexer tokens and option models.
"""

from .coordinates import (
    Coordinate,
    CoordinateOrder,
    CoordinateSystem,
    Hemisphere,
    MGRSCoordinate,
    UTMCoordinate,
    UTMPrecision,
    WGSCoordinate,
    WGSFormat,
)
from .options import (
    GridParseOptions,
    MGRSOptions,
    WGSFormatOptions,
    WGSParseOptions,
    build_options,
)
from .tokens import GridTokens, Token, TokenKind, WGSTokens

__all__ = [
    # Coordinates
    "Coordinate",
    "CoordinateOrder",
    "CoordinateSystem",
    "Hemisphere",
    "MGRSCoordinate",
    "UTMCoordinate",
    "UTMPrecision",
    "WGSCoordinate",
    "WGSFormat",
    # Options
    "GridParseOptions",
    "MGRSOptions",
    "WGSFormatOptions",
    "WGSParseOptions",
    "build_options",
    # Tokens
    "GridTokens",
    "Token",
    "TokenKind",
    "WGSTokens",
]
