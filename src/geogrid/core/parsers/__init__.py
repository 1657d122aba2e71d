"""
Coordinate text parsing for geogrid.

The sanitizer normalizes free text; one lexer per format turns it into
tokens, and the WGS parser assembles latitude/longitude from its tokens.
"""

from .mgrs_parser import lex_mgrs
from .sanitize import sanitize
from .utm_parser import lex_utm
from .wgs_lexer import (
    SPLIT_TABLE,
    build_mask,
    expand_compact,
    find_separator_index,
    lex_wgs,
    tokenize,
)
from .wgs_parser import RefinedPart, assign_axes, check_ranges, parse_wgs, refine_part

__all__ = [
    # Sanitizer
    "sanitize",
    # WGS
    "SPLIT_TABLE",
    "RefinedPart",
    "assign_axes",
    "build_mask",
    "check_ranges",
    "expand_compact",
    "find_separator_index",
    "lex_wgs",
    "parse_wgs",
    "refine_part",
    "tokenize",
    # UTM / MGRS
    "lex_mgrs",
    "lex_utm",
]
