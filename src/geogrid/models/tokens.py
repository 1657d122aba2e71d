"""
Lexer token structures.

These are the transient shapes handed from the lexers to the validator
chains. Callers only see them when parsing with ``skip_validation=True``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class TokenKind(str, Enum):
    """Category of a WGS token, used as one character of the split mask."""

    DEGREES = "D"  # bare number or number with °
    MINUTES = "M"
    SECONDS = "S"
    HEMISPHERE = "N"  # any of N/S/E/W
    SEPARATOR = "C"
    UNKNOWN = "?"


@dataclass(frozen=True)
class Token:
    """
    One lexed WGS token.

    Attributes:
        kind: Token category
        text: Sanitized source text of the token
        value: Unsigned numeric value for number tokens
        negative: Whether the number carried a leading minus sign
    """

    kind: TokenKind
    text: str
    value: Optional[float] = None
    negative: bool = False

    @property
    def is_number(self) -> bool:
        return self.kind in (TokenKind.DEGREES, TokenKind.MINUTES, TokenKind.SECONDS)

    @property
    def has_unit(self) -> bool:
        """Whether the number was written with °, ' or \"."""
        return self.is_number and self.text[-1] in "°'\""

    @property
    def letter(self) -> Optional[str]:
        """Hemisphere letter, for hemisphere tokens."""
        return self.text if self.kind is TokenKind.HEMISPHERE else None


@dataclass(frozen=True)
class WGSTokens:
    """
    Lexed WGS input split into its two coordinate parts.

    Attributes:
        raw: Original input text
        tokens: Tokens with separators removed
        mask: Token kinds of the unsplit stream (separators included)
        split_index: Index into ``tokens`` where the second part starts,
            or None when no split pattern matched
    """

    raw: str
    tokens: Tuple[Token, ...] = ()
    mask: Tuple[TokenKind, ...] = ()
    split_index: Optional[int] = None

    @property
    def mask_text(self) -> str:
        return "".join(kind.value for kind in self.mask)

    @property
    def parts(self) -> Optional[Tuple[Tuple[Token, ...], Tuple[Token, ...]]]:
        """The two coordinate parts, or None when the input did not split."""
        if self.split_index is None:
            return None
        return self.tokens[: self.split_index], self.tokens[self.split_index :]


@dataclass(frozen=True)
class GridTokens:
    """
    Lexed UTM or MGRS input.

    All fields except zone_number hold raw text so validators can report
    exactly what was typed. Missing parts are empty strings.

    Attributes:
        raw: Original input text
        zone_number: Parsed zone number, None when no digits were found
        zone_letter: Latitude band letter
        grid_col: 100km square column letter (MGRS only)
        grid_row: 100km square row letter (MGRS only)
        easting: Easting digits
        northing: Northing digits
        extra: Unexpected trailing text (UTM only)
    """

    raw: str
    zone_number: Optional[int] = None
    zone_letter: str = ""
    grid_col: str = ""
    grid_row: str = ""
    easting: str = ""
    northing: str = ""
    extra: str = field(default="")
