"""
WGS lexer: tokenizes sanitized text and finds where the second coordinate
part starts.

The split is found from the token mask (one character per token kind):
1. a single separator splits there;
2. otherwise the mask is looked up in SPLIT_TABLE, generated from the
   grammar of a single coordinate part;
3. otherwise a few hemisphere-delimited regular expressions are tried, so
   that over-long parts still reach refinement and get itemized errors.
"""

import itertools
import re
from collections import defaultdict
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Set, Tuple

from geogrid.core.parsers.sanitize import SEPARATOR, sanitize
from geogrid.models.tokens import Token, TokenKind, WGSTokens

Mask = Tuple[TokenKind, ...]

HEMISPHERE_LETTERS = frozenset("NSEW")

_NUMBER = re.compile(r"^([+\-]?)(\d+(?:\.\d*)?|\.\d+)([°'\"]?)$")
_UNIT_KINDS = {
    "": TokenKind.DEGREES,
    "°": TokenKind.DEGREES,
    "'": TokenKind.MINUTES,
    '"': TokenKind.SECONDS,
}

# DDMM[SS][.s]H DDDMM[SS][.s]H, latitude or longitude first
_COMPACT = re.compile(
    r"^\s*(\d{4,7}(?:\.\d+)?)\s*([NSEW])[\s,;/]*(\d{4,7}(?:\.\d+)?)\s*([NSEW])\s*$"
)


def tokenize(sanitized: str) -> List[Token]:
    """
    Split sanitized text into typed tokens.

    Args:
        sanitized: Output of sanitize()

    Returns:
        Tokens in input order, separators included
    """
    tokens: List[Token] = []
    for text in sanitized.split():
        if text == SEPARATOR:
            tokens.append(Token(TokenKind.SEPARATOR, text))
        elif text in HEMISPHERE_LETTERS:
            tokens.append(Token(TokenKind.HEMISPHERE, text))
        else:
            match = _NUMBER.match(text)
            if match is None:
                tokens.append(Token(TokenKind.UNKNOWN, text))
                continue
            sign, digits, unit = match.groups()
            tokens.append(
                Token(_UNIT_KINDS[unit], text, value=float(digits), negative=sign == "-")
            )
    return tokens


def _expand_compact_part(digits: str, letter: str) -> Optional[List[Token]]:
    """Expand ``4515`` + ``E`` style digits into degree/minute/second tokens."""
    whole, _, fraction = digits.partition(".")
    degree_digits = 2 if letter in "NS" else 3
    rest = whole[degree_digits:]
    if len(rest) not in (2, 4):
        return None

    groups = [whole[:degree_digits], rest[:2]]
    if len(rest) == 4:
        groups.append(rest[2:])
    if fraction:
        groups[-1] = f"{groups[-1]}.{fraction}"

    tokens = [
        Token(kind, f"{text}{unit}", value=float(text))
        for text, (kind, unit) in zip(
            groups,
            (
                (TokenKind.DEGREES, "°"),
                (TokenKind.MINUTES, "'"),
                (TokenKind.SECONDS, '"'),
            ),
        )
    ]
    tokens.append(Token(TokenKind.HEMISPHERE, letter))
    return tokens


def expand_compact(raw: str) -> Optional[List[Token]]:
    """
    Tokenize compact DDMMSSH input such as ``1230N 04515E``.

    Latitudes use two degree digits, longitudes three.

    Args:
        raw: Raw input text

    Returns:
        Tokens with a separator between the parts, or None if the input is
        not in compact form
    """
    match = _COMPACT.match(raw.upper())
    if match is None:
        return None

    first = _expand_compact_part(match.group(1), match.group(2))
    second = _expand_compact_part(match.group(3), match.group(4))
    if first is None or second is None:
        return None
    return first + [Token(TokenKind.SEPARATOR, SEPARATOR)] + second


def build_mask(tokens: Sequence[Token]) -> Mask:
    return tuple(token.kind for token in tokens)


def _number_sequences() -> Iterator[Mask]:
    """Number kinds of one part: consecutive degree/minute/second positions."""
    for start in range(3):
        for end in range(start, 3):
            choices = []
            for index, position in enumerate(range(start, end + 1)):
                if position == 0:
                    choices.append((TokenKind.DEGREES,))
                elif position == 1:
                    # A bare number only means minutes after another value
                    choices.append(
                        (TokenKind.MINUTES,)
                        if index == 0
                        else (TokenKind.MINUTES, TokenKind.DEGREES)
                    )
                else:
                    choices.append(
                        (TokenKind.SECONDS,)
                        if index == 0
                        else (TokenKind.SECONDS, TokenKind.DEGREES)
                    )
            yield from itertools.product(*choices)


def part_masks() -> Set[Mask]:
    """Every mask a single coordinate part may have."""
    masks: Set[Mask] = set()
    letter = (TokenKind.HEMISPHERE,)
    for numbers in _number_sequences():
        masks.add(numbers)
        masks.add(letter + numbers)
        masks.add(numbers + letter)
        for i in range(1, len(numbers)):
            masks.add(numbers[:i] + letter + numbers[i:])
    return masks


def _count_numbers(mask: Mask) -> int:
    return sum(1 for kind in mask if kind is not TokenKind.HEMISPHERE)


def _build_split_table() -> Mapping[Mask, int]:
    parts = part_masks()
    candidates: Dict[Mask, Set[int]] = defaultdict(set)
    for first in parts:
        for second in parts:
            candidates[first + second].add(len(first))

    table: Dict[Mask, int] = {}
    for mask, splits in candidates.items():
        # Most balanced number split first, then the longer first part
        table[mask] = min(
            splits,
            key=lambda i: (abs(_count_numbers(mask[:i]) - _count_numbers(mask[i:])), -i),
        )
    return MappingProxyType(table)


SPLIT_TABLE: Mapping[Mask, int] = _build_split_table()

_FALLBACK_PATTERNS = (
    re.compile(r"^(N[DMS]+)(N[DMS]+)$"),
    re.compile(r"^([DMS]+N)([DMS]+N)$"),
)


def find_separator_index(mask: Mask) -> Optional[int]:
    """
    Find where the second coordinate part starts.

    Args:
        mask: Token kinds, separators included

    Returns:
        Index into the separator-free token list, or None if no pattern
        matches
    """
    separators = [i for i, kind in enumerate(mask) if kind is TokenKind.SEPARATOR]
    if len(separators) == 1:
        index = separators[0]
        if 0 < index < len(mask) - 1:
            return index
        return None
    if separators:
        return None

    if mask in SPLIT_TABLE:
        return SPLIT_TABLE[mask]

    mask_text = "".join(kind.value for kind in mask)
    for pattern in _FALLBACK_PATTERNS:
        match = pattern.match(mask_text)
        if match:
            return len(match.group(1))
    return None


def lex_wgs(raw: str) -> WGSTokens:
    """
    Lex WGS input into tokens and a split index.

    Args:
        raw: Raw input text

    Returns:
        WGSTokens; ``split_index`` is None when the text has no recognizable
        two-part shape
    """
    tokens = expand_compact(raw)
    if tokens is None:
        tokens = tokenize(sanitize(raw))

    mask = build_mask(tokens)
    body = tuple(token for token in tokens if token.kind is not TokenKind.SEPARATOR)
    split_index = find_separator_index(mask) if body else None

    return WGSTokens(raw=raw, tokens=body, mask=mask, split_index=split_index)
