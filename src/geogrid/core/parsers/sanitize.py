"""
Free-text normalization ahead of lexing.

sanitize() is total: it never raises and its output is a fixed point
(sanitizing twice changes nothing).
"""

import re

SEPARATOR = ","

_WORDS = (
    (re.compile(r"(?<![A-Z])NORTH(?![A-Z])"), "N"),
    (re.compile(r"(?<![A-Z])SOUTH(?![A-Z])"), "S"),
    (re.compile(r"(?<![A-Z])EAST(?![A-Z])"), "E"),
    (re.compile(r"(?<![A-Z])WEST(?![A-Z])"), "W"),
)

# Unit words, also when glued to a number
_UNIT_WORDS = (
    (re.compile(r"(?<![A-Z])DEG(?:REES?|S)?(?![A-Z])"), "°"),
    (re.compile(r"(?<![A-Z])MIN(?:UTES?|S)?(?![A-Z])"), "'"),
    (re.compile(r"(?<![A-Z])SEC(?:ONDS?|S)?(?![A-Z])"), '"'),
)

# Labels and other words; single hemisphere letters survive
_WORD = re.compile(r"[A-Z]{2,}")

_TRANSLATION = str.maketrans(
    {
        # minus signs and dashes
        "−": "-",
        "‐": "-",
        "‑": "-",
        "‒": "-",
        "–": "-",
        "—": "-",
        "﹣": "-",
        "－": "-",
        # degrees
        "º": "°",
        "˚": "°",
        # minutes
        "′": "'",
        "’": "'",
        "‘": "'",
        "´": "'",
        "`": "'",
        # seconds
        "″": '"',
        "“": '"',
        "”": '"',
        # separators
        ";": SEPARATOR,
        "/": SEPARATOR,
    }
)

_DOUBLE_QUOTE = re.compile(r"''")
_DECIMAL_COMMA = re.compile(r"(?<=\d),(?=\d)")
_STRIP = re.compile(r"[^0-9.+\-°'\"NSEW,\s]")
_SPACE_AROUND_SEPARATOR = re.compile(r"\s*,\s*")
_UNIT_AFTER_SPACE = re.compile(r"\s+([°'\"])")
_SPACE_AFTER_UNIT = re.compile(r"([°'\"])(?=\S)")
_NUMBER_THEN_LETTER = re.compile(r"([0-9.°'\"])([NSEW])")
_LETTER_THEN_ANY = re.compile(r"([NSEW])(?=[^\s,])")
_SIGN_AFTER_NUMBER = re.compile(r"([0-9.])(?=[+\-])")
_WHITESPACE = re.compile(r"\s+")


def sanitize(raw: str) -> str:
    """
    Normalize coordinate text into canonical, space-separated tokens.

    Output tokens are numbers (with any unit symbol attached), the
    hemisphere letters N/S/E/W and the separator ``,``. Compass and unit
    words are translated; any other word, such as a ``Lat:`` label, is
    dropped.

    Args:
        raw: Raw input text

    Returns:
        Sanitized text, possibly empty
    """
    if not isinstance(raw, str):
        return ""

    text = raw.upper()
    for pattern, letter in _WORDS:
        text = pattern.sub(letter, text)
    for pattern, unit in _UNIT_WORDS:
        text = pattern.sub(unit, text)
    text = _WORD.sub(" ", text)

    text = _DECIMAL_COMMA.sub(".", text)
    text = text.translate(_TRANSLATION)
    text = _DOUBLE_QUOTE.sub('"', text)
    text = _STRIP.sub(" ", text)

    text = _UNIT_AFTER_SPACE.sub(r"\1", text)
    text = _SPACE_AFTER_UNIT.sub(r"\1 ", text)
    text = _NUMBER_THEN_LETTER.sub(r"\1 \2", text)
    text = _LETTER_THEN_ANY.sub(r"\1 ", text)
    text = _SIGN_AFTER_NUMBER.sub(r"\1 ", text)
    text = _SPACE_AROUND_SEPARATOR.sub(f" {SEPARATOR} ", text)

    return _WHITESPACE.sub(" ", text).strip()
