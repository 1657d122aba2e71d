"""
Tests for the MGRS lexer and validator chain.
"""

import pytest

from geogrid import create_mgrs
from geogrid.core.errors import EmptyInputError, ParseError
from geogrid.core.parsers.mgrs_parser import lex_mgrs
from geogrid.models import GridTokens, MGRSCoordinate


class TestLexMGRS:
    """Tests for lex_mgrs()."""

    def test_lex_compact(self) -> None:
        """Test compact MGRS text."""
        tokens = lex_mgrs("33VVE7220287839")

        assert tokens.zone_number == 33
        assert tokens.zone_letter == "V"
        assert tokens.grid_col == "V"
        assert tokens.grid_row == "E"
        assert tokens.easting == "72202"
        assert tokens.northing == "87839"

    def test_lex_spaced_lowercase(self) -> None:
        """Test whitespace is ignored and letters are uppercased."""
        assert lex_mgrs("33v ve 72202 87839") == GridTokens(
            raw="33v ve 72202 87839",
            zone_number=33,
            zone_letter="V",
            grid_col="V",
            grid_row="E",
            easting="72202",
            northing="87839",
        )

    def test_lex_single_digit_zone(self) -> None:
        """Test a one digit zone."""
        tokens = lex_mgrs("4QFJ1234567890")

        assert tokens.zone_number == 4
        assert tokens.zone_letter == "Q"
        assert tokens.easting == "12345"

    def test_lex_odd_digits(self) -> None:
        """Test an odd digit count splits unevenly."""
        tokens = lex_mgrs("31UDQ482511193")

        assert tokens.easting == "4825"
        assert tokens.northing == "11193"

    def test_lex_grid_square_only(self) -> None:
        """Test a reference without digits."""
        tokens = lex_mgrs("31UDQ")

        assert tokens.easting == ""
        assert tokens.northing == ""


class TestCreateMGRS:
    """Tests for create_mgrs()."""

    def test_create(self) -> None:
        """Test a valid reference."""
        coord = create_mgrs("33VVE7220287839")

        assert coord == MGRSCoordinate(
            zone_number=33,
            zone_letter="V",
            grid_col="V",
            grid_row="E",
            easting=72202,
            northing=87839,
            precision=5,
        )

    def test_create_spaced(self) -> None:
        """Test the spaced form gives the same coordinate."""
        assert create_mgrs("33V VE 72202 87839") == create_mgrs("33VVE7220287839")

    @pytest.mark.parametrize(
        "raw,precision",
        [
            ("31UDQ", 0),
            ("31UDQ41", 1),
            ("31UDQ4811", 2),
            ("31UDQ482119", 3),
            ("31UDQ48251193", 4),
            ("31UDQ4825111932", 5),
        ],
    )
    def test_precisions(self, raw: str, precision: int) -> None:
        """Test every precision from a bare square to meters."""
        coord = create_mgrs(raw)

        assert coord.precision == precision
        assert coord.to_string() == raw

    def test_leading_zeros_kept(self) -> None:
        """Test digits with leading zeros."""
        coord = create_mgrs("31NAA6602100000")

        assert coord.northing == 0
        assert coord.to_string() == "31NAA6602100000"

    def test_zone_padded_on_output(self) -> None:
        """Test single digit zones are padded to two digits."""
        assert create_mgrs("4QFJ1234567890").to_string() == "04QFJ1234567890"

    def test_norway_zone(self) -> None:
        """Test a reference in the widened zone 32V."""
        coord = create_mgrs("32VNM9700043000")
        assert coord.grid_col == "N"

    def test_svalbard_zone(self) -> None:
        """Test a reference in the widened zone 33X."""
        coord = create_mgrs("33XWG1234567890")
        assert coord.grid_row == "G"

    def test_skip_validation(self) -> None:
        """Test skip_validation returns tokens for invalid input."""
        tokens = create_mgrs("32VPM9700043000", skip_validation=True)

        assert isinstance(tokens, GridTokens)
        assert tokens.grid_col == "P"

    @pytest.mark.parametrize("raw", ["", " ", None])
    def test_empty_input(self, raw) -> None:
        """Test missing input."""
        with pytest.raises(EmptyInputError):
            create_mgrs(raw)

    @pytest.mark.parametrize(
        "raw,message",
        [
            ("VE7220287839", "No zone number found"),
            ("61UDQ4825111932", 'Invalid zone number "61" - must be between 1 and 60'),
            ("31", "No zone letter found"),
            ("31ODQ4825111932", 'Invalid zone letter "O"'),
            ("32XNM1234567890", 'Invalid zone letter "X" for zone "32"'),
            ("60XNM1234567890", 'Invalid zone letter "X" for zone "60"'),
            ("31U", "No grid square column found"),
            ("31UD", "No grid square row found"),
            ("31UIQ4825111932", 'Invalid grid square column letter "I"'),
            ("31UDI4825111932", 'Invalid grid square row letter "I"'),
            ("31UDW4825111932", 'Invalid grid square row letter "W"'),
            ("31UDQ482511193", "Invalid easting/northing pair - must be even number of digits"),
            ("31UDQ48251A1932", "Invalid (non-numeric) characters in easting/northing"),
            (
                "31UDQ482511193212",
                "Invalid easting/northing precision - greater than 5 digits",
            ),
            ("31UJQ4825111932", 'Invalid grid square column "J" for zone "31U"'),
            ("32VPM9700043000", 'Invalid grid square column "P" for zone "32V"'),
            ("32VAM9700043000", 'Invalid grid square column "A" for zone "32V"'),
            ("31XAA1234567890", 'Invalid grid square column "A" for zone "31X"'),
            ("31UDF4825111932", 'Invalid grid square row "F" for zone "31U"'),
            ("32VJC1234567890", 'Invalid grid square row "C" for zone "32V"'),
        ],
    )
    def test_rejected(self, raw: str, message: str) -> None:
        """Test the first failing validator message is raised."""
        with pytest.raises(ParseError) as exc_info:
            create_mgrs(raw)

        assert exc_info.value.message == message
