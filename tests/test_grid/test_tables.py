"""
Tests for the static grid tables.
"""

import pytest

from geogrid.core.grid.tables import (
    EVEN_ZONE_ROWS,
    GRID_COLUMN_LETTERS,
    GRID_ROW_LETTERS,
    GRID_ZONE_LETTERS,
    GRID_ZONE_LIMITS,
    ODD_ZONE_ROWS,
    ZoneBand,
    allowed_columns,
    column_set,
    hemisphere_for_letter,
    row_sequence,
    zone_half_width,
)


class TestZoneLimits:
    """Tests for the latitude band table."""

    def test_every_letter_has_limits(self) -> None:
        """Test the table covers every band letter."""
        assert set(GRID_ZONE_LIMITS) == set(GRID_ZONE_LETTERS)
        assert "I" not in GRID_ZONE_LETTERS
        assert "O" not in GRID_ZONE_LETTERS

    def test_bands_are_contiguous(self) -> None:
        """Test consecutive bands share their edges."""
        bands = [GRID_ZONE_LIMITS[letter] for letter in GRID_ZONE_LETTERS]
        for lower, upper in zip(bands, bands[1:]):
            assert lower.lat_max == upper.lat_min

    def test_band_x_is_taller(self) -> None:
        """Test band X spans 72°N to 84°N."""
        assert GRID_ZONE_LIMITS["X"] == ZoneBand("X", 72, 84, 7900000, 9100000)

    def test_table_is_read_only(self) -> None:
        """Test the table cannot be modified."""
        with pytest.raises(TypeError):
            GRID_ZONE_LIMITS["A"] = GRID_ZONE_LIMITS["C"]  # type: ignore[index]


class TestLetterSets:
    """Tests for column and row letter sets."""

    def test_alphabets_skip_i_and_o(self) -> None:
        """Test I and O are never grid letters."""
        for letters in (GRID_COLUMN_LETTERS, GRID_ROW_LETTERS):
            assert "I" not in letters
            assert "O" not in letters
        assert len(GRID_COLUMN_LETTERS) == 24
        assert len(GRID_ROW_LETTERS) == 20

    @pytest.mark.parametrize(
        "zone,letters",
        [(1, "ABCDEFGH"), (2, "JKLMNPQR"), (3, "STUVWXYZ"), (31, "ABCDEFGH"), (60, "STUVWXYZ")],
    )
    def test_column_set(self, zone: int, letters: str) -> None:
        """Test column sets by zone."""
        assert column_set(zone) == letters

    def test_row_sequence(self) -> None:
        """Test odd and even zone row sequences."""
        assert row_sequence(31) == ODD_ZONE_ROWS == "ABCDEFGHJKLMNPQRSTUV"
        assert row_sequence(32) == EVEN_ZONE_ROWS == "FGHJKLMNPQRSTUVABCDE"


class TestZoneExceptions:
    """Tests for Norway and Svalbard."""

    def test_norway_columns(self) -> None:
        """Test zone 32V is limited to J through N."""
        assert allowed_columns(32, "V") == "JKLMN"
        assert allowed_columns(32, "U") == "JKLMNPQR"

    @pytest.mark.parametrize(
        "zone,letters",
        [(31, "CDEFG"), (33, "TUVWXY"), (35, "KLMNPQ"), (37, "BCDEF"), (32, ""), (38, "JKLMNPQR")],
    )
    def test_svalbard_columns(self, zone: int, letters: str) -> None:
        """Test band X columns."""
        assert allowed_columns(zone, "X") == letters

    def test_zone_half_width(self) -> None:
        """Test widened zones."""
        assert zone_half_width(31, "U") == 3.0
        assert zone_half_width(32, "V") == 6.0
        assert zone_half_width(33, "X") == 6.0
        assert zone_half_width(38, "X") == 3.0

    @pytest.mark.parametrize("letter,hemisphere", [("C", "S"), ("M", "S"), ("N", "N"), ("X", "N")])
    def test_hemisphere_for_letter(self, letter: str, hemisphere: str) -> None:
        """Test hemispheres by band."""
        assert hemisphere_for_letter(letter) == hemisphere
