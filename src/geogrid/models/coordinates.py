"""
Coordinate value objects.

Each coordinate is an immutable dataclass tagged with its CoordinateSystem.
Conversions are computed on demand: the converted values are serialized and
parsed again by the target system's factory, so every result is re-validated.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Union


class CoordinateSystem(str, Enum):
    """Supported coordinate representations."""

    WGS = "wgs"
    UTM = "utm"
    MGRS = "mgrs"


class CoordinateOrder(str, Enum):
    """Axis order of a latitude/longitude pair."""

    LAT_LON = "latlon"
    LON_LAT = "lonlat"


class WGSFormat(str, Enum):
    """Output formats for geographic coordinates."""

    DD = "dd"  # decimal degrees
    DDM = "ddm"  # degrees, decimal minutes
    DMS = "dms"  # degrees, minutes, seconds


class Hemisphere(str, Enum):
    """UTM hemisphere."""

    NORTH = "N"
    SOUTH = "S"


@dataclass(frozen=True)
class WGSCoordinate:
    """
    Geographic coordinate on the WGS84 ellipsoid.

    Attributes:
        lat: Latitude in decimal degrees (-90 to 90)
        lon: Longitude in decimal degrees (-180 to 180)
    """

    system: ClassVar[CoordinateSystem] = CoordinateSystem.WGS

    lat: float
    lon: float

    def to_string(
        self,
        format: Union[WGSFormat, str] = WGSFormat.DD,
        order: Union[CoordinateOrder, str] = CoordinateOrder.LAT_LON,
        compass: bool = False,
    ) -> str:
        """
        Format the coordinate as text.

        Args:
            format: dd, ddm or dms
            order: latlon or lonlat
            compass: Use hemisphere letters instead of signs

        Returns:
            Formatted coordinate, e.g. ``40.7489°, -73.968°``
        """
        from geogrid.core.formatting import format_wgs

        return format_wgs(self.lat, self.lon, format=format, order=order, compass=compass)

    def __str__(self) -> str:
        return self.to_string()

    def to_wgs(self) -> "WGSCoordinate":
        from geogrid.core import factory

        return factory.wgs_to_wgs(self)

    def to_utm(self) -> "UTMCoordinate":
        """
        Convert to UTM, rounded to whole meters.

        Raises:
            ParseError: Outside 80°S to 84°N, or north of 72°N east of 174°E,
                since zone 60 has no band X
        """
        from geogrid.core import factory

        return factory.wgs_to_utm(self)

    def to_mgrs(self, precision: Optional[int] = None) -> "MGRSCoordinate":
        """
        Convert to MGRS.

        Args:
            precision: Digits per axis (0-5), defaults to settings

        Returns:
            MGRS coordinate truncated to the requested precision

        Raises:
            ParseError: Wherever to_utm() raises, and east of about 10.8°E in
                zone 32V, whose grid squares are limited to columns J-N
        """
        from geogrid.core import factory

        return factory.wgs_to_mgrs(self, precision)

    def tokens(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class UTMPrecision:
    """Digit counts of a UTM easting/northing as written."""

    easting: int
    northing: int


@dataclass(frozen=True)
class UTMCoordinate:
    """
    Universal Transverse Mercator coordinate.

    Attributes:
        zone_number: UTM zone (1-60)
        zone_letter: Latitude band letter (C-X, without I and O)
        hemisphere: N or S, derived from the band
        easting: Meters from the zone's false origin
        northing: Meters from the equator (plus 10,000,000 in the south)
        precision: Digit counts used when formatting
    """

    system: ClassVar[CoordinateSystem] = CoordinateSystem.UTM

    zone_number: int
    zone_letter: str
    hemisphere: Hemisphere
    easting: float
    northing: float
    precision: UTMPrecision

    def to_string(self) -> str:
        """Format as ``31U 448251 5411932``."""
        from geogrid.core.formatting import format_utm

        return format_utm(
            self.zone_number,
            self.zone_letter,
            self.easting,
            self.northing,
            precision=self.precision,
        )

    def __str__(self) -> str:
        return self.to_string()

    def to_wgs(self) -> WGSCoordinate:
        from geogrid.core import factory

        return factory.utm_to_wgs(self)

    def to_utm(self) -> "UTMCoordinate":
        from geogrid.core import factory

        return factory.utm_to_utm(self)

    def to_mgrs(self, precision: Optional[int] = None) -> "MGRSCoordinate":
        from geogrid.core import factory

        return factory.utm_to_mgrs(self, precision)

    def tokens(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MGRSCoordinate:
    """
    Military Grid Reference System coordinate.

    The easting/northing digits locate the south-west corner of a cell of
    10^(5 - precision) meters inside the 100km grid square.

    Attributes:
        zone_number: UTM zone (1-60)
        zone_letter: Latitude band letter
        grid_col: 100km square column letter
        grid_row: 100km square row letter
        easting: Easting digits within the square, as an integer
        northing: Northing digits within the square, as an integer
        precision: Digits per axis (0-5)
    """

    system: ClassVar[CoordinateSystem] = CoordinateSystem.MGRS

    zone_number: int
    zone_letter: str
    grid_col: str
    grid_row: str
    easting: int
    northing: int
    precision: int

    def to_string(self, spaced: bool = False) -> str:
        """
        Format the grid reference.

        Args:
            spaced: Separate zone, square and digits with spaces

        Returns:
            ``33VVE7220287839`` or ``33V VE 72202 87839``
        """
        from geogrid.core.formatting import format_mgrs

        return format_mgrs(
            self.zone_number,
            self.zone_letter,
            self.grid_col,
            self.grid_row,
            self.easting,
            self.northing,
            self.precision,
            spaced=spaced,
        )

    def __str__(self) -> str:
        return self.to_string()

    def to_wgs(self) -> WGSCoordinate:
        return self.to_utm().to_wgs()

    def to_utm(self) -> UTMCoordinate:
        from geogrid.core import factory

        return factory.mgrs_to_utm(self)

    def to_mgrs(self, precision: Optional[int] = None) -> "MGRSCoordinate":
        from geogrid.core import factory

        return factory.mgrs_to_mgrs(self, precision)

    def tokens(self) -> Dict[str, Any]:
        return asdict(self)


Coordinate = Union[WGSCoordinate, UTMCoordinate, MGRSCoordinate]
