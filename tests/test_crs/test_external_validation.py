"""
Cross-check the UTM series against PROJ.

PROJ's transverse Mercator (Poder/Engsager) is the reference; the series
used here should agree to well under a meter across the UTM grid.
"""

import pytest
from pyproj import Transformer

from geogrid import WGSCoordinate
from geogrid.core.crs import utm

# (latitude, longitude) across hemispheres, zone exceptions and zone edges
POINTS = [
    (48.8566, 2.3522),  # Paris
    (40.7484, -73.9857),  # New York
    (-33.8568, 151.2153),  # Sydney
    (-22.9068, -43.1729),  # Rio de Janeiro
    (35.6762, 139.6503),  # Tokyo
    (59.9139, 10.7522),  # Oslo, zone 32V
    (60.39, 5.32),  # Bergen, widened zone 32V
    (78.22, 15.65),  # Longyearbyen, zone 33X
    (0.0, 0.0),  # zone edge on the equator
    (-79.5, -120.0),
    (83.5, -40.0),
]


def _utm_epsg(zone_number: int, hemisphere: str) -> str:
    base = 32600 if hemisphere == "N" else 32700
    return f"EPSG:{base + zone_number}"


class TestAgainstPROJ:
    """Compare projections with pyproj."""

    @pytest.mark.parametrize("lat,lon", POINTS)
    def test_forward(self, lat: float, lon: float) -> None:
        """Test WGS84 -> UTM against PROJ."""
        point = utm.utm_from_wgs(lat, lon)
        transformer = Transformer.from_crs(
            "EPSG:4326", _utm_epsg(point.zone_number, point.hemisphere), always_xy=True
        )
        easting, northing = transformer.transform(lon, lat)

        assert point.easting == pytest.approx(easting, abs=0.1)
        assert point.northing == pytest.approx(northing, abs=0.1)

    @pytest.mark.parametrize("lat,lon", POINTS)
    def test_inverse(self, lat: float, lon: float) -> None:
        """Test UTM -> WGS84 against PROJ."""
        point = utm.utm_from_wgs(lat, lon)
        transformer = Transformer.from_crs(
            _utm_epsg(point.zone_number, point.hemisphere), "EPSG:4326", always_xy=True
        )
        expected_lon, expected_lat = transformer.transform(point.easting, point.northing)

        back_lat, back_lon = utm.wgs_from_utm(
            point.zone_number, point.hemisphere, point.easting, point.northing
        )

        assert back_lat == pytest.approx(expected_lat, abs=2e-6)
        assert back_lon == pytest.approx(expected_lon, abs=2e-6)

    @pytest.mark.parametrize("lat,lon", POINTS[:8])
    def test_utm_coordinate_matches(self, lat: float, lon: float) -> None:
        """Test the rounded UTM coordinate lies within a meter of PROJ."""
        coord = WGSCoordinate(lat=lat, lon=lon).to_utm()
        transformer = Transformer.from_crs(
            "EPSG:4326",
            _utm_epsg(coord.zone_number, coord.hemisphere.value),
            always_xy=True,
        )
        easting, northing = transformer.transform(lon, lat)

        assert coord.easting == pytest.approx(easting, abs=1.0)
        assert coord.northing == pytest.approx(northing, abs=1.0)
