"""
Demonstration of coordinate parsing and conversion.

This script shows how geogrid parses free-text WGS84, UTM and MGRS input,
converts between the systems and reports invalid input.
"""

from geogrid import (
    GeoGridException,
    create_coordinate,
    create_mgrs,
    create_utm,
    create_wgs,
)
from geogrid.core.logging_config import setup_logging


def demo_parse_wgs():
    """Demonstrate the accepted WGS input forms."""
    print("=" * 60)
    print("DEMO 1: Parsing WGS84 Input")
    print("=" * 60)

    inputs = [
        "40.7128N 74.0060W",
        "40.7128, -74.0060",
        "40°42'46\"N 74°0'22\"W",
        "N 40 42.768 W 74 0.36",
        "404246N0740022W",
        "40.7128 north 74.0060 west",
    ]
    for raw in inputs:
        coord = create_wgs(raw)
        print(f"  {raw:32s} -> {coord}")

    coord = create_wgs("-74.0060 40.7128", order="lonlat")
    print(f"\n  lonlat order                     -> {coord}")


def demo_formats():
    """Demonstrate WGS output formats."""
    print("\n" + "=" * 60)
    print("DEMO 2: WGS84 Output Formats")
    print("=" * 60)

    coord = create_wgs("48.8584, 2.2945")
    for fmt in ("dd", "ddm", "dms"):
        print(f"  {fmt:4s} {coord.to_string(format=fmt)}")
        print(f"  {fmt:4s} {coord.to_string(format=fmt, compass=True)}")


def demo_conversions():
    """Demonstrate conversions between systems."""
    print("\n" + "=" * 60)
    print("DEMO 3: Converting Between Systems")
    print("=" * 60)

    places = {
        "Eiffel Tower": "48.8584N 2.2945E",
        "Sydney Opera House": "33.8568S 151.2153E",
        "Oslo": "59.9139N 10.7522E",
        "Longyearbyen": "78.22N 15.65E",
    }
    for name, raw in places.items():
        wgs = create_wgs(raw)
        utm = wgs.to_utm()
        mgrs = wgs.to_mgrs()
        print(f"\n  {name}")
        print(f"    WGS84: {wgs}")
        print(f"    UTM:   {utm}")
        print(f"    MGRS:  {mgrs.to_string(spaced=True)}")
        print(f"    MGRS (100 m): {wgs.to_mgrs(precision=3)}")

    mgrs = create_mgrs("33VVE7220287839")
    print(f"\n  {mgrs} -> UTM {mgrs.to_utm()} -> WGS84 {mgrs.to_wgs()}")

    utm = create_coordinate("31U 448251 5411932", "utm")
    print(f"  {utm} -> WGS84 {utm.to_wgs().to_string(format='dms', compass=True)}")


def demo_errors():
    """Demonstrate validation errors."""
    print("\n" + "=" * 60)
    print("DEMO 4: Invalid Input")
    print("=" * 60)

    attempts = [
        (create_wgs, "91N 0E"),
        (create_wgs, "40° 61' N, 74° W"),
        (create_utm, "61U 448251 5411932"),
        (create_utm, "31U 448251 1000000"),
        (create_mgrs, "32VPM9700043000"),
        (create_mgrs, "31UDQ482511193"),
    ]
    for factory, raw in attempts:
        try:
            factory(raw)
        except GeoGridException as e:
            print(f"  {raw:24s} {e.error_code}: {e.message}")


def main():
    """Run all demonstrations."""
    setup_logging(log_level="WARNING")

    print("\n" + "=" * 60)
    print("GEOGRID COORDINATE DEMONSTRATION")
    print("=" * 60 + "\n")

    demo_parse_wgs()
    demo_formats()
    demo_conversions()
    demo_errors()

    print("\n" + "=" * 60)
    print("DEMONSTRATION COMPLETE")
    print("=" * 60)
    print("\nFor more information, see:")
    print("  - src/geogrid/core/factory.py")
    print("  - src/geogrid/core/grid/validators.py")
    print("  - tests/test_factory.py")
    print()


if __name__ == "__main__":
    main()
