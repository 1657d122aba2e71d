"""
MGRS/UTM grid tables and the validator chains built on them.

Validators live in ``geogrid.core.grid.validators`` and are imported from
there directly; they depend on the converters in ``geogrid.core.crs``.
"""

from .tables import (
    GRID_COLUMN_LETTERS,
    GRID_COLUMN_SETS,
    GRID_ROW_CYCLE_METERS,
    GRID_ROW_LETTERS,
    GRID_SQUARE_SIZE,
    GRID_ZONE_LETTERS,
    GRID_ZONE_LIMITS,
    NORWAY_COLUMNS,
    SVALBARD_COLUMNS,
    X_BAND_EXCLUDED_ZONES,
    ZoneBand,
    allowed_columns,
    column_set,
    hemisphere_for_letter,
    row_sequence,
    zone_half_width,
)

__all__ = [
    "GRID_COLUMN_LETTERS",
    "GRID_COLUMN_SETS",
    "GRID_ROW_CYCLE_METERS",
    "GRID_ROW_LETTERS",
    "GRID_SQUARE_SIZE",
    "GRID_ZONE_LETTERS",
    "GRID_ZONE_LIMITS",
    "NORWAY_COLUMNS",
    "SVALBARD_COLUMNS",
    "X_BAND_EXCLUDED_ZONES",
    "ZoneBand",
    "allowed_columns",
    "column_set",
    "hemisphere_for_letter",
    "row_sequence",
    "zone_half_width",
]
