"""Geometry: plate planning, SVG path primitives and feasibility checks.

Submodules:
  paths     Path-data builders and number formatting.
  planner   PlateGeometry / TileSheetLayout, computed once per run.
  checks    Shapely-based feasibility warnings.
"""

from .planner import PlateGeometry, TileSheetLayout, plan_plate, plan_tile_sheet
from .checks import check_plate_geometry

__all__ = [
    "PlateGeometry", "TileSheetLayout", "plan_plate", "plan_tile_sheet",
    "check_plate_geometry",
]
