"""Geometry planning: every placement number, computed once per run.

The frame, diffuser and back panel share one PlateGeometry, so their
silhouettes and per-tile features come from the same arithmetic and
stay registered when stacked.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

from lasercut.pipeline.config import MM_PER_INCH, PLATE_RULES, PlateRules
from lasercut.pipeline.options import LaserCutOptions

from .paths import rounded_rect_path


@dataclass(frozen=True)
class PlateGeometry:
    """Outer plate and tile-cell layout shared by frame, diffuser and back panel."""

    width: float
    height: float
    rows: int
    cols: int
    tile_width: float       # cell pitch along X
    tile_height: float      # cell pitch along Y
    slot_depth: float       # reported only; slots are through-cuts in 2D
    rules: PlateRules = field(default=PLATE_RULES, repr=False)

    @property
    def start_x(self) -> float:
        return self.rules.grid_margin_mm

    @property
    def start_y(self) -> float:
        return self.rules.grid_margin_mm

    @property
    def slot_width(self) -> float:
        return self.tile_width - self.rules.slot_clearance_mm

    @property
    def tile_count(self) -> int:
        return self.rows * self.cols

    def cells(self) -> Iterator[tuple[int, int]]:
        """(row, col) pairs, row-major."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def cell_origin(self, row: int, col: int) -> tuple[float, float]:
        return (
            self.start_x + col * self.tile_width,
            self.start_y + row * self.tile_height,
        )

    def cell_center(self, row: int, col: int) -> tuple[float, float]:
        return (
            self.start_x + col * self.tile_width + self.tile_width / 2,
            self.start_y + row * self.tile_height + self.tile_height / 2,
        )

    def mounting_hole_centers(self) -> list[tuple[float, float]]:
        """Four corner positions: top-left, top-right, bottom-left, bottom-right."""
        inset = self.rules.mounting_hole_inset_mm
        return [
            (inset, inset),
            (self.width - inset, inset),
            (inset, self.height - inset),
            (self.width - inset, self.height - inset),
        ]

    def outline_path(self) -> str:
        return rounded_rect_path(self.width, self.height, self.rules.corner_radius_mm)


def plan_plate(options: LaserCutOptions, rules: PlateRules = PLATE_RULES) -> PlateGeometry:
    """Derive the plate plan from options.  No bounds checking."""
    size_inches = options.size_inches
    width = size_inches * MM_PER_INCH
    height = (size_inches * rules.aspect_ratio) * MM_PER_INCH

    rows = options.tile_grid_size.rows
    cols = options.tile_grid_size.cols

    return PlateGeometry(
        width=width,
        height=height,
        rows=rows,
        cols=cols,
        tile_width=(width - rules.grid_margin_total_mm) / cols,
        tile_height=(height - rules.grid_margin_total_mm) / rows,
        slot_depth=options.thickness * rules.slot_depth_ratio,
        rules=rules,
    )


@dataclass(frozen=True)
class TileSheetLayout:
    """Nesting layout for the individual tiles on their own cutting sheet."""

    tile_width: float
    tile_height: float
    tile_count: int
    tiles_per_row: int
    spacing: float

    @property
    def sheet_rows(self) -> int:
        return math.ceil(self.tile_count / self.tiles_per_row)

    @property
    def sheet_width(self) -> float:
        return (self.tile_width + self.spacing) * self.tiles_per_row

    @property
    def sheet_height(self) -> float:
        return (self.tile_height + self.spacing) * self.sheet_rows

    def tile_origin(self, index: int) -> tuple[float, float]:
        sheet_row = index // self.tiles_per_row
        sheet_col = index % self.tiles_per_row
        return (
            sheet_col * (self.tile_width + self.spacing),
            sheet_row * (self.tile_height + self.spacing),
        )

    def tile_center(self, index: int) -> tuple[float, float]:
        x, y = self.tile_origin(index)
        return x + self.tile_width / 2, y + self.tile_height / 2


def plan_tile_sheet(plate: PlateGeometry) -> TileSheetLayout:
    """Each tile is its frame cell less the slot clearance."""
    rules = plate.rules
    return TileSheetLayout(
        tile_width=plate.tile_width - rules.slot_clearance_mm,
        tile_height=plate.tile_height - rules.slot_clearance_mm,
        tile_count=plate.tile_count,
        tiles_per_row=rules.tiles_per_sheet_row,
        spacing=rules.tile_spacing_mm,
    )
