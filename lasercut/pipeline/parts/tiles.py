"""Tile sheet: every calendar tile nested four to a row on its own sheet."""

from __future__ import annotations

import logging

from lasercut.pipeline.geometry import PlateGeometry, plan_plate, plan_tile_sheet
from lasercut.pipeline.geometry.paths import (
    circle_path, placeholder_text_path, tabbed_tile_path,
)
from lasercut.pipeline.layers import LaserCutFile, make_layer
from lasercut.pipeline.options import LaserCutOptions
from lasercut.pipeline.svg import create_svg

log = logging.getLogger(__name__)

NUMBER_OFFSET_MM = 2
NUMBER_SIZE_MM = 2


def generate_tile_pieces(
    options: LaserCutOptions,
    plate: PlateGeometry | None = None,
) -> LaserCutFile:
    """One tabbed outline and one LED hole per tile; tile numbers on the engrave layer.

    Tiles are numbered row-major from 1 (row * cols + col + 1), matching
    the frame slot they belong in.  The numbers are placeholder paths
    with no glyph outlines.
    """
    plate = plate or plan_plate(options)
    sheet = plan_tile_sheet(plate)
    rules = plate.rules

    cut_paths: list[str] = []
    engrave_paths: list[str] = []

    for index, (row, col) in enumerate(plate.cells()):
        x, y = sheet.tile_origin(index)
        cut_paths.append(tabbed_tile_path(
            x, y, sheet.tile_width, sheet.tile_height,
            rules.tile_tab_width_mm, rules.tile_tab_height_mm,
        ))
        cx, cy = sheet.tile_center(index)
        cut_paths.append(circle_path(cx, cy, rules.tile_led_hole_radius_mm))
        engrave_paths.append(placeholder_text_path(
            x + NUMBER_OFFSET_MM, y + NUMBER_OFFSET_MM,
            str(row * plate.cols + col + 1), NUMBER_SIZE_MM,
        ))

    layers = [
        make_layer("cut", cut_paths),
        make_layer("engrave", engrave_paths),
    ]
    log.debug("Tile sheet: %d tiles on %.1f×%.1f mm",
              sheet.tile_count, sheet.sheet_width, sheet.sheet_height)

    rows, cols = plate.rows, plate.cols
    return LaserCutFile(
        filename=f"calendar-tiles-{rows}x{cols}-{options.material}.svg",
        svg=create_svg(sheet.sheet_width, sheet.sheet_height, layers),
        description=f"{rows * cols} individual tiles with LED holes",
    )
