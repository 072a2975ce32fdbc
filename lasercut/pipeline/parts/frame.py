"""Main frame: the visible front plate that holds the tiles."""

from __future__ import annotations

import logging

from lasercut.pipeline.geometry import PlateGeometry, plan_plate
from lasercut.pipeline.geometry.paths import circle_path, rect_path
from lasercut.pipeline.layers import LaserCutFile, TextAnnotation, make_layer
from lasercut.pipeline.options import LaserCutOptions
from lasercut.pipeline.svg import create_svg

log = logging.getLogger(__name__)

TITLE_TEXT = "MICROSEASONS"
TITLE_Y_MM = 20
TITLE_SIZE_MM = 8
MATERIAL_LABEL_OFFSET_MM = 10   # up from the bottom edge
MATERIAL_LABEL_SIZE_MM = 4


def generate_main_frame(
    options: LaserCutOptions,
    plate: PlateGeometry | None = None,
) -> LaserCutFile:
    """Frame with one slot per tile cell and optional corner mounting holes.

    Cut: rounded silhouette, slots (cell width less clearance, full cell
    height less the 1 mm inset top and bottom), mounting holes.
    Engrave: title, material label, decorative inset border.
    """
    plate = plate or plan_plate(options)
    rules = plate.rules
    inset = rules.slot_clearance_mm / 2

    cut_paths = [plate.outline_path()]

    for row, col in plate.cells():
        x, y = plate.cell_origin(row, col)
        cut_paths.append(rect_path(
            x + inset, y + inset,
            x + plate.slot_width + inset, y + plate.tile_height - inset,
        ))

    if options.include_mounting_holes:
        for hx, hy in plate.mounting_hole_centers():
            cut_paths.append(circle_path(hx, hy, rules.mounting_hole_radius_mm))

    border = rules.border_inset_mm
    engrave_paths = [
        rect_path(border, border, plate.width - border, plate.height - border),
    ]
    engrave_texts = [
        TextAnnotation(x=plate.width / 2, y=TITLE_Y_MM, content=TITLE_TEXT, size=TITLE_SIZE_MM),
        TextAnnotation(
            x=plate.width / 2,
            y=plate.height - MATERIAL_LABEL_OFFSET_MM,
            content=options.material.upper(),
            size=MATERIAL_LABEL_SIZE_MM,
        ),
    ]

    layers = [
        make_layer("cut", cut_paths),
        make_layer("engrave", engrave_paths, engrave_texts),
    ]
    log.debug("Frame: %d cut paths, mounting holes=%s",
              len(cut_paths), options.include_mounting_holes)

    return LaserCutFile(
        filename=f"calendar-frame-{options.size}inch-{options.material}.svg",
        svg=create_svg(plate.width, plate.height, layers),
        description="Main calendar frame with tile slots and mounting holes",
    )
