"""Back panel: carries the electronics and routes the power cable."""

from __future__ import annotations

import logging

from lasercut.pipeline.geometry import PlateGeometry, plan_plate
from lasercut.pipeline.geometry.paths import circle_path, crosshair_path, rect_path
from lasercut.pipeline.layers import LaserCutFile, make_layer
from lasercut.pipeline.options import LaserCutOptions
from lasercut.pipeline.svg import create_svg

log = logging.getLogger(__name__)


def generate_back_panel(
    options: LaserCutOptions,
    plate: PlateGeometry | None = None,
) -> LaserCutFile:
    """Frame silhouette with a bottom cable slot; engraved LED and screw guides.

    The mounting-hole circles are engrave guides at the frame's hole
    positions, emitted whether or not the frame cuts its holes.
    """
    plate = plate or plan_plate(options)
    rules = plate.rules

    slot_w = rules.cable_slot_width_mm
    slot_top = plate.height - rules.cable_slot_offset_mm
    slot_bottom = slot_top + rules.cable_slot_height_mm
    cut_paths = [
        plate.outline_path(),
        rect_path(
            plate.width / 2 - slot_w / 2, slot_top,
            plate.width / 2 + slot_w / 2, slot_bottom,
        ),
    ]

    engrave_paths: list[str] = []
    for row, col in plate.cells():
        cx, cy = plate.cell_center(row, col)
        engrave_paths.append(crosshair_path(cx, cy, rules.crosshair_half_mm))
    for hx, hy in plate.mounting_hole_centers():
        engrave_paths.append(circle_path(hx, hy, rules.mounting_hole_radius_mm))

    layers = [
        make_layer("cut", cut_paths),
        make_layer("engrave", engrave_paths),
    ]
    log.debug("Back panel: %d LED guides", plate.tile_count)

    return LaserCutFile(
        filename=f"back-panel-{options.size}inch-{options.material}.svg",
        svg=create_svg(plate.width, plate.height, layers),
        description="Back panel with cable management and LED mounting guides",
    )
