"""Physical feasibility checks for a planned plate and tile sheet.

The generator never refuses a well-formed request: a grid that is too
dense for the plate still produces syntactically valid SVG.  These
checks put a name on what would go wrong on the machine so callers can
surface it.
"""

from __future__ import annotations

import logging

from shapely.geometry import Point, box as shapely_box

from lasercut.config import defaults
from lasercut.pipeline.options import LaserCutOptions

from .planner import PlateGeometry, TileSheetLayout

log = logging.getLogger(__name__)

_EPS = 1e-6


def check_plate_geometry(
    plate: PlateGeometry,
    sheet: TileSheetLayout,
    options: LaserCutOptions | None = None,
) -> list[str]:
    """Return feasibility warnings (empty = everything fits).  Each is also logged."""
    warnings = _collect_warnings(plate, sheet, options)
    for w in warnings:
        log.warning("Geometry: %s", w)
    return warnings


def _collect_warnings(
    plate: PlateGeometry,
    sheet: TileSheetLayout,
    options: LaserCutOptions | None,
) -> list[str]:
    warnings: list[str] = []
    rules = plate.rules

    # ── Recommended ranges ──
    if options is not None:
        t_min, t_max = defaults.thickness_range
        if not (t_min <= options.thickness <= t_max):
            warnings.append(
                f"thickness {options.thickness} mm outside recommended "
                f"{t_min:g}–{t_max:g} mm"
            )
        g_min, g_max = defaults.grid_range
        for axis in ("rows", "cols"):
            value = getattr(options.tile_grid_size, axis)
            if not (g_min <= value <= g_max):
                warnings.append(
                    f"tile grid {axis}={value} outside recommended {g_min}–{g_max}"
                )

    # ── Cell / slot / tile sizes ──
    if plate.tile_width <= 0 or plate.tile_height <= 0:
        warnings.append(
            f"tile cells are degenerate ({plate.tile_width:.3f}×{plate.tile_height:.3f} mm); "
            f"a {plate.rows}×{plate.cols} grid does not fit a {plate.width:.1f} mm plate"
        )
        return warnings
    if plate.slot_width <= 0 or plate.tile_height <= rules.slot_clearance_mm:
        warnings.append(
            f"frame slots vanish: cell {plate.tile_width:.3f}×{plate.tile_height:.3f} mm "
            f"is not larger than the {rules.slot_clearance_mm:g} mm clearance"
        )
    if sheet.tile_width <= 0 or sheet.tile_height <= 0:
        warnings.append(
            f"tiles are degenerate ({sheet.tile_width:.3f}×{sheet.tile_height:.3f} mm)"
        )
        return warnings

    # ── Slots stay inside the tile field ──
    field = shapely_box(
        plate.start_x, plate.start_y,
        plate.width - rules.grid_margin_mm, plate.height - rules.grid_margin_mm,
    ).buffer(_EPS)
    for row, col in plate.cells():
        x, y = plate.cell_origin(row, col)
        slot = shapely_box(x + 1, y + 1, x + plate.slot_width + 1, y + plate.tile_height - 1)
        if not field.contains(slot):
            warnings.append(f"frame slot r{row}c{col} leaves the tile field")
            break

    # ── LED holes fit their cell / tile ──
    diffuser_r = rules.diffuser_led_hole_radius_mm
    cx, cy = plate.cell_center(0, 0)
    x0, y0 = plate.cell_origin(0, 0)
    cell = shapely_box(x0, y0, x0 + plate.tile_width, y0 + plate.tile_height).buffer(_EPS)
    if not cell.contains(Point(cx, cy).buffer(diffuser_r)):
        warnings.append(
            f"diffuser LED holes (r={diffuser_r:g} mm) overlap neighbouring cells"
        )

    tile_r = rules.tile_led_hole_radius_mm
    tx, ty = sheet.tile_origin(0)
    tile = shapely_box(tx, ty, tx + sheet.tile_width, ty + sheet.tile_height)
    if not tile.contains(Point(sheet.tile_center(0)).buffer(tile_r)):
        warnings.append(
            f"tile LED hole (r={tile_r:g} mm) does not fit inside a "
            f"{sheet.tile_width:.3f}×{sheet.tile_height:.3f} mm tile"
        )

    # ── Mounting holes clear of the tile field ──
    hole_r = rules.mounting_hole_radius_mm
    field_core = field.buffer(-2 * _EPS)
    for hx, hy in plate.mounting_hole_centers():
        if Point(hx, hy).buffer(hole_r).intersects(field_core):
            warnings.append(f"mounting hole at ({hx:.1f}, {hy:.1f}) cuts into the tile field")

    return warnings
