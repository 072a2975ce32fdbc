"""File assembly: the single entry point that turns options into SVG files.

Order is fixed: frame, tiles, diffuser, back panel, then the assembly
guide when requested.  The plate is planned once and shared by every
plate-sized part.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from lasercut.pipeline.geometry import (
    PlateGeometry, check_plate_geometry, plan_plate, plan_tile_sheet,
)
from lasercut.pipeline.layers import LaserCutFile
from lasercut.pipeline.options import (
    LaserCutOptions, LaserCutOptionsError, validate_options,
)
from lasercut.pipeline.parts import (
    generate_assembly_guide,
    generate_back_panel,
    generate_led_diffuser,
    generate_main_frame,
    generate_tile_pieces,
)

log = logging.getLogger(__name__)


@dataclass
class LaserCutRun:
    """Full result of one generation run."""

    options: LaserCutOptions
    plate: PlateGeometry
    files: list[LaserCutFile]
    warnings: list[str] = field(default_factory=list)


def run_laser_cut(options: LaserCutOptions) -> LaserCutRun:
    """Validate, plan once, check feasibility, then build every part.

    Raises
    ------
    LaserCutOptionsError
        If the options are malformed (unknown size or material,
        non-positive thickness or grid).  Geometry that is merely
        impractical is reported in ``warnings`` and still generated.
    """
    errors = validate_options(options)
    if errors:
        raise LaserCutOptionsError(errors)

    plate = plan_plate(options)
    warnings = check_plate_geometry(plate, plan_tile_sheet(plate), options)

    files = [
        generate_main_frame(options, plate),
        generate_tile_pieces(options, plate),
        generate_led_diffuser(options, plate),
        generate_back_panel(options, plate),
    ]
    if options.include_assembly_guide:
        files.append(generate_assembly_guide(options))

    log.info(
        "Generated %d laser-cut files: %s\" %s, %dx%d tiles, %d warnings",
        len(files), options.size, options.material,
        options.tile_grid_size.rows, options.tile_grid_size.cols, len(warnings),
    )
    return LaserCutRun(options=options, plate=plate, files=files, warnings=warnings)


def generate_laser_cut_files(options: LaserCutOptions) -> list[LaserCutFile]:
    """Generate every laser-cut file for one calendar build, in part order."""
    return run_laser_cut(options).files


def files_to_dict(files: list[LaserCutFile]) -> list[dict]:
    """Serialize generated files to JSON-safe dicts."""
    return [
        {"filename": f.filename, "description": f.description, "svg": f.svg}
        for f in files
    ]


def plan_summary(options: LaserCutOptions) -> dict:
    """Planned dimensions for a preview pane, with feasibility warnings.

    Raises LaserCutOptionsError on malformed options, like
    generate_laser_cut_files.
    """
    errors = validate_options(options)
    if errors:
        raise LaserCutOptionsError(errors)

    plate = plan_plate(options)
    sheet = plan_tile_sheet(plate)
    return {
        "plate": {"width_mm": plate.width, "height_mm": plate.height},
        "cell": {"width_mm": plate.tile_width, "height_mm": plate.tile_height},
        "slot": {"width_mm": plate.slot_width, "depth_mm": plate.slot_depth},
        "tile_sheet": {
            "width_mm": sheet.sheet_width,
            "height_mm": sheet.sheet_height,
            "tile_width_mm": sheet.tile_width,
            "tile_height_mm": sheet.tile_height,
            "tile_count": sheet.tile_count,
        },
        "mounting_holes": [
            {"x_mm": x, "y_mm": y} for x, y in plate.mounting_hole_centers()
        ],
        "warnings": check_plate_geometry(plate, sheet, options),
    }
