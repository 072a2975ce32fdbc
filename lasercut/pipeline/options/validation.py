"""Option validation: reject malformed input before any geometry is planned."""

from __future__ import annotations

import math
from numbers import Integral, Real

from .models import LaserCutOptions, SIZES, MATERIALS


def validate_options(options: LaserCutOptions) -> list[str]:
    """Validate LaserCutOptions. Returns error messages (empty = valid).

    Only structural problems are errors.  A well-formed grid that is too
    dense for the plate still generates; check_plate_geometry reports it.
    """
    errors: list[str] = []

    # ── Enumerated tokens ──
    if options.size not in SIZES:
        errors.append(
            f"size '{options.size}' not supported (expected one of {', '.join(SIZES)})"
        )
    if options.material not in MATERIALS:
        errors.append(
            f"material '{options.material}' not supported "
            f"(expected one of {', '.join(MATERIALS)})"
        )

    # ── Thickness ──
    t = options.thickness
    if isinstance(t, bool) or not isinstance(t, Real):
        errors.append(f"thickness must be a number, got {t!r}")
    elif not math.isfinite(t) or t <= 0:
        errors.append(f"thickness must be a positive number of mm, got {t}")

    # ── Tile grid ──
    grid = options.tile_grid_size
    for axis in ("rows", "cols"):
        value = getattr(grid, axis)
        if isinstance(value, bool) or not isinstance(value, Integral):
            errors.append(f"tile grid {axis} must be an integer, got {value!r}")
        elif value < 1:
            errors.append(f"tile grid {axis} must be >= 1, got {value}")

    return errors
