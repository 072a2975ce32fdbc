"""Option parsing: convert raw dicts/JSON into LaserCutOptions."""

from __future__ import annotations

from collections.abc import Mapping

from lasercut.config import defaults

from .models import LaserCutOptions, LaserCutOptionsError, TileGridSize


def parse_options(data: dict | None = None) -> LaserCutOptions:
    """Parse a raw dict (from JSON / request body) into LaserCutOptions.

    Missing keys take the configured defaults.  Both snake_case and the
    camelCase keys used by the web front-end are accepted.  Values are
    not range-checked here; see validate_options.

    Raises LaserCutOptionsError if the tile grid is not a mapping with
    rows and cols.
    """
    data = data or {}

    grid = _pick(data, "tile_grid_size", "tileGridSize", default={})
    if isinstance(grid, TileGridSize):
        grid = {"rows": grid.rows, "cols": grid.cols}
    elif not isinstance(grid, Mapping):
        raise LaserCutOptionsError([
            f"tile grid must be an object with rows and cols, got {grid!r}"
        ])

    return LaserCutOptions(
        size=_size_token(_pick(data, "size", default=defaults.size)),
        material=_pick(data, "material", default=defaults.material),
        thickness=_pick(data, "thickness", default=defaults.thickness),
        include_assembly_guide=bool(_pick(
            data, "include_assembly_guide", "includeAssemblyGuide",
            default=defaults.include_assembly_guide,
        )),
        include_mounting_holes=bool(_pick(
            data, "include_mounting_holes", "includeMountingHoles",
            default=defaults.include_mounting_holes,
        )),
        tile_grid_size=TileGridSize(
            rows=grid.get("rows", defaults.rows),
            cols=grid.get("cols", defaults.cols),
        ),
    )


def _pick(data: dict, *keys: str, default=None):
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _size_token(raw) -> str:
    """20 / 20.0 / "20" → "20".  Anything else passes through as text."""
    if isinstance(raw, bool):
        return str(raw)
    if isinstance(raw, float) and raw.is_integer():
        return str(int(raw))
    return str(raw).strip()
