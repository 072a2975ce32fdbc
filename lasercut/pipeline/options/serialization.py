"""Option serialization: convert LaserCutOptions to JSON-safe dicts."""

from __future__ import annotations

from .models import LaserCutOptions


def options_to_dict(options: LaserCutOptions) -> dict:
    """Convert LaserCutOptions to a JSON-serializable dict."""
    return {
        "size": options.size,
        "material": options.material,
        "thickness": options.thickness,
        "include_assembly_guide": options.include_assembly_guide,
        "include_mounting_holes": options.include_mounting_holes,
        "tile_grid_size": {
            "rows": options.tile_grid_size.rows,
            "cols": options.tile_grid_size.cols,
        },
    }
