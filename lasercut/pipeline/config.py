"""Shared physical constants for the laser-cut pipeline.

These values describe the physical plate every part is cut from: the
margin around the tile field, the corner radius, the mounting-hole
pattern, and the hole sizes.  The frame, diffuser and back panel all
derive their geometry from this single source of truth, so the stacked
layers stay registered.

Change a value here and every part follows.
"""

from __future__ import annotations

from dataclasses import dataclass


MM_PER_INCH = 25.4

KERF_MM = 0.2
"""Laser beam width.  Shown to the operator as a machine setting; never
applied as a path offset."""


@dataclass(frozen=True)
class PlateRules:
    """Physical design rules for the calendar plates.

    All distances are in millimetres.
    """

    aspect_ratio: float = 0.75
    """Plate height as a fraction of plate width (4:3)."""

    grid_margin_mm: float = 40.0
    """Border between the plate edge and the tile field, on every side."""

    corner_radius_mm: float = 10.0
    """Outer silhouette corner radius (quadratic approximation)."""

    slot_clearance_mm: float = 2.0
    """Width lost by each frame slot, and by each tile, relative to its cell."""

    slot_depth_ratio: float = 0.5
    """Slot depth as a fraction of material thickness."""

    mounting_hole_radius_mm: float = 3.0
    mounting_hole_inset_mm: float = 20.0

    tile_led_hole_radius_mm: float = 2.5
    """5 mm LED through each tile."""

    diffuser_led_hole_radius_mm: float = 3.0
    """Oversized relative to the tile hole to absorb LED placement variance."""

    crosshair_half_mm: float = 2.0

    cable_slot_width_mm: float = 40.0
    cable_slot_height_mm: float = 10.0
    cable_slot_offset_mm: float = 20.0
    """Distance from the bottom edge to the top of the cable slot."""

    border_inset_mm: float = 5.0
    """Decorative engraved border on the frame."""

    tiles_per_sheet_row: int = 4
    tile_spacing_mm: float = 5.0
    tile_tab_width_mm: float = 2.0
    tile_tab_height_mm: float = 1.0

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def grid_margin_total_mm(self) -> float:
        """Space taken by the margins along one axis (both sides)."""
        return 2 * self.grid_margin_mm


# Module-level singleton: importable everywhere.
PLATE_RULES = PlateRules()


@dataclass(frozen=True)
class LayerConvention:
    """Stroke colour per operation.  Laser software is configured by colour."""

    cut: str = "#FF0000"
    engrave: str = "#0000FF"
    score: str = "#00FF00"
    stroke_width_mm: float = 0.1
    """Hairline, so the laser software treats every stroke as a vector."""


LAYER_CONVENTION = LayerConvention()


@dataclass(frozen=True)
class GuideCanvas:
    """Fixed print canvas for the assembly guide (not a physical part)."""

    width_mm: float = 400.0
    height_mm: float = 600.0
    text_x_mm: float = 50.0
    text_top_mm: float = 60.0
    line_pitch_mm: float = 12.0
    diagram_top_mm: float = 450.0
    diagram_pitch_mm: float = 30.0
    diagram_box_width_mm: float = 100.0
    diagram_box_height_mm: float = 15.0


GUIDE_CANVAS = GuideCanvas()
