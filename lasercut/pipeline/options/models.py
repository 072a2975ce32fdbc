"""Laser-cut option dataclasses: the generator's input structure."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


Size = Literal["16", "20", "24"]            # nominal diagonal, inches
Material = Literal["walnut", "maple", "oak"]

SIZES: tuple[str, ...] = ("16", "20", "24")
MATERIALS: tuple[str, ...] = ("walnut", "maple", "oak")


@dataclass(frozen=True)
class TileGridSize:
    rows: int
    cols: int

    @property
    def total(self) -> int:
        """Number of individually addressable tiles."""
        return self.rows * self.cols


@dataclass(frozen=True)
class LaserCutOptions:
    """One generation run's inputs.

    material is a label only (engraved on the frame, used in filenames);
    it never changes geometry.  thickness only sizes the slot depth.
    """
    size: Size
    material: Material
    thickness: float                    # mm
    include_assembly_guide: bool
    include_mounting_holes: bool
    tile_grid_size: TileGridSize

    @property
    def size_inches(self) -> int:
        return int(self.size)


class LaserCutOptionsError(Exception):
    """Raised when options are malformed and no geometry can be planned."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("Invalid laser-cut options: " + "; ".join(self.errors))
