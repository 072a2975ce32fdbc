"""
Generator defaults: single source of truth for user-facing option values.

Loads laser_cut_defaults.json once and exposes typed accessors.
"""

from __future__ import annotations
import json
from pathlib import Path
from functools import lru_cache


_CONFIG_PATH = Path(__file__).resolve().parent / "laser_cut_defaults.json"


@lru_cache(maxsize=1)
def _load() -> dict:
    return json.loads(_CONFIG_PATH.read_text(encoding="utf-8"))


class _Defaults:
    """Typed accessor for generator defaults."""

    # ── raw section accessors ───────────────────────────────────────
    @property
    def options(self) -> dict:
        return _load()["options"]

    @property
    def choices(self) -> dict:
        return _load()["choices"]

    @property
    def recommended(self) -> dict:
        return _load()["recommended"]

    # ── options ─────────────────────────────────────────────────────
    @property
    def size(self) -> str:
        return str(_load()["options"]["size"])

    @property
    def material(self) -> str:
        return _load()["options"]["material"]

    @property
    def thickness(self) -> float:
        return float(_load()["options"]["thickness_mm"])

    @property
    def include_assembly_guide(self) -> bool:
        return bool(_load()["options"]["include_assembly_guide"])

    @property
    def include_mounting_holes(self) -> bool:
        return bool(_load()["options"]["include_mounting_holes"])

    @property
    def rows(self) -> int:
        return int(_load()["options"]["tile_grid"]["rows"])

    @property
    def cols(self) -> int:
        return int(_load()["options"]["tile_grid"]["cols"])

    # ── choices ─────────────────────────────────────────────────────
    @property
    def sizes(self) -> tuple[str, ...]:
        return tuple(_load()["choices"]["sizes"])

    @property
    def materials(self) -> tuple[str, ...]:
        return tuple(_load()["choices"]["materials"])

    # ── recommended ranges (warnings only) ──────────────────────────
    @property
    def thickness_range(self) -> tuple[float, float]:
        r = _load()["recommended"]
        return float(r["thickness_min_mm"]), float(r["thickness_max_mm"])

    @property
    def grid_range(self) -> tuple[int, int]:
        r = _load()["recommended"]
        return int(r["grid_min"]), int(r["grid_max"])

    # ── export ──────────────────────────────────────────────────────
    @property
    def download_delay_s(self) -> float:
        return float(_load()["export"]["download_delay_s"])


defaults = _Defaults()
