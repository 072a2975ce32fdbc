"""Calendar test fixture: the reference build and helpers for reading its SVG.

The reference build is the product default:
  - 20" diagonal plate (508 × 381 mm), walnut, 6 mm stock
  - 12 rows × 6 cols = 72 tiles
  - assembly guide and mounting holes enabled
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import replace

from lasercut.pipeline.options import LaserCutOptions, TileGridSize

SVG_NS = "{http://www.w3.org/2000/svg}"

_TOKEN = re.compile(r"[A-Za-z]|-?\d+(?:\.\d+)?(?:e-?\d+)?")


def make_default_options(**overrides) -> LaserCutOptions:
    """Return the reference LaserCutOptions, with any field replaced."""
    options = LaserCutOptions(
        size="20",
        material="walnut",
        thickness=6.0,
        include_assembly_guide=True,
        include_mounting_holes=True,
        tile_grid_size=TileGridSize(rows=12, cols=6),
    )
    return replace(options, **overrides)


def make_grid_options(rows: int, cols: int, **overrides) -> LaserCutOptions:
    return make_default_options(tile_grid_size=TileGridSize(rows=rows, cols=cols), **overrides)


def parse_svg(svg: str) -> ET.Element:
    # ElementTree rejects str input that carries an encoding declaration.
    return ET.fromstring(svg.encode("utf-8"))


def layer(root: ET.Element, name: str) -> ET.Element | None:
    for g in root.findall(f"{SVG_NS}g"):
        if g.get("id") == name:
            return g
    return None


def layer_paths(root: ET.Element, name: str) -> list[str]:
    g = layer(root, name)
    if g is None:
        return []
    return [p.get("d") for p in g.findall(f"{SVG_NS}path")]


def layer_texts(root: ET.Element, name: str) -> list[str]:
    g = layer(root, name)
    if g is None:
        return []
    return [t.text or "" for t in g.findall(f"{SVG_NS}text")]


def view_box(root: ET.Element) -> tuple[float, float, float, float]:
    x, y, w, h = (float(v) for v in root.get("viewBox").split())
    return x, y, w, h


def path_points(d: str) -> list[tuple[float, float]]:
    """End and control points of a path made of M, L, Q, A and Z commands."""
    tokens = _TOKEN.findall(d)
    points: list[tuple[float, float]] = []
    i = 0
    while i < len(tokens):
        cmd = tokens[i]
        i += 1
        if cmd in ("M", "L"):
            points.append((float(tokens[i]), float(tokens[i + 1])))
            i += 2
        elif cmd == "Q":
            points.append((float(tokens[i]), float(tokens[i + 1])))
            points.append((float(tokens[i + 2]), float(tokens[i + 3])))
            i += 4
        elif cmd == "A":
            # rx ry rotation large-arc sweep x y
            points.append((float(tokens[i + 5]), float(tokens[i + 6])))
            i += 7
        elif cmd == "Z":
            continue
        else:
            raise ValueError(f"unexpected path token {cmd!r} in {d!r}")
    return points
