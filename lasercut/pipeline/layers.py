"""Layer and output-file dataclasses shared by the part builders and the serializer.

Layer conventions (laser software is configured by stroke colour):
  cut      #FF0000  through-cut: outlines, holes, slots
  engrave  #0000FF  surface etch: text, guides, decoration
  score    #00FF00  light cut for fold lines (reserved, no part emits it)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from lasercut.pipeline.config import LAYER_CONVENTION


LayerName = Literal["cut", "engrave", "score"]

LAYER_COLORS: dict[str, str] = {
    "cut": LAYER_CONVENTION.cut,
    "engrave": LAYER_CONVENTION.engrave,
    "score": LAYER_CONVENTION.score,
}


@dataclass(frozen=True)
class TextAnnotation:
    x: float
    y: float
    content: str
    size: float     # font size, mm


@dataclass
class SVGLayer:
    name: LayerName
    color: str
    stroke_width: float
    paths: list[str] = field(default_factory=list)
    texts: list[TextAnnotation] | None = None


@dataclass(frozen=True)
class LaserCutFile:
    """One physical part, ready to hand to laser software."""

    filename: str
    svg: str
    description: str


def make_layer(
    name: LayerName,
    paths: list[str],
    texts: list[TextAnnotation] | None = None,
) -> SVGLayer:
    """Build a layer with the colour and hairline stroke bound to its name."""
    return SVGLayer(
        name=name,
        color=LAYER_COLORS[name],
        stroke_width=LAYER_CONVENTION.stroke_width_mm,
        paths=list(paths),
        texts=list(texts) if texts is not None else None,
    )
