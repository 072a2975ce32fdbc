"""SVG serialization: one millimetre-unit document per part.

1 user unit = 1 mm: the root's width/height carry an ``mm`` suffix and
the viewBox uses the same numbers.  Every layer is a ``<g>`` with
``fill="none"`` so paths are strokes only, never filled regions.
"""

from __future__ import annotations

from xml.sax.saxutils import escape

from lasercut.pipeline.geometry.paths import fmt_number
from lasercut.pipeline.layers import SVGLayer

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
DOCUMENT_TITLE = "Microseasons Calendar - Laser Cut File"
DOCUMENT_DESC = "Generated laser cutting file. Red=Cut, Blue=Engrave, Green=Score"


def create_svg(width: float, height: float, layers: list[SVGLayer]) -> str:
    """Serialize layers into a complete SVG document string.

    Path data is emitted verbatim.  Text annotations are centred on their
    anchor and filled in the layer colour (``stroke="none"``).
    """
    w = fmt_number(width)
    h = fmt_number(height)
    out = [
        f"{XML_DECLARATION}\n"
        f'<svg width="{w}mm" height="{h}mm" viewBox="0 0 {w} {h}"\n'
        f'     xmlns="{SVG_NAMESPACE}" version="1.1">\n'
        f"  <title>{DOCUMENT_TITLE}</title>\n"
        f"  <desc>{DOCUMENT_DESC}</desc>\n"
        "\n"
    ]

    for layer in layers:
        out.append(
            f'  <g id="{layer.name}" stroke="{layer.color}" '
            f'stroke-width="{fmt_number(layer.stroke_width)}" fill="none">\n'
        )
        for d in layer.paths:
            out.append(f'    <path d="{d}" />\n')
        for t in layer.texts or []:
            out.append(
                f'    <text x="{fmt_number(t.x)}" y="{fmt_number(t.y)}" '
                f'font-size="{fmt_number(t.size)}" text-anchor="middle" '
                f'fill="{layer.color}" stroke="none">{escape(t.content)}</text>\n'
            )
        out.append("  </g>\n")

    out.append("</svg>")
    return "".join(out)
