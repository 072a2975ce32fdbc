"""Assembly guide: printable instruction sheet, not a physical part."""

from __future__ import annotations

import logging

from lasercut.pipeline.config import GUIDE_CANVAS
from lasercut.pipeline.geometry.paths import rect_path
from lasercut.pipeline.layers import LaserCutFile, TextAnnotation, make_layer
from lasercut.pipeline.options import LaserCutOptions
from lasercut.pipeline.svg import create_svg

log = logging.getLogger(__name__)

GUIDE_TITLE = "MICROSEASONS CALENDAR - ASSEMBLY GUIDE"
GUIDE_TITLE_Y_MM = 30
GUIDE_TITLE_SIZE_MM = 8
HEADING_SIZE_MM = 5
DETAIL_SIZE_MM = 4

# Bottom of the stack first.
EXPLODED_VIEW_LAYERS = ("Back Panel", "LED Layer", "Diffuser", "Frame", "Tiles")
DIAGRAM_LABEL_GAP_MM = 20
DIAGRAM_LABEL_DROP_MM = 10


def assembly_instructions(options: LaserCutOptions) -> list[str]:
    """The five-step instruction block followed by the build summary.

    Indented lines are details of the heading above them; blank strings
    are spacer lines.
    """
    grid = options.tile_grid_size
    return [
        "1. PREPARE MATERIALS",
        "   - Main frame (wood)",
        # Actual rows x cols, not the fixed "72 tiles" of the 12x6 default.
        # Must agree with the tile sheet for every grid.
        f"   - {grid.total} tiles (wood)",
        "   - LED diffuser (acrylic)",
        "   - Back panel (wood)",
        "   - LED strip or individual LEDs",
        "",
        "2. INSTALL LEDS",
        "   - Mount LEDs to back panel using guides",
        "   - Connect to power supply",
        "   - Test all LEDs",
        "",
        "3. ASSEMBLE LAYERS",
        "   - Attach back panel to main frame",
        "   - Install LED diffuser layer",
        "   - Insert tiles into slots",
        "",
        "4. MOUNT TO WALL",
        "   - Use mounting holes at corners",
        f'   - Recommended: {options.size}" from floor',
        "   - Ensure level installation",
        "",
        "5. CONNECT POWER",
        "   - Route cable through back slot",
        "   - Connect to controller",
        "",
        f'SIZE: {options.size}" diagonal',
        f"MATERIAL: {options.material}",
        f"GRID: {grid.rows}x{grid.cols} tiles",
    ]


def generate_assembly_guide(options: LaserCutOptions) -> LaserCutFile:
    """Title, instruction text and a stacked-layer diagram on a fixed 400×600 mm canvas.

    Engrave layer only.
    """
    canvas = GUIDE_CANVAS
    width, height = canvas.width_mm, canvas.height_mm

    texts = [
        TextAnnotation(x=width / 2, y=GUIDE_TITLE_Y_MM, content=GUIDE_TITLE, size=GUIDE_TITLE_SIZE_MM),
    ]
    for index, line in enumerate(assembly_instructions(options)):
        texts.append(TextAnnotation(
            x=canvas.text_x_mm,
            y=canvas.text_top_mm + index * canvas.line_pitch_mm,
            content=line,
            size=DETAIL_SIZE_MM if line.startswith(" ") else HEADING_SIZE_MM,
        ))

    paths: list[str] = []
    box_w = canvas.diagram_box_width_mm
    box_h = canvas.diagram_box_height_mm
    for index, label in enumerate(EXPLODED_VIEW_LAYERS):
        y = canvas.diagram_top_mm + index * canvas.diagram_pitch_mm
        x = width / 2 - box_w / 2
        paths.append(rect_path(x, y, x + box_w, y + box_h))
        texts.append(TextAnnotation(
            x=x + box_w + DIAGRAM_LABEL_GAP_MM,
            y=y + DIAGRAM_LABEL_DROP_MM,
            content=label,
            size=DETAIL_SIZE_MM,
        ))

    log.debug("Assembly guide: %d text lines", len(texts))

    return LaserCutFile(
        filename=f"assembly-guide-{options.size}inch.svg",
        svg=create_svg(width, height, [make_layer("engrave", paths, texts)]),
        description="Assembly instructions and parts diagram",
    )
