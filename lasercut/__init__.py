"""Laser-cut SVG generator for the physical microseasons calendar.

Turns a handful of user options (diagonal size, wood, thickness, tile
grid, feature toggles) into the set of millimetre-unit SVG files a laser
cutter needs: frame, tile sheet, LED diffuser, back panel and an
optional assembly guide.
"""

__version__ = "0.1.0"
