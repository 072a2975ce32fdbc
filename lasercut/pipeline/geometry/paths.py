"""
SVG path-data primitives.

All coordinates in mm, origin top-left, X = width, Y = height (SVG user
space).  Numbers are written in their shortest round-trip form so that
a given plan always serializes to the same bytes.
"""

from __future__ import annotations

from decimal import Decimal


def fmt_number(n: float) -> str:
    """Shortest decimal text for n; integral values carry no fraction.

    508.0 -> "508", 304.79999999999995 -> "304.79999999999995",
    1.5e-05 -> "0.000015".
    """
    if isinstance(n, int):
        return str(n)
    if n.is_integer() and abs(n) < 1e21:
        return str(int(n))
    text = repr(n)
    if "e" in text and abs(n) >= 1e-6:
        text = format(Decimal(text), "f")
    return text


_f = fmt_number


# ── closed outlines ─────────────────────────────────────────────────


def rounded_rect_path(width: float, height: float, radius: float) -> str:
    """Plate silhouette anchored at the origin, quadratic corner curves."""
    w, h, r = width, height, radius
    return (
        f"M {_f(r)} 0 "
        f"L {_f(w - r)} 0 "
        f"Q {_f(w)} 0 {_f(w)} {_f(r)} "
        f"L {_f(w)} {_f(h - r)} "
        f"Q {_f(w)} {_f(h)} {_f(w - r)} {_f(h)} "
        f"L {_f(r)} {_f(h)} "
        f"Q 0 {_f(h)} 0 {_f(h - r)} "
        f"L 0 {_f(r)} "
        f"Q 0 0 {_f(r)} 0 Z"
    )


def rect_path(x0: float, y0: float, x1: float, y1: float) -> str:
    """Axis-aligned rectangle from two opposite corners (clockwise)."""
    return (
        f"M {_f(x0)} {_f(y0)} "
        f"L {_f(x1)} {_f(y0)} "
        f"L {_f(x1)} {_f(y1)} "
        f"L {_f(x0)} {_f(y1)} Z"
    )


def circle_path(cx: float, cy: float, r: float) -> str:
    """Full circle as two half arcs.  Left open; the second arc ends on the start."""
    return (
        f"M {_f(cx - r)} {_f(cy)} "
        f"A {_f(r)} {_f(r)} 0 1 0 {_f(cx + r)} {_f(cy)} "
        f"A {_f(r)} {_f(r)} 0 1 0 {_f(cx - r)} {_f(cy)}"
    )


def tabbed_tile_path(
    x: float, y: float, width: float, height: float,
    tab_width: float, tab_height: float,
) -> str:
    """Tile outline with a small orientation notch at the top-left corner.

    Two subpaths: the notch, then the body.  The body's Z closes back to
    the notch's inner corner.
    """
    return (
        f"M {_f(x)} {_f(y + tab_height)} "
        f"L {_f(x)} {_f(y)} "
        f"L {_f(x + tab_width)} {_f(y)} "
        f"L {_f(x + tab_width)} {_f(y + tab_height)} "
        f"M {_f(x + tab_width)} {_f(y + tab_height)} "
        f"L {_f(x + width)} {_f(y + tab_height)} "
        f"L {_f(x + width)} {_f(y + height)} "
        f"L {_f(x)} {_f(y + height)} Z"
    )


# ── open marks ──────────────────────────────────────────────────────


def crosshair_path(x: float, y: float, half: float) -> str:
    """Plus-shaped alignment mark centred on (x, y)."""
    return (
        f"M {_f(x - half)} {_f(y)} L {_f(x + half)} {_f(y)} "
        f"M {_f(x)} {_f(y - half)} L {_f(x)} {_f(y + half)}"
    )


def placeholder_text_path(x: float, y: float, text: str, size: float) -> str:
    """Stand-in for text converted to outlines: a bare moveto at the anchor.

    No glyph geometry is produced, so text and size are unused.  Laser
    software ignores the lone moveto.
    """
    return f"M {_f(x)} {_f(y)}"
