"""Tests for layer construction and the SVG serializer."""

from __future__ import annotations

import unittest

from lasercut.pipeline.layers import LAYER_COLORS, TextAnnotation, make_layer
from lasercut.pipeline.svg import create_svg
from tests.calendar_fixture import layer, layer_texts, parse_svg, view_box


EXPECTED_SMALL_SVG = """\
<?xml version="1.0" encoding="UTF-8"?>
<svg width="10mm" height="5mm" viewBox="0 0 10 5"
     xmlns="http://www.w3.org/2000/svg" version="1.1">
  <title>Microseasons Calendar - Laser Cut File</title>
  <desc>Generated laser cutting file. Red=Cut, Blue=Engrave, Green=Score</desc>

  <g id="cut" stroke="#FF0000" stroke-width="0.1" fill="none">
    <path d="M 0 0 L 10 0" />
  </g>
  <g id="engrave" stroke="#0000FF" stroke-width="0.1" fill="none">
    <text x="5" y="2.5" font-size="2" text-anchor="middle" fill="#0000FF" stroke="none">A &amp; B</text>
  </g>
</svg>"""


class TestMakeLayer(unittest.TestCase):

    def test_colours_bound_to_names(self):
        self.assertEqual(LAYER_COLORS, {"cut": "#FF0000", "engrave": "#0000FF", "score": "#00FF00"})
        for name, color in LAYER_COLORS.items():
            with self.subTest(name=name):
                lyr = make_layer(name, [])
                self.assertEqual(lyr.color, color)
                self.assertEqual(lyr.stroke_width, 0.1)

    def test_paths_are_copied(self):
        paths = ["M 0 0"]
        lyr = make_layer("cut", paths)
        paths.append("M 1 1")
        self.assertEqual(lyr.paths, ["M 0 0"])
        self.assertIsNone(lyr.texts)


class TestCreateSvg(unittest.TestCase):

    def test_exact_output(self):
        svg = create_svg(10, 5, [
            make_layer("cut", ["M 0 0 L 10 0"]),
            make_layer("engrave", [], [TextAnnotation(x=5, y=2.5, content="A & B", size=2)]),
        ])
        self.assertEqual(svg, EXPECTED_SMALL_SVG)

    def test_no_trailing_newline(self):
        self.assertTrue(create_svg(1, 1, []).endswith("</svg>"))

    def test_empty_layer_still_emitted(self):
        root = parse_svg(create_svg(10, 10, [make_layer("score", [])]))
        g = layer(root, "score")
        self.assertIsNotNone(g)
        self.assertEqual(len(list(g)), 0)
        self.assertEqual(g.get("stroke"), "#00FF00")

    def test_markup_in_text_is_escaped(self):
        svg = create_svg(10, 10, [
            make_layer("engrave", [], [TextAnnotation(1, 1, "<oak> & 'walnut'", 3)]),
        ])
        root = parse_svg(svg)
        self.assertEqual(layer_texts(root, "engrave"), ["<oak> & 'walnut'"])

    def test_view_box_matches_size(self):
        root = parse_svg(create_svg(406.4, 304.79999999999995, []))
        self.assertEqual(root.get("width"), "406.4mm")
        self.assertEqual(root.get("height"), "304.79999999999995mm")
        self.assertEqual(view_box(root), (0, 0, 406.4, 304.79999999999995))


if __name__ == "__main__":
    unittest.main()
