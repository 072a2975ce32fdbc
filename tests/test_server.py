"""Tests for the web API, driven through FastAPI's TestClient."""

from __future__ import annotations

import unittest

from fastapi.testclient import TestClient

from lasercut.web import server


class TestServer(unittest.TestCase):

    def setUp(self):
        server._last_files.clear()
        self.client = TestClient(server.app)

    def test_options(self):
        resp = self.client.get("/api/laser-cut/options")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["defaults"]["size"], "20")
        self.assertEqual(body["sizes"], ["16", "20", "24"])
        self.assertEqual(body["materials"], ["walnut", "maple", "oak"])
        self.assertEqual(body["kerf_mm"], 0.2)

    def test_generate_defaults(self):
        resp = self.client.post("/api/laser-cut/generate", json={})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(len(body["files"]), 5)
        self.assertEqual(body["files"][0]["filename"], "calendar-frame-20inch-walnut.svg")
        self.assertEqual(body["warnings"], [])

    def test_generate_custom(self):
        resp = self.client.post("/api/laser-cut/generate", json={
            "size": 24,
            "material": "oak",
            "include_assembly_guide": False,
            "tile_grid_size": {"rows": 10, "cols": 5},
        })
        self.assertEqual(resp.status_code, 200)
        names = [f["filename"] for f in resp.json()["files"]]
        self.assertEqual(names, [
            "calendar-frame-24inch-oak.svg",
            "calendar-tiles-10x5-oak.svg",
            "led-diffuser-24inch.svg",
            "back-panel-24inch-oak.svg",
        ])

    def test_generate_camel_case_keys(self):
        """Keys as sent by the browser form select the requested build."""
        resp = self.client.post("/api/laser-cut/generate", json={
            "size": "16",
            "includeAssemblyGuide": False,
            "includeMountingHoles": False,
            "tileGridSize": {"rows": 10, "cols": 5},
        })
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual([f["filename"] for f in body["files"]], [
            "calendar-frame-16inch-walnut.svg",
            "calendar-tiles-10x5-walnut.svg",
            "led-diffuser-16inch.svg",
            "back-panel-16inch-walnut.svg",
        ])
        self.assertFalse(body["options"]["include_mounting_holes"])
        self.assertEqual(body["options"]["tile_grid_size"], {"rows": 10, "cols": 5})

    def test_plan_camel_case_grid(self):
        resp = self.client.post("/api/laser-cut/plan", json={"tileGridSize": {"rows": 1, "cols": 1}})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["tile_sheet"]["tile_count"], 1)

    def test_generate_invalid(self):
        resp = self.client.post("/api/laser-cut/generate", json={"material": "pine"})
        self.assertEqual(resp.status_code, 422)
        self.assertIn("pine", resp.json()["detail"][0])

    def test_plan(self):
        resp = self.client.post("/api/laser-cut/plan", json={"size": "16"})
        self.assertEqual(resp.status_code, 200)
        self.assertAlmostEqual(resp.json()["plate"]["width_mm"], 406.4)

    def test_download_before_generate(self):
        resp = self.client.get("/api/laser-cut/download/led-diffuser-20inch.svg")
        self.assertEqual(resp.status_code, 404)

    def test_preview_and_download(self):
        self.client.post("/api/laser-cut/generate", json={})

        preview = self.client.get("/api/laser-cut/preview/led-diffuser-20inch.svg")
        self.assertEqual(preview.status_code, 200)
        self.assertTrue(preview.headers["content-type"].startswith("image/svg+xml"))
        self.assertIn("inline", preview.headers["content-disposition"])

        download = self.client.get("/api/laser-cut/download/led-diffuser-20inch.svg")
        self.assertEqual(download.status_code, 200)
        self.assertEqual(
            download.headers["content-disposition"],
            "attachment; filename=led-diffuser-20inch.svg",
        )
        self.assertTrue(download.text.startswith("<?xml"))

        missing = self.client.get("/api/laser-cut/download/nope.svg")
        self.assertEqual(missing.status_code, 404)


if __name__ == "__main__":
    unittest.main()
