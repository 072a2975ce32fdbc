"""Tests for writing generated files to disk."""

from __future__ import annotations

import asyncio
import tempfile
import unittest
from pathlib import Path
from unittest.mock import AsyncMock, patch

from lasercut.export import (
    DOWNLOAD_DELAY_S,
    download_all_laser_cut_files,
    download_laser_cut_file,
)
from lasercut.pipeline import generate_laser_cut_files
from tests.calendar_fixture import make_default_options


class TestDownload(unittest.TestCase):

    def setUp(self):
        self.files = generate_laser_cut_files(make_default_options())
        self._tmp = tempfile.TemporaryDirectory()
        self.out = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_single_file(self):
        path = download_laser_cut_file(self.files[0], self.out / "nested")
        self.assertEqual(path.name, "calendar-frame-20inch-walnut.svg")
        self.assertEqual(path.read_text(encoding="utf-8"), self.files[0].svg)

    def test_all_files_in_order(self):
        paths = asyncio.run(download_all_laser_cut_files(self.files, self.out, delay_s=0))
        self.assertEqual([p.name for p in paths], [f.filename for f in self.files])
        for file, path in zip(self.files, paths):
            self.assertEqual(path.read_text(encoding="utf-8"), file.svg)

    def test_pause_after_each_file(self):
        self.assertEqual(DOWNLOAD_DELAY_S, 0.5)
        with patch("lasercut.export.download.asyncio.sleep", new=AsyncMock()) as sleep:
            asyncio.run(download_all_laser_cut_files(self.files, self.out))
        self.assertEqual(sleep.await_count, len(self.files))
        sleep.assert_awaited_with(0.5)

    def test_empty_list(self):
        paths = asyncio.run(download_all_laser_cut_files([], self.out, delay_s=0))
        self.assertEqual(paths, [])


if __name__ == "__main__":
    unittest.main()
