"""
Tests for the two-column chart and PNG export.
"""
import os
import shutil
import tempfile
import unittest

import matplotlib
matplotlib.use('Agg')
from matplotlib.figure import Figure

from tstat import data_model
from tstat.chart_columns import render_columns
from tstat.data_file import DataFile
from tstat.export import export_png

from sample_data import TEST_CSV


class TestRenderColumns(unittest.TestCase):

    def setUp(self):
        self.data = DataFile.from_text(TEST_CSV)
        self.fig = Figure(figsize=(6.0, 4.0))

    def test_unpaired_chart(self):
        render_columns(self.fig, self.data, test_type=data_model.TestType.UNPAIRED, t=2.7136)
        ax = self.fig.get_axes()[0]
        self.assertIn("t = 2.713600", ax.get_title())
        # two scatter collections, no pair connectors
        self.assertEqual(len(ax.collections), 2)
        self.assertEqual(len(ax.lines), 2)

    def test_paired_chart_links_rows(self):
        render_columns(self.fig, self.data, test_type=data_model.TestType.PAIRED)
        ax = self.fig.get_axes()[0]
        # 12 connectors + 2 mean lines
        self.assertEqual(len(ax.lines), 14)
        self.assertTrue(ax.get_title().startswith("Paired"))

    def test_missing_cells_skipped(self):
        data = DataFile.from_text("1,2\n,4\n5,\n")
        render_columns(self.fig, data, test_type=data_model.TestType.PAIRED)
        ax = self.fig.get_axes()[0]
        # only row 0 is complete
        self.assertEqual(len(ax.lines), 3)
        self.assertEqual(len(ax.collections[0].get_offsets()), 2)
        self.assertEqual(len(ax.collections[1].get_offsets()), 2)

    def test_title_without_statistic(self):
        render_columns(self.fig, self.data, test_type=data_model.TestType.UNPAIRED, t=None)
        self.assertEqual(self.fig.get_axes()[0].get_title(), "Unpaired t-test")

    def test_no_data(self):
        data = DataFile.from_rows([[None, None]])
        render_columns(self.fig, data)
        ax = self.fig.get_axes()[0]
        self.assertEqual(ax.texts[0].get_text(), 'No valid data points')


class TestExportPng(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_writes_png_and_restores_size(self):
        fig = Figure(figsize=(5.0, 4.0))
        render_columns(fig, DataFile.from_text(TEST_CSV))
        path = os.path.join(self.temp_dir, "charts", "columns.png")

        result = export_png(fig, path, dpi=50)

        self.assertEqual(result, path)
        with open(path, 'rb') as f:
            self.assertEqual(f.read(8), b'\x89PNG\r\n\x1a\n')
        self.assertAlmostEqual(fig.get_figwidth(), 5.0)
        self.assertAlmostEqual(fig.get_figheight(), 4.0)


if __name__ == '__main__':
    unittest.main()
