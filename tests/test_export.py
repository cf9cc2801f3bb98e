# tests/test_export.py

import io
import os
import tempfile
import unittest
import pandas as pd
from modules.export import ExportError, result_table_to_csv, write_result_csv
from modules.monte_carlo import run_manning_simulation
from modules.result_table import RESULT_COLUMNS

DEFAULT_RANGES = {
    "n": (0.03, 0.04),
    "top_width": (10, 20),
    "bottom_width": (5, 10),
    "depth": (1, 2),
    "bed_slope": (0.002, 0.005),
}


class TestCsvExport(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.table = run_manning_simulation(DEFAULT_RANGES, N=500, seed=3).table

    def test_header(self):
        header = result_table_to_csv(self.table).decode("utf-8").splitlines()[0]
        self.assertEqual(header.split(","), [""] + RESULT_COLUMNS)

    def test_round_trip(self):
        data = result_table_to_csv(self.table)
        parsed = pd.read_csv(io.BytesIO(data), index_col=0)
        self.assertEqual(parsed.shape, (500, 10))
        self.assertEqual(list(parsed.columns), RESULT_COLUMNS)
        self.assertEqual(list(parsed.index), list(range(1, 501)))
        pd.testing.assert_frame_equal(parsed, self.table, check_index_type=False, rtol=1e-12)

    def test_write_to_directory_uses_default_name(self):
        with tempfile.TemporaryDirectory() as directory:
            path = write_result_csv(self.table, directory)
            self.assertEqual(os.path.basename(path), "ManningMCdata.csv")
            self.assertEqual(len(pd.read_csv(path)), 500)

    def test_unwritable_destination_raises(self):
        with tempfile.TemporaryDirectory() as directory:
            target = os.path.join(directory, "missing", "ManningMCdata.csv")
            before = self.table.copy()
            with self.assertRaises(ExportError):
                write_result_csv(self.table, target)
            pd.testing.assert_frame_equal(self.table, before)


if __name__ == '__main__':
    unittest.main()
