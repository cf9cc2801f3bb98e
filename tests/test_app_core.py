# tests/test_app_core.py

import unittest
from unittest.mock import patch
import streamlit as st
from app.config import INPUT_VARIABLES, default_input_ranges
from app.core import ensure_manning_run
from app.state import get_manning_run, init_session_state
from modules.sampler import InputRange


class TestEnsureManningRun(unittest.TestCase):
    def setUp(self):
        st.session_state.clear()
        init_session_state()

    def test_defaults_match_slider_registry(self):
        ranges = default_input_ranges()
        self.assertEqual([item["key"] for item in INPUT_VARIABLES], list(ranges.keys()))
        self.assertEqual(ranges["n"], InputRange(0.03, 0.04))
        self.assertEqual(ranges["bed_slope"], InputRange(0.002, 0.005))

    def test_unchanged_inputs_reuse_run(self):
        ranges = default_input_ranges()
        first = ensure_manning_run(ranges, seed=1, sample_size=100)
        with patch("app.core.run_manning_simulation") as mock_run:
            second = ensure_manning_run(ranges, seed=1, sample_size=100)
        mock_run.assert_not_called()
        self.assertIs(first, second)

    def test_changed_range_replaces_run(self):
        ranges = default_input_ranges()
        first = ensure_manning_run(ranges, seed=1, sample_size=100)
        ranges["depth"] = InputRange(2.0, 3.0)
        second = ensure_manning_run(ranges, seed=1, sample_size=100)
        self.assertIsNot(first, second)
        self.assertIs(get_manning_run(), second)
        self.assertTrue((second.table["Depth"] >= 2.0).all())

    def test_changed_seed_replaces_run(self):
        ranges = default_input_ranges()
        first = ensure_manning_run(ranges, seed=1, sample_size=100)
        second = ensure_manning_run(ranges, seed=2, sample_size=100)
        self.assertFalse(first.table.equals(second.table))


if __name__ == '__main__':
    unittest.main()
