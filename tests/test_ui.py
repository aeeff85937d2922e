"""
Streamlit App Tests
===================
Runs the questionnaire app headless with Streamlit's AppTest harness
and checks page routing.

Run with: python -m pytest tests/test_ui.py -v
"""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from streamlit.testing.v1 import AppTest

from medtriage.session import PHASE_COLLECTING, PHASE_HOME

APP_PATH = str(PROJECT_ROOT / "ui" / "assessment_app.py")
TIMEOUT = 30


class TestAssessmentApp(unittest.TestCase):
    """Test the Streamlit page router."""

    def test_home_page_renders(self):
        at = AppTest.from_file(APP_PATH, default_timeout=TIMEOUT)
        at.run()
        self.assertFalse(at.exception)
        self.assertEqual(at.session_state["page"], "home")
        self.assertEqual(at.session_state["assessment"].phase, PHASE_HOME)

    def test_results_without_result_restarts_assessment(self):
        """Opening Results with nothing scored sends the patient back to section 1."""
        at = AppTest.from_file(APP_PATH, default_timeout=TIMEOUT)
        at.session_state["page"] = "results"
        at.session_state["result"] = None
        at.run()

        self.assertFalse(at.exception)
        self.assertEqual(at.session_state["page"], "assessment")
        session = at.session_state["assessment"]
        self.assertEqual(session.phase, PHASE_COLLECTING)
        self.assertEqual(session.category_index, 0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
