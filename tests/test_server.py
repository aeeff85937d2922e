"""
API and Guidance Tests
======================
Exercises the stateless FastAPI endpoints, the presentation tables and
environment configuration.

Run with: python -m pytest tests/test_server.py -v
"""

from __future__ import annotations

import os
import sys
import unittest
from pathlib import Path
from unittest import mock

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient

from medtriage.config import DEFAULT_API_PORT, load_settings
from medtriage.guidance import guidance_table, headline, next_steps
from medtriage.scorer import (
    URGENCY_BLACK,
    URGENCY_GREEN,
    URGENCY_LEVELS,
    URGENCY_RED,
    URGENCY_YELLOW,
    score,
)
from triage_server import app


class TestAssessmentApi(unittest.TestCase):
    """Test the HTTP endpoints."""

    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_health(self):
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"status": "ok"})

    def test_questions(self):
        data = self.client.get("/api/questions").json()
        self.assertEqual(data["max_possible_score"], 110)
        self.assertEqual(
            [c["name"] for c in data["categories"]], ["urgent_symptoms", "general_symptoms"]
        )

    def test_guidance(self):
        data = self.client.get("/api/guidance").json()
        self.assertEqual(list(data), list(URGENCY_LEVELS))
        self.assertEqual(len(data[URGENCY_RED]["next_steps"]), 3)

    def test_assess_reference_case(self):
        resp = self.client.post(
            "/api/assess", json={"answers": {"chest_pain": 5, "breathing": 5}}
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["urgency"], URGENCY_YELLOW)
        self.assertEqual(data["total_score"], 50)
        self.assertAlmostEqual(data["percentage"], 45.45, places=2)
        self.assertEqual(data["headline"], "Yellow Care Recommended")
        self.assertEqual(
            data["unanswered"], ["consciousness", "fever", "fatigue", "appetite"]
        )
        self.assertIn("Schedule an appointment with your doctor", data["next_steps"])

    def test_assess_empty_body(self):
        data = self.client.post("/api/assess", json={}).json()
        self.assertEqual(data["urgency"], URGENCY_GREEN)
        self.assertEqual(data["percentage"], 0)

    def test_assess_rejects_out_of_range(self):
        resp = self.client.post("/api/assess", json={"answers": {"chest_pain": 9}})
        self.assertEqual(resp.status_code, 422)
        self.assertIn("between 1 and 5", resp.json()["detail"])

    def test_assess_rejects_non_integer_values(self):
        """Booleans, strings and floats are refused, not coerced."""
        for bad in (True, "5", 4.0, 3.5, None):
            resp = self.client.post("/api/assess", json={"answers": {"chest_pain": bad}})
            self.assertEqual(resp.status_code, 422, repr(bad))
            self.assertIn("must be an integer", resp.json()["detail"])

    def test_assess_rejects_unknown_question(self):
        resp = self.client.post("/api/assess", json={"answers": {"headache": 3}})
        self.assertEqual(resp.status_code, 422)


class TestGuidance(unittest.TestCase):
    """Test the presentation tables keyed by urgency."""

    def test_every_tier_has_three_steps(self):
        for urgency in URGENCY_LEVELS:
            self.assertEqual(len(next_steps(urgency)), 3, urgency)

    def test_emergency_number_substituted(self):
        steps = next_steps(URGENCY_RED, emergency_number="112")
        self.assertEqual(steps[0], "Call emergency services (112) immediately")

    def test_unknown_urgency(self):
        self.assertEqual(next_steps("purple"), [])

    def test_headline(self):
        result = score({"chest_pain": 5, "breathing": 5, "consciousness": 1})
        self.assertEqual(result.urgency, URGENCY_BLACK)
        self.assertEqual(headline(result), "Black Care Recommended")

    def test_table_has_glyphs(self):
        for entry in guidance_table().values():
            self.assertTrue(entry["glyph"])


class TestSettings(unittest.TestCase):
    """Test environment configuration."""

    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = load_settings()
        self.assertEqual(settings.log_level, "INFO")
        self.assertEqual(settings.api_port, DEFAULT_API_PORT)
        self.assertEqual(settings.emergency_number, "911")

    def test_overrides(self):
        env = {
            "MEDTRIAGE_LOG_LEVEL": "debug",
            "MEDTRIAGE_API_PORT": "9000",
            "MEDTRIAGE_EMERGENCY_NUMBER": "112",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            settings = load_settings()
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertEqual(settings.api_port, 9000)
        self.assertEqual(settings.emergency_number, "112")

    def test_invalid_values_fall_back(self):
        env = {"MEDTRIAGE_LOG_LEVEL": "loud", "MEDTRIAGE_API_PORT": "eighty"}
        with mock.patch.dict(os.environ, env, clear=True):
            settings = load_settings()
        self.assertEqual(settings.log_level, "INFO")
        self.assertEqual(settings.api_port, DEFAULT_API_PORT)


if __name__ == "__main__":
    unittest.main(verbosity=2)
