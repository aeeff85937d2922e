"""
Guidance Module
===============
Presentation text keyed by urgency tier: headline, next steps and the
glyph for each icon key. Nothing here affects the triage decision.
"""

from __future__ import annotations

from medtriage.config import DEFAULT_EMERGENCY_NUMBER
from medtriage.scorer import (
    ICON_ALERT_CIRCLE,
    ICON_ALERT_TRIANGLE,
    ICON_AMBULANCE,
    ICON_CLOCK,
    TRIAGE_TIERS,
    URGENCY_BLACK,
    URGENCY_GREEN,
    URGENCY_RED,
    URGENCY_YELLOW,
    TriageResult,
)

ICON_GLYPHS = {
    ICON_AMBULANCE: "🚑",
    ICON_ALERT_TRIANGLE: "⚠️",
    ICON_CLOCK: "🕒",
    ICON_ALERT_CIRCLE: "ℹ️",
}

URGENCY_COLORS = {
    URGENCY_RED: "🔴",
    URGENCY_BLACK: "⚫",
    URGENCY_YELLOW: "🟡",
    URGENCY_GREEN: "🟢",
}

# {emergency_number} is filled in from configuration
NEXT_STEPS = {
    URGENCY_RED: (
        "Call emergency services ({emergency_number}) immediately",
        "Do not drive yourself to the hospital",
        "Stay calm and wait for help to arrive",
    ),
    URGENCY_BLACK: (
        "Visit the nearest urgent care center",
        "Contact your primary care physician",
        "Monitor your symptoms closely",
    ),
    URGENCY_YELLOW: (
        "Schedule an appointment with your doctor",
        "Keep track of your symptoms",
        "Follow up within 2-3 days",
    ),
    URGENCY_GREEN: (
        "Monitor your symptoms",
        "Practice self-care measures",
        "Schedule a routine check-up if needed",
    ),
}

# Likert anchors shown under each question
SCALE_LABELS = {1: "Not at all", 5: "Very much"}


def next_steps(urgency: str, emergency_number: str = DEFAULT_EMERGENCY_NUMBER) -> list[str]:
    """Return the next-step bullet points for an urgency tier.

    Args:
        urgency: One of the ``URGENCY_*`` constants.
        emergency_number: Number to call, substituted into the red tier.

    Returns:
        List of display strings; empty for an unknown urgency.
    """
    return [
        step.format(emergency_number=emergency_number)
        for step in NEXT_STEPS.get(urgency, ())
    ]


def headline(result: TriageResult) -> str:
    """e.g. ``Red Care Recommended``."""
    return f"{result.urgency.title()} Care Recommended"


def glyph(icon_key: str) -> str:
    return ICON_GLYPHS.get(icon_key, "")


def guidance_table(emergency_number: str = DEFAULT_EMERGENCY_NUMBER) -> dict:
    """All presentation text per tier, ordered most to least urgent."""
    return {
        tier.urgency: {
            "threshold": tier.threshold,
            "message": tier.message,
            "icon_key": tier.icon_key,
            "glyph": glyph(tier.icon_key),
            "next_steps": next_steps(tier.urgency, emergency_number),
        }
        for tier in TRIAGE_TIERS
    }
