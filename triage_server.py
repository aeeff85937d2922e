"""
MedTriage — Assessment API Server
=================================
Stateless FastAPI backend exposing the symptom questionnaire and the
triage scorer. Nothing is stored: every request is scored and forgotten.

Run:
    pip install -e .
    python triage_server.py

Then open: http://localhost:8001/docs
"""
from __future__ import annotations

import logging
from typing import Any

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from medtriage import __version__
from medtriage.answers import AnswerSet, InvalidAnswerError
from medtriage.catalog import DEFAULT_CATALOG
from medtriage.config import configure_logging, load_settings
from medtriage.guidance import glyph, guidance_table, headline, next_steps
from medtriage.scorer import score

settings = load_settings()
logger = logging.getLogger(__name__)

# ── init ──────────────────────────────────────────────────────────────────────
app = FastAPI(title="MedTriage API", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── models ────────────────────────────────────────────────────────────────────

class AssessRequest(BaseModel):
    # Values are checked by AnswerSet, not coerced here
    answers: dict[str, Any] = Field(
        default_factory=dict,
        description="Question id to Likert value (1-5). Omit unanswered questions.",
    )


class AssessResponse(BaseModel):
    urgency: str
    message: str
    icon_key: str
    glyph: str
    headline: str
    total_score: float
    max_possible_score: int
    percentage: float
    next_steps: list[str]
    unanswered: list[str]


# ── API endpoints ─────────────────────────────────────────────────────────────

@app.get("/api/health")
def api_health():
    return {"status": "ok"}


@app.get("/api/questions")
def api_questions():
    """Questionnaire sections in presentation order."""
    return DEFAULT_CATALOG.to_dict()


@app.get("/api/guidance")
def api_guidance():
    """Message, icon and next steps for every urgency tier."""
    return guidance_table(settings.emergency_number)


@app.post("/api/assess", response_model=AssessResponse)
def api_assess(body: AssessRequest):
    """Score one completed questionnaire."""
    try:
        answers = AnswerSet(body.answers)
    except InvalidAnswerError as exc:
        raise HTTPException(422, str(exc))

    result = score(answers)
    logger.info("Assessment scored: %s (%.1f%%).", result.urgency, result.percentage)

    return AssessResponse(
        **result.to_dict(),
        glyph=glyph(result.icon_key),
        headline=headline(result),
        next_steps=next_steps(result.urgency, settings.emergency_number),
        unanswered=answers.unanswered(),
    )


# ── Entry point ───────────────────────────────────────────────────────────────
if __name__ == "__main__":
    configure_logging(settings)
    print("\n" + "═" * 58)
    print("  🩺  MedTriage — Assessment API")
    print("═" * 58)
    print(f"  ➜  API:        http://localhost:{settings.api_port}/api/questions")
    print(f"  ➜  API docs:   http://localhost:{settings.api_port}/docs")
    print("═" * 58 + "\n")
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
