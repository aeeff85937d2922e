"""
Health Self-Assessment App - MedTriage
======================================
Patient-facing questionnaire. Walks the patient through each symptom
section, scores the answers and shows a four-tier care recommendation.

Run: streamlit run ui/assessment_app.py

Nothing is persisted: the assessment lives in Streamlit session state
and is gone when the browser tab is closed or reloaded.
"""

import logging
import sys
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# Project root on sys.path so medtriage imports work without an install
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from medtriage.catalog import LIKERT_MAX, LIKERT_MIN
from medtriage.config import configure_logging, load_settings
from medtriage.guidance import SCALE_LABELS, URGENCY_COLORS, glyph, headline, next_steps
from medtriage.scorer import URGENCY_BLACK, URGENCY_RED, URGENCY_YELLOW
from medtriage.session import AssessmentSession

settings = load_settings()
configure_logging(settings)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Page configuration
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="MedTriage",
    page_icon="🩺",
    layout="centered",
)

BASE_CSS = """
<style>
.block-container { max-width: 720px; }
.stButton > button {
    min-height: 54px;
    font-size: 1.05rem;
    border-radius: 10px;
}
div[data-testid="stRadio"] > div > label {
    font-size: 1.2rem !important;
    padding: 12px 20px !important;
    border: 2px solid #d0d5dd !important;
    border-radius: 10px !important;
    min-height: 48px !important;
    cursor: pointer !important;
}
</style>
"""

st.markdown(BASE_CSS, unsafe_allow_html=True)

SCALE = list(range(LIKERT_MIN, LIKERT_MAX + 1))

# ---------------------------------------------------------------------------
# Session state defaults
# ---------------------------------------------------------------------------
_DEFAULTS: dict = dict(
    page="home",
    result=None,
)
for _key, _val in _DEFAULTS.items():
    if _key not in st.session_state:
        st.session_state[_key] = _val

if "assessment" not in st.session_state:
    st.session_state.assessment = AssessmentSession()


def start_assessment() -> None:
    """Begin a fresh run and show the first section."""
    # Drop radio selections left over from a previous run
    for key in [k for k in st.session_state.keys() if str(k).startswith("q_")]:
        del st.session_state[key]
    st.session_state.assessment.start()
    st.session_state.result = None
    st.session_state.page = "assessment"


def go_home() -> None:
    """Return to the landing page, dropping the current run."""
    st.session_state.assessment.reset()
    st.session_state.result = None
    st.session_state.page = "home"


# ---------------------------------------------------------------------------
# HOME
# ---------------------------------------------------------------------------
def page_home() -> None:
    """Render the landing page."""
    st.title("🩺 Your Health, Our Priority")
    st.write(
        "Get quick, reliable guidance on your health concerns. Our triage "
        "system helps you make informed decisions about seeking medical care."
    )
    if st.button("▶ Start Assessment", type="primary", use_container_width=True, key="start_top"):
        start_assessment()
        st.rerun()

    st.divider()

    col1, col2, col3 = st.columns(3)
    with col1:
        st.markdown("#### 📋 Quick Assessment")
        st.caption("Answer simple questions about your symptoms for personalized guidance.")
    with col2:
        st.markdown("#### ⚠️ Instant Triage")
        st.caption("Get immediate recommendations on the urgency of medical care needed.")
    with col3:
        st.markdown("#### 📚 Health Resources")
        st.caption("Access educational materials and professional healthcare directories.")

    st.divider()

    st.subheader("Ready to check your health?")
    st.write("Take our health assessment to get personalized recommendations.")
    if st.button("Start Now", use_container_width=True, key="start_bottom"):
        start_assessment()
        st.rerun()


# ---------------------------------------------------------------------------
# ASSESSMENT
# ---------------------------------------------------------------------------
def page_assessment() -> None:
    """Render the current questionnaire section."""
    session: AssessmentSession = st.session_state.assessment
    category = session.current_category
    idx = session.category_index
    total = session.category_count

    st.progress(session.progress, text=f"Section {idx + 1} of {total}")
    st.header(category.title)

    for question in category.questions:
        current = session.answers.get(question.id)
        st.markdown(f"**{question.text}**")
        choice = st.radio(
            question.text,
            SCALE,
            index=SCALE.index(current) if current is not None else None,
            horizontal=True,
            key=f"q_{question.id}",
            label_visibility="collapsed",
        )
        st.caption(f"{LIKERT_MIN} = {SCALE_LABELS[LIKERT_MIN]} · {LIKERT_MAX} = {SCALE_LABELS[LIKERT_MAX]}")
        if choice is not None:
            session.record_answer(question.id, choice)

    nav_col1, nav_col2 = st.columns(2)
    with nav_col1:
        if idx > 0 and st.button("⬅ Back", use_container_width=True, key="back"):
            session.back()
            st.rerun()
    with nav_col2:
        label = "See Results ➡" if session.is_last_category else "Next ➡"
        if st.button(label, type="primary", use_container_width=True, key="next"):
            result = session.advance()
            if result is not None:
                st.session_state.result = result
                st.session_state.page = "results"
            st.rerun()


# ---------------------------------------------------------------------------
# RESULTS
# ---------------------------------------------------------------------------
def page_results() -> None:
    """Render the triage recommendation for the completed run."""
    result = st.session_state.result
    if result is None:
        # No scored run to show; restart the questionnaire.
        logger.info("Results page opened without a result, restarting assessment.")
        start_assessment()
        st.rerun()
        return

    color = URGENCY_COLORS.get(result.urgency, "")
    banner = f"## {glyph(result.icon_key)} {headline(result)}\n\n{result.message}"

    if result.urgency == URGENCY_RED:
        st.error(banner)
    elif result.urgency in (URGENCY_BLACK, URGENCY_YELLOW):
        st.warning(banner)
    else:
        st.success(banner)

    st.metric("Symptom Score", f"{result.percentage:.0f}%", help=f"{color} {result.urgency}")
    st.progress(min(max(result.percentage / 100, 0.0), 1.0))

    st.subheader("Next Steps")
    for step in next_steps(result.urgency, settings.emergency_number):
        st.markdown(f"- {step}")

    if result.urgency == URGENCY_RED:
        st.markdown(
            '<div style="text-align:center; margin:1rem 0">'
            f'<a href="tel:{settings.emergency_number}" style="background:#dc2626; color:white;'
            ' padding:16px 40px; border-radius:12px; font-size:1.4rem; font-weight:700;'
            f' text-decoration:none; display:inline-block;">📞 CALL {settings.emergency_number} NOW</a>'
            "</div>",
            unsafe_allow_html=True,
        )

    st.divider()
    col1, col2 = st.columns(2)
    with col1:
        if st.button("🏠 Return Home", use_container_width=True, key="home"):
            go_home()
            st.rerun()
    with col2:
        if st.button("🔄 Start New Assessment", type="primary", use_container_width=True, key="restart"):
            start_assessment()
            st.rerun()


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
def render_sidebar() -> None:
    with st.sidebar:
        st.markdown("### 🩺 MedTriage")
        st.caption("Symptom self-assessment")
        st.divider()
        st.caption(
            f"⚠️ This tool does not provide a diagnosis. "
            f"Call {settings.emergency_number} for real emergencies."
        )


# ---------------------------------------------------------------------------
# Main router
# ---------------------------------------------------------------------------
def main() -> None:
    """Route to the appropriate page based on session state."""
    render_sidebar()

    page = st.session_state.page
    if page == "assessment":
        page_assessment()
    elif page == "results":
        page_results()
    else:
        page_home()


if __name__ == "__main__":
    main()
