"""
JD Resume Match Analyzer – Streamlit frontend.
No decision logic in layout; lifecycle in UploadController, derivation in result_normalizer.
"""

import asyncio
from typing import Optional

import streamlit as st

from jd_match_ai.config import ALLOWED_EXTENSIONS, ANALYSIS_ENDPOINT
from jd_match_ai.display import colored, stage_badge_color, status_icon, strength_color
from jd_match_ai.schemas.candidate_file import CandidateFile, DocumentSlot
from jd_match_ai.schemas.upload_session import UploadStatus
from jd_match_ai.schemas.view_model import FieldValueView, NormalizedViewModel
from jd_match_ai.services.analysis_client import AnalysisClient
from jd_match_ai.services.report_export import export_report_csv
from jd_match_ai.services.upload_controller import UploadController
from jd_match_ai.utils.helpers import capitalize_first

CONTROLLER_KEY = "upload_controller"
# Bumped on reset so the file_uploader widgets come back empty
UPLOADER_GENERATION_KEY = "uploader_generation"
SELECTED_SIGNATURE_KEY = "selected_signatures"


def _controller() -> UploadController:
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = UploadController(AnalysisClient(ANALYSIS_ENDPOINT))
    if UPLOADER_GENERATION_KEY not in st.session_state:
        st.session_state[UPLOADER_GENERATION_KEY] = 0
    if SELECTED_SIGNATURE_KEY not in st.session_state:
        st.session_state[SELECTED_SIGNATURE_KEY] = {}
    return st.session_state[CONTROLLER_KEY]


def _run_submission(controller: UploadController) -> None:
    """Run the async submission from Streamlit's sync script."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        loop.run_until_complete(controller.submit())
    finally:
        loop.close()


def _reset(controller: UploadController) -> None:
    controller.reset()
    st.session_state[SELECTED_SIGNATURE_KEY] = {}
    st.session_state[UPLOADER_GENERATION_KEY] += 1


def _handle_upload(controller: UploadController, slot: DocumentSlot, uploaded) -> None:
    """Forward a newly picked file to the controller once, not on every rerun."""
    if uploaded is None:
        return
    signature = (uploaded.name, uploaded.size, getattr(uploaded, "file_id", None))
    seen = st.session_state[SELECTED_SIGNATURE_KEY]
    if seen.get(slot.value) == signature:
        return
    seen[slot.value] = signature
    controller.select_file(slot, CandidateFile.from_upload(uploaded))


def _render_upload_card(controller: UploadController, slot: DocumentSlot) -> None:
    generation = st.session_state[UPLOADER_GENERATION_KEY]
    with st.container(border=True):
        st.markdown(f"#### {slot.label}")
        uploaded = st.file_uploader(
            "Upload PDF or TXT file (max 10MB)",
            type=ALLOWED_EXTENSIONS,
            key=f"{slot.value}_uploader_{generation}",
        )
        _handle_upload(controller, slot, uploaded)
        current = controller.session.file_for(slot)
        if current is not None:
            st.success(f"✔ {current.name}")


def render_upload_page(controller: UploadController) -> None:
    st.title("JD Resume Match Analyzer")
    st.markdown("*Upload your Job Description and Resume to get comprehensive matching analysis.*")
    st.divider()

    st.subheader("Upload Files")
    col1, col2 = st.columns(2)
    with col1:
        _render_upload_card(controller, DocumentSlot.JD)
    with col2:
        _render_upload_card(controller, DocumentSlot.RESUME)

    session = controller.session
    if session.error:
        st.error(session.error)
    if session.status is UploadStatus.FAILED:
        st.caption("Click **Analyze Match** to resubmit, or pick a different file first.")
    if session.status_message:
        st.info(session.status_message)

    submitting = controller.status is UploadStatus.SUBMITTING
    bcol1, bcol2 = st.columns(2)
    with bcol1:
        reset_clicked = st.button("Reset", disabled=submitting, key="reset_btn")
    with bcol2:
        analyze_clicked = st.button(
            "Analyze Match",
            type="primary",
            disabled=not session.is_complete or submitting,
            key="analyze_btn",
        )

    if reset_clicked:
        _reset(controller)
        st.rerun()
    if analyze_clicked:
        with st.spinner("Analyzing files..."):
            _run_submission(controller)
        st.rerun()

    st.divider()
    fcol1, fcol2, fcol3 = st.columns(3)
    fcol1.markdown("**File Support**  \nSupports PDF and TXT formats up to 10MB")
    fcol2.markdown("**Comprehensive Analysis**  \nDetailed matching across multiple criteria")
    fcol3.markdown("**Instant Results**  \nGet your analysis results immediately")


def _render_value(label: str, value: FieldValueView) -> None:
    st.markdown(f"**{label}:**")
    if value.items:
        st.markdown("\n".join(f"- {item}" for item in value.items))
    elif value.text:
        st.markdown(value.text)
    else:
        st.caption(f"*{value.placeholder}*")


def _render_summary(view: NormalizedViewModel) -> None:
    with st.container(border=True):
        st.subheader("Match Summary")
        if view.job_title:
            st.caption(view.job_title)
        color = strength_color(view.strength)
        st.markdown(f"## {colored(f'{view.display_percentage}%', color)}")
        st.markdown(f"**{colored(view.match_label, color)}**")

        if view.key_skills:
            st.markdown("#### ⭐ Key Skills")
            for skill in view.key_skills:
                years = f" · `{skill.years} years`" if skill.years else ""
                st.markdown(f"- **{skill.name}**{years}")

    if view.stage_analysis:
        with st.container(border=True):
            st.markdown("#### Match Analysis Overview")
            for item in view.stage_analysis:
                parts = [f"**{capitalize_first(item.category)}**"]
                if item.match:
                    parts.append(colored(item.match, stage_badge_color(item.match)))
                if item.projects:
                    parts.append(f"{item.projects} Projects")
                if item.criticality:
                    parts.append(f"`{item.criticality}`")
                st.markdown(" · ".join(parts))


def _render_sections(view: NormalizedViewModel) -> None:
    if not view.sections:
        st.info("No detailed analysis data available")
        return
    for section in view.sections:
        percent = (
            colored(f"{section.display_percentage}%", strength_color(section.strength))
            if section.display_percentage is not None
            else ""
        )
        title = f"{capitalize_first(section.name)} {percent} {section.score_text or ''}".strip()
        with st.expander(title):
            for field in section.fields:
                with st.container(border=True):
                    st.markdown(
                        f"**{capitalize_first(field.field)}** {status_icon(field.marker)} {field.status}"
                    )
                    jd_col, resume_col = st.columns(2)
                    with jd_col:
                        _render_value("Job Description", field.jd_value)
                    with resume_col:
                        _render_value("Resume", field.resume_value)
                    if field.comments:
                        st.caption(f"**Comments:** {field.comments}")


def render_results_page(controller: UploadController, view: Optional[NormalizedViewModel]) -> None:
    head_col, button_col = st.columns([4, 1])
    with head_col:
        st.title("Analysis Results")
    with button_col:
        if st.button("Upload New Files", type="primary", key="new_files_btn"):
            _reset(controller)
            st.rerun()
    if view is None:
        return

    left, right = st.columns([1, 2])
    with left:
        _render_summary(view)
    with right:
        _render_sections(view)
        st.download_button(
            "Export to CSV",
            data=export_report_csv(view),
            file_name="match_report.csv",
            mime="text/csv",
            key="export_csv",
        )


def render_layout() -> None:
    """Streamlit page layout; state lives in the controller kept in session_state."""
    st.set_page_config(page_title="JD Resume Match Analyzer", layout="wide")
    controller = _controller()
    if controller.status is UploadStatus.SUCCEEDED:
        render_results_page(controller, controller.view_model)
    else:
        render_upload_page(controller)


if __name__ == "__main__":
    render_layout()
