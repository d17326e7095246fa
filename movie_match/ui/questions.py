"""Question-entry panel."""

import logging
from typing import TYPE_CHECKING

import streamlit as st

from movie_match.ui.styles import render_error
import config

if TYPE_CHECKING:
    from movie_match.core.session import SessionController

logger = logging.getLogger(__name__)


def render_questions(controller: "SessionController") -> None:
    """Render the three questions and run a search on submit."""
    with st.form("questions_form", border=False):
        answers = [
            st.text_area(label, placeholder=placeholder, key=f"answer_{key}", height=90)
            for key, label, placeholder in config.QUESTIONS
        ]
        submitted = st.form_submit_button(
            "Let's go",
            type="primary",
            use_container_width=True,
            disabled=not controller.can_submit,
        )

    if submitted:
        _perform_submit(controller, answers)

    if controller.state.error:
        render_error(controller.state.error)


def _perform_submit(controller: "SessionController", answers: list[str]) -> None:
    """Execute the search and switch panels on success."""
    with st.spinner("Finding your movie..."):
        moved = controller.submit(*answers)

    if moved:
        logger.info("Found %d matches", len(controller.state.matches))
        st.rerun()
