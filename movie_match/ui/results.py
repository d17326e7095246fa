"""Result panel: the current match, its rationale, and navigation."""

from typing import TYPE_CHECKING

import streamlit as st

from movie_match.core.models import MovieRecord
from movie_match.ui.styles import escape_html, render_info
import config

if TYPE_CHECKING:
    from movie_match.core.session import SessionController


def render_result(controller: "SessionController") -> None:
    """Render the match on screen, then fill in why it was picked."""
    state = controller.state

    if state.notice:
        render_info(state.notice)

    movie = controller.current_movie
    if movie is None:
        render_info(config.MSG_NO_MATCHES)
    else:
        st.markdown(movie_card_html(movie), unsafe_allow_html=True)
        render_rationale(controller)
        st.markdown(
            f'<p class="mm-caption">Match {state.current_index + 1} of {len(state.matches)}</p>',
            unsafe_allow_html=True
        )

    col1, col2 = st.columns(2)
    with col1:
        st.button(
            "Next match",
            type="primary",
            use_container_width=True,
            disabled=not controller.can_advance,
            on_click=controller.next_match,
        )
    with col2:
        st.button(
            "Try again",
            use_container_width=True,
            on_click=controller.restart,
        )


def render_rationale(controller: "SessionController") -> None:
    """
    Show the rationale for the record on screen.

    The placeholder goes out before the completion call, so the card is
    never held up by it. A reply for a record that is no longer current is
    discarded by the controller.
    """
    ticket = controller.request_explanation()
    slot = st.empty()

    text = controller.explanation_for(ticket)
    if text is None:
        slot.markdown(rationale_html(config.RATIONALE_PLACEHOLDER, loading=True), unsafe_allow_html=True)
        controller.fetch_explanation(ticket)
        text = controller.explanation_for(ticket) or ""

    slot.markdown(rationale_html(text), unsafe_allow_html=True)


def movie_card_html(movie: MovieRecord) -> str:
    """Title (with year when known) and description."""
    year = ""
    if movie.release_year:
        year = f' <span class="mm-result-sub">({escape_html(movie.release_year)})</span>'

    return f"""
    <div class="mm-card">
        <h2 class="mm-result-title">{escape_html(movie.title)}{year}</h2>
        <p class="mm-result-desc">{escape_html(movie.description)}</p>
    </div>
    """


def rationale_html(text: str, loading: bool = False) -> str:
    css_class = "mm-result-ai mm-loading" if loading else "mm-result-ai"
    return f'<div class="{css_class}">{escape_html(text)}</div>'
