"""UI components for the Movie Match Streamlit application."""

from typing import TYPE_CHECKING

from movie_match.core.session import ViewMode
from .state import AppState
from .styles import inject_styles, render_header, render_error, render_info, THEME
from .questions import render_questions
from .results import render_result

if TYPE_CHECKING:
    from movie_match.core.session import SessionController


def render_app(controller: "SessionController") -> None:
    """Render whichever panel the session is on."""
    if controller.state.view is ViewMode.RESULT:
        render_result(controller)
    else:
        render_questions(controller)


__all__ = [
    "AppState",
    "inject_styles",
    "render_header",
    "render_error",
    "render_info",
    "render_questions",
    "render_result",
    "render_app",
    "THEME",
]
