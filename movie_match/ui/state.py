"""
Session state management for Movie Match.
Keeps one SessionController per browser session inside Streamlit's session state.
"""

import logging
from typing import Callable, Optional

import streamlit as st
from supabase import SupabaseException

from movie_match.core.session import SessionController
from movie_match.ui.styles import render_error

logger = logging.getLogger(__name__)

CONTROLLER_KEY = "session_controller"

# Missing API keys, missing or malformed Supabase credentials
STARTUP_ERRORS = (ValueError, SupabaseException)


class AppState:
    """
    Wrapper around Streamlit session state.

    The controller owns the actual SessionState; this class only makes
    sure each browser session gets exactly one.
    """

    @classmethod
    def init(cls, factory: Callable[[], SessionController]) -> SessionController:
        """Create the session's controller on first run and return it."""
        if CONTROLLER_KEY not in st.session_state:
            st.session_state[CONTROLLER_KEY] = factory()
        return st.session_state[CONTROLLER_KEY]

    @classmethod
    def start(cls, factory: Callable[[], SessionController]) -> Optional[SessionController]:
        """
        Like init(), but configuration problems are shown on the page.

        Returns:
            The session's controller, or None if the clients could not be built
        """
        try:
            return cls.init(factory)
        except STARTUP_ERRORS as e:
            logger.exception("Could not start session")
            render_error(str(e))
            return None
