"""
Movie Match: three questions in, a movie recommendation out.
Main Streamlit application.

Run with: streamlit run app.py

Seeding and backfilling the movie table is done separately with
`movie-match-admin`, never from this page.
"""

import logging

import streamlit as st

from movie_match.core.repository import MovieRepository
from movie_match.core.session import SessionController
from movie_match.embedders.base import BaseEmbedder, get_embedder
from movie_match.explainers.base import BaseExplainer, get_explainer
from movie_match.ui import AppState, inject_styles, render_app, render_header
import config

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


# -----------------------------------------------------------------------------
# Page Configuration
# -----------------------------------------------------------------------------

st.set_page_config(
    page_title="Movie Match",
    page_icon="🍿",
    layout="centered",
)

inject_styles()
render_header()


# -----------------------------------------------------------------------------
# Clients - cached so every session shares one set of connections
# -----------------------------------------------------------------------------

@st.cache_resource(show_spinner=False)
def get_embedder_client() -> BaseEmbedder:
    return get_embedder(config.DEFAULT_EMBEDDER)


@st.cache_resource(show_spinner=False)
def get_explainer_client() -> BaseExplainer:
    return get_explainer(config.DEFAULT_EXPLAINER)


@st.cache_resource(show_spinner=False)
def get_repository() -> MovieRepository:
    return MovieRepository()


def create_controller() -> SessionController:
    """Build a fresh controller for a new browser session."""
    return SessionController(
        embedder=get_embedder_client(),
        repository=get_repository(),
        explainer=get_explainer_client(),
    )


# -----------------------------------------------------------------------------
# Main
# -----------------------------------------------------------------------------

def main():
    controller = AppState.start(create_controller)
    if controller is None:
        st.stop()

    render_app(controller)


main()
