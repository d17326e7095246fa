"""
Theme constants and CSS injection for Movie Match.
Centralizes all styling in one place for easy customization.
"""

import streamlit as st
from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Central theme configuration - all colors in one place."""
    # Primary palette (gradient)
    primary_start: str = "#f59e0b"
    primary_end: str = "#ef4444"

    # Backgrounds
    bg_dark: str = "#0b1120"
    bg_medium: str = "#111827"
    bg_light: str = "#1f2937"
    bg_card: str = "rgba(31, 41, 55, 0.85)"

    # Text
    text_primary: str = "#f9fafb"
    text_secondary: str = "#9ca3af"
    text_muted: str = "#d1d5db"

    # Borders
    border_subtle: str = "rgba(245, 158, 11, 0.3)"
    border_focus: str = "rgba(245, 158, 11, 0.6)"


THEME = Theme()


def get_css() -> str:
    """Generate CSS using theme constants."""
    return f"""
<style>
    :root {{
        --mm-primary-start: {THEME.primary_start};
        --mm-primary-end: {THEME.primary_end};
        --mm-text-primary: {THEME.text_primary};
        --mm-text-secondary: {THEME.text_secondary};
    }}

    [data-testid="stAppViewContainer"] {{
        background: linear-gradient(160deg, {THEME.bg_dark} 0%, {THEME.bg_medium} 60%, {THEME.bg_light} 100%);
    }}

    /* Header styling */
    .mm-header {{
        background: linear-gradient(90deg, var(--mm-primary-start) 0%, var(--mm-primary-end) 100%);
        -webkit-background-clip: text;
        -webkit-text-fill-color: transparent;
        background-clip: text;
        font-size: 2.5rem;
        font-weight: 800;
        text-align: center;
        margin-bottom: 0;
    }}

    .mm-subheader {{
        color: var(--mm-text-secondary);
        text-align: center;
        margin-top: 0.25rem;
    }}

    /* Result card */
    .mm-card {{
        background: {THEME.bg_card};
        border: 1px solid {THEME.border_subtle};
        border-radius: 12px;
        padding: 1.5rem;
        margin: 1rem 0;
    }}

    .mm-card:hover {{
        border-color: {THEME.border_focus};
    }}

    .mm-result-title {{
        color: {THEME.text_primary};
        font-size: 1.6rem;
        font-weight: 700;
        margin-bottom: 0.75rem;
    }}

    .mm-result-sub {{
        color: {THEME.text_secondary};
        font-weight: 400;
    }}

    .mm-result-desc {{
        color: {THEME.text_muted};
        line-height: 1.6;
    }}

    .mm-result-ai {{
        border-left: 3px solid var(--mm-primary-start);
        color: {THEME.text_primary};
        font-style: italic;
        padding: 0.5rem 1rem;
        margin-top: 1rem;
        min-height: 1.5rem;
    }}

    /* Message styling */
    .mm-error {{
        background: rgba(239, 68, 68, 0.1);
        border: 1px solid rgba(239, 68, 68, 0.3);
        border-radius: 8px;
        padding: 0.75rem 1rem;
        color: #fca5a5;
        margin: 0.5rem 0;
    }}

    .mm-info {{
        background: rgba(245, 158, 11, 0.1);
        border: 1px solid rgba(245, 158, 11, 0.3);
        border-radius: 8px;
        padding: 0.75rem 1rem;
        color: #fcd34d;
        margin: 0.5rem 0;
    }}

    .mm-caption {{
        color: {THEME.text_secondary};
        font-size: 0.8rem;
        text-align: center;
    }}

    /* Loading animation */
    @keyframes mm-pulse {{
        0%, 100% {{ opacity: 0.5; }}
        50% {{ opacity: 1; }}
    }}

    .mm-loading {{
        animation: mm-pulse 1.5s ease-in-out infinite;
    }}

    .stButton > button[kind="primary"],
    [data-testid="stFormSubmitButton"] > button {{
        background: linear-gradient(90deg, var(--mm-primary-start) 0%, var(--mm-primary-end) 100%);
        border: none;
    }}
</style>
"""


def inject_styles() -> None:
    """Inject CSS styles into the Streamlit app."""
    st.markdown(get_css(), unsafe_allow_html=True)


def render_header() -> None:
    """Render the styled application header."""
    st.markdown('<h1 class="mm-header">Movie Match</h1>', unsafe_allow_html=True)
    st.markdown('<p class="mm-subheader">Three questions, five movies</p>', unsafe_allow_html=True)


def render_error(message: str) -> None:
    """Render a styled error message."""
    st.markdown(f'<div class="mm-error">{escape_html(message)}</div>', unsafe_allow_html=True)


def render_info(message: str) -> None:
    """Render a styled info message."""
    st.markdown(f'<div class="mm-info">{escape_html(message)}</div>', unsafe_allow_html=True)


def escape_html(text: str) -> str:
    """Escape HTML special characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )
