"""Tests for the HTML fragments the result panel renders."""

from movie_match.core.models import MovieRecord
from movie_match.ui.results import movie_card_html, rationale_html
from movie_match.ui.styles import escape_html
import config


def test_card_with_year():
    html = movie_card_html(MovieRecord(title="Dune", release_year="2021", description="Spice."))

    assert "Dune" in html
    assert '<span class="mm-result-sub">(2021)</span>' in html
    assert "Spice." in html


def test_card_without_year_has_no_suffix():
    html = movie_card_html(MovieRecord(title="Mystery", description="Who knows."))

    assert "mm-result-sub" not in html
    assert "()" not in html
    assert "None" not in html
    assert "undefined" not in html


def test_card_escapes_store_content():
    html = movie_card_html(MovieRecord(title="<b>Bold</b>", description="Tom & Jerry"))

    assert "&lt;b&gt;Bold&lt;/b&gt;" in html
    assert "Tom &amp; Jerry" in html


def test_rationale_placeholder_and_text():
    assert config.RATIONALE_PLACEHOLDER in rationale_html(config.RATIONALE_PLACEHOLDER, loading=True)
    assert "mm-loading" in rationale_html("x", loading=True)
    assert "mm-loading" not in rationale_html("x")
    assert rationale_html("") == '<div class="mm-result-ai"></div>'


def test_escape_html_quotes():
    assert escape_html("\"it's\"") == "&quot;it&#39;s&quot;"
