"""Tests for MovieRecord schema conversion."""

import pytest

from movie_match.core.models import MovieRecord


def test_from_store_row():
    movie = MovieRecord.from_row({
        "id": 7,
        "title": "Arrival",
        "release_year": "2016",
        "description": "Linguist meets aliens.",
        "embedding": [0.5, 0.25],
    })

    assert movie.id == 7
    assert movie.title == "Arrival"
    assert movie.release_year == "2016"
    assert movie.description == "Linguist meets aliens."
    assert movie.embedding == [0.5, 0.25]


def test_from_catalog_row_converts_numeric_year():
    movie = MovieRecord.from_row({"title": "Coco", "releaseYear": 2017, "content": "Music and memory."})

    assert movie.id is None
    assert movie.release_year == "2017"
    assert movie.description == "Music and memory."
    assert movie.embedding is None


@pytest.mark.parametrize(
    "year, expected",
    [(1999.0, "1999"), (float("nan"), ""), (None, ""), (" 2001 ", "2001"), ("", "")],
)
def test_year_coercion(year, expected):
    assert MovieRecord.from_row({"title": "X", "release_year": year}).release_year == expected


def test_store_key_wins_over_catalog_key():
    movie = MovieRecord.from_row({"title": "X", "release_year": "2000", "releaseYear": 1990})
    assert movie.release_year == "2000"


def test_pgvector_string_embedding():
    movie = MovieRecord.from_row({"title": "X", "embedding": "[0.1,0.2,0.3]"})
    assert movie.embedding == pytest.approx([0.1, 0.2, 0.3])
    assert movie.has_embedding


def test_display_title_without_year_has_no_artifacts():
    movie = MovieRecord.from_row({"title": "Untitled Project"})
    assert movie.display_title == "Untitled Project"
    assert movie.description == ""


def test_display_title_with_year():
    assert MovieRecord(title="Dune", release_year="2021").display_title == "Dune (2021)"


def test_embedding_text():
    movie = MovieRecord(title="Dune", release_year="2021", description="Spice.")
    assert movie.embedding_text == "Dune (2021): Spice."


def test_to_row_uses_store_column_names():
    movie = MovieRecord(id=3, title="Dune", release_year="2021", description="Spice.", embedding=[1.0])
    assert movie.to_row() == {
        "title": "Dune",
        "release_year": "2021",
        "description": "Spice.",
        "embedding": [1.0],
    }
