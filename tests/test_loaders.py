"""Tests for the CSV catalog loader."""

import pytest

from movie_match.loaders import CsvCatalogLoader
import config


def test_bundled_catalog_loads():
    records = CsvCatalogLoader().records()

    assert len(records) >= 10
    assert all(r.title and r.description for r in records)
    assert all(r.release_year.isdigit() for r in records)
    assert all(r.id is None and r.embedding is None for r in records)


def test_default_path_is_config_catalog():
    assert CsvCatalogLoader().csv_path == config.CATALOG_PATH
    assert CsvCatalogLoader().name == "movies"


def test_alias_columns(tmp_path):
    path = tmp_path / "alt.csv"
    path.write_text("title,year,description\nCoco,2017,Music and memory.\n")

    [movie] = CsvCatalogLoader(path).records()

    assert movie.title == "Coco"
    assert movie.release_year == "2017"
    assert movie.description == "Music and memory."


def test_rows_without_content_are_dropped(tmp_path, caplog):
    path = tmp_path / "partial.csv"
    path.write_text(
        "title,releaseYear,content\n"
        "Coco,2017,Music.\n"
        "Nothing,2020,\n"
        ",2019,No title here.\n"
    )

    records = CsvCatalogLoader(path).records()

    assert [r.title for r in records] == ["Coco"]
    assert "Dropped 2 catalog rows" in caplog.text


def test_missing_year_is_blank(tmp_path):
    path = tmp_path / "noyear.csv"
    path.write_text("title,releaseYear,content\nMystery,,Who knows.\n")

    [movie] = CsvCatalogLoader(path).records()

    assert movie.release_year == ""
    assert movie.display_title == "Mystery"


def test_missing_columns(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("name,text\nCoco,Music.\n")

    with pytest.raises(ValueError, match="missing required columns"):
        CsvCatalogLoader(path).load()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        CsvCatalogLoader(tmp_path / "absent.csv").load()
