"""Tests for the movie-match-admin command."""

import json

import pytest

from movie_match import cli
from conftest import FakeEmbedder, FakeRepository


@pytest.fixture
def fake_backends(monkeypatch):
    repository = FakeRepository(rows=0)
    embedder = FakeEmbedder(vector=[0.1, 0.2])
    monkeypatch.setattr(cli, "MovieRepository", lambda: repository)
    monkeypatch.setattr(cli, "get_embedder", lambda name: embedder)
    return repository, embedder


def test_command_is_required():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_seed_from_custom_catalog(fake_backends, tmp_path, capsys):
    repository, _ = fake_backends
    catalog = tmp_path / "movies.csv"
    catalog.write_text("title,releaseYear,content\nCoco,2017,Music.\nDune,2021,Spice.\n")

    exit_code = cli.main(["seed", "--catalog", str(catalog)])

    assert exit_code == 0
    assert [m.title for m in repository.inserted] == ["Coco", "Dune"]
    assert "Status: SUCCESS" in capsys.readouterr().out


def test_seed_json_output(fake_backends, tmp_path, capsys):
    catalog = tmp_path / "movies.csv"
    catalog.write_text("title,releaseYear,content\nCoco,2017,Music.\n")

    exit_code = cli.main(["--json", "seed", "--catalog", str(catalog)])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["operation"] == "seed"
    assert payload["processed"] == 1


def test_backfill_reports_failures(fake_backends, capsys):
    from movie_match.core.models import MovieRecord

    repository, _ = fake_backends
    repository.missing = [MovieRecord(id=1, title="A"), MovieRecord(id=2, title="B")]
    repository.fail_ids = {2}

    exit_code = cli.main(["backfill"])

    assert exit_code == 1
    assert repository.updated == [(1, [0.1, 0.2])]
    assert "COMPLETED WITH ERRORS" in capsys.readouterr().out


def test_setup_errors_exit_nonzero(monkeypatch, capsys):
    def broken():
        raise ValueError("Supabase credentials not found.")

    monkeypatch.setattr(cli, "MovieRepository", broken)

    assert cli.main(["backfill"]) == 1
    assert "Supabase credentials not found." in capsys.readouterr().err
