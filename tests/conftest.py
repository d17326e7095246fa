import os
from unittest.mock import patch

import pytest

from movie_match.core.models import MovieRecord
from movie_match.core.session import SessionController
from movie_match.embedders.base import BaseEmbedder
from movie_match.explainers.base import BaseExplainer


@pytest.fixture(autouse=True)
def isolated_env():
    """Keep real credentials out of tests."""
    with patch.dict(os.environ, {}, clear=False):
        for key in ("OPENAI_API_KEY", "SUPABASE_URL", "SUPABASE_KEY"):
            os.environ.pop(key, None)
        yield


class FakeEmbedder(BaseEmbedder):
    def __init__(self, vector=None, error=None):
        self.vector = [0.1] * 1536 if vector is None else vector
        self.error = error
        self.calls = []

    def embed(self, text):
        self.calls.append(text)
        if self.error:
            raise self.error
        return list(self.vector)

    @property
    def dimension(self):
        return len(self.vector)

    @property
    def name(self):
        return "fake"


class FakeExplainer(BaseExplainer):
    def __init__(self, reply="Because you like it.", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def explain(self, user_text, movie):
        self.calls.append((user_text, movie))
        if self.error:
            raise self.error
        return self.reply


class FakeRepository:
    def __init__(self, matches=None, fallback=None, rows=0, missing=None, fail_titles=(), fail_ids=()):
        self.matches = list(matches or [])
        self.fallback = list(fallback or [])
        self.rows = rows
        self.missing = list(missing or [])
        self.fail_titles = set(fail_titles)
        self.fail_ids = set(fail_ids)
        self.match_calls = []
        self.sample_calls = []
        self.inserted = []
        self.updated = []

    def match_movies(self, embedding, count=5):
        self.match_calls.append((list(embedding), count))
        return list(self.matches[:count])

    def sample_movies(self, limit=5):
        self.sample_calls.append(limit)
        return list(self.fallback[:limit])

    def count_movies(self):
        return self.rows

    def movies_missing_embeddings(self):
        return list(self.missing)

    def insert_movie(self, record):
        if record.title in self.fail_titles:
            raise RuntimeError("insert rejected")
        self.inserted.append(record)

    def update_embedding(self, movie_id, embedding):
        if movie_id in self.fail_ids:
            raise RuntimeError("update rejected")
        self.updated.append((movie_id, list(embedding)))


def make_movies(n, start_id=1):
    return [
        MovieRecord(
            id=start_id + i,
            title=f"Movie {i}",
            release_year=str(2000 + i),
            description=f"Description {i}",
        )
        for i in range(n)
    ]


@pytest.fixture
def movies():
    return make_movies(5)


@pytest.fixture
def embedder():
    return FakeEmbedder()


@pytest.fixture
def explainer():
    return FakeExplainer()


@pytest.fixture
def repository(movies):
    return FakeRepository(matches=movies)


@pytest.fixture
def controller(embedder, repository, explainer):
    return SessionController(embedder=embedder, repository=repository, explainer=explainer)
