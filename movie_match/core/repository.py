"""
MovieRepository: access to the remote movie collection.
Wraps the Supabase client for similarity search, fallback sampling, and maintenance CRUD.
"""

import logging
import os
from typing import Any, Optional, Sequence

from supabase import Client, create_client

from movie_match.core.models import MovieRecord
import config

logger = logging.getLogger(__name__)


def create_supabase_client(url: Optional[str] = None, key: Optional[str] = None) -> Client:
    """
    Build a Supabase client from arguments or environment.

    Raises:
        ValueError: If the URL or key is missing
    """
    url = url or os.getenv(config.ENV_SUPABASE_URL)
    key = key or os.getenv(config.ENV_SUPABASE_KEY)
    if not url or not key:
        raise ValueError(
            "Supabase credentials not found. "
            "Set SUPABASE_URL and SUPABASE_KEY in .env file or pass them explicitly."
        )
    return create_client(url, key)


class MovieRepository:
    """
    Thin repository over the remote ``movies`` table.

    Ranking is entirely the store's concern: ``match_movies`` is a
    Postgres function that orders rows by vector similarity.

    Read paths used by the interactive session never raise; they log and
    return an empty list so the caller can fall back. Maintenance paths
    raise so the caller can count and skip failures.
    """

    def __init__(
        self,
        client: Optional[Client] = None,
        table: str = config.SUPABASE_TABLE,
        match_rpc: str = config.SUPABASE_MATCH_RPC
    ):
        self.client = client or create_supabase_client()
        self.table = table
        self.match_rpc = match_rpc

    # -------------------------------------------------------------------------
    # Interactive reads
    # -------------------------------------------------------------------------

    def match_movies(
        self,
        embedding: Sequence[float],
        count: int = config.MATCH_COUNT
    ) -> list[MovieRecord]:
        """
        Ranked nearest neighbours for a query embedding.

        Args:
            embedding: Query vector
            count: Maximum number of results

        Returns:
            Records in the store's ranking order, or [] on any error
        """
        try:
            response = self.client.rpc(
                self.match_rpc,
                {"query_embedding": list(embedding), "match_count": count},
            ).execute()
        except Exception:
            logger.exception("RPC %s failed", self.match_rpc)
            return []

        return self._to_records(response.data)[:count]

    def sample_movies(self, limit: int = config.FALLBACK_COUNT) -> list[MovieRecord]:
        """Unranked rows, used when the similarity search comes back empty."""
        try:
            response = self.client.table(self.table).select("*").limit(limit).execute()
        except Exception:
            logger.exception("Fallback select on %s failed", self.table)
            return []

        return self._to_records(response.data)

    # -------------------------------------------------------------------------
    # Maintenance
    # -------------------------------------------------------------------------

    def count_movies(self) -> int:
        """Exact row count of the collection."""
        response = (
            self.client.table(self.table)
            .select("*", count="exact", head=True)
            .execute()
        )
        return response.count or 0

    def movies_missing_embeddings(self) -> list[MovieRecord]:
        """Rows whose embedding column is NULL."""
        response = (
            self.client.table(self.table)
            .select("id, title, release_year, description, embedding")
            .is_("embedding", "null")
            .execute()
        )
        return self._to_records(response.data)

    def insert_movie(self, record: MovieRecord) -> None:
        self.client.table(self.table).insert(record.to_row()).execute()

    def update_embedding(self, movie_id: Any, embedding: Sequence[float]) -> None:
        (
            self.client.table(self.table)
            .update({"embedding": list(embedding)})
            .eq("id", movie_id)
            .execute()
        )

    @staticmethod
    def _to_records(rows: Optional[list[dict]]) -> list[MovieRecord]:
        return [MovieRecord.from_row(row) for row in rows or []]
