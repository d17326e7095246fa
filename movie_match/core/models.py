"""
Canonical movie record shared by the store, the local catalog, and the UI.

Store rows use ``release_year``/``description`` while the local catalog uses
``releaseYear``/``content``. Both are converted here so the rest of the app
only ever sees one shape.
"""

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import numpy as np


def _coerce_year(value: Any) -> str:
    """Normalize a release year to text ("" when missing)."""
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


def _coerce_embedding(value: Any) -> Optional[list[float]]:
    """Convert a stored embedding into a list of floats.

    pgvector columns come back from PostgREST as a string like "[0.1,0.2]".
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip().strip("[]")
        if not value:
            return []
        value = value.split(",")
    return np.asarray(value, dtype=np.float64).tolist()


@dataclass(frozen=True)
class MovieRecord:
    """A single movie as the app understands it."""
    title: str
    release_year: str = ""
    description: str = ""
    id: Optional[Any] = None
    embedding: Optional[list[float]] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "MovieRecord":
        """
        Build a record from a store row or a catalog entry.

        Args:
            row: Mapping with either store keys (release_year, description)
                or catalog keys (releaseYear, content)

        Returns:
            MovieRecord with the year coerced to text
        """
        year = row.get("release_year")
        if year is None:
            year = row.get("releaseYear")

        description = row.get("description")
        if description is None:
            description = row.get("content")

        return cls(
            id=row.get("id"),
            title=str(row.get("title") or "").strip(),
            release_year=_coerce_year(year),
            description=str(description or "").strip(),
            embedding=_coerce_embedding(row.get("embedding")),
        )

    def to_row(self) -> dict[str, Any]:
        """Insert payload for the remote table (id is store-assigned)."""
        return {
            "title": self.title,
            "release_year": self.release_year,
            "description": self.description,
            "embedding": self.embedding,
        }

    @property
    def embedding_text(self) -> str:
        """Text that gets embedded for this movie."""
        return f"{self.title} ({self.release_year}): {self.description}"

    @property
    def display_title(self) -> str:
        """Title with the year suffix, or the bare title when year is unknown."""
        if self.release_year:
            return f"{self.title} ({self.release_year})"
        return self.title

    @property
    def has_embedding(self) -> bool:
        return bool(self.embedding)
