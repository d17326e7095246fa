"""
Base class for catalog loaders.
Defines the interface all loaders must implement.
"""

import logging
from abc import ABC, abstractmethod

import pandas as pd

from movie_match.core.models import MovieRecord

logger = logging.getLogger(__name__)


class BaseCatalogLoader(ABC):
    """
    Abstract base class for local movie catalogs used to seed the store.

    All loaders must return a DataFrame with these required columns:
    - title: Movie title
    - releaseYear: Release year (numeric or text)
    - content: Description used for display and embedding
    """

    REQUIRED_COLUMNS = {"title", "releaseYear", "content"}

    @abstractmethod
    def load(self) -> pd.DataFrame:
        """
        Load and return the catalog as a DataFrame.

        Returns:
            pd.DataFrame with required columns: title, releaseYear, content
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this catalog."""
        pass

    def validate(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Validate that DataFrame has required columns.

        Args:
            df: DataFrame to validate

        Returns:
            Validated DataFrame

        Raises:
            ValueError: If required columns are missing
        """
        missing = self.REQUIRED_COLUMNS - set(df.columns)

        if missing:
            raise ValueError(f"Catalog missing required columns: {sorted(missing)}")

        # Remove rows without a title or description and log how many were dropped
        original_count = len(df)
        df = df[
            df["title"].notna()
            & (df["title"].astype(str).str.strip() != "")
            & df["content"].notna()
            & (df["content"].astype(str).str.strip() != "")
        ]
        dropped_count = original_count - len(df)

        if dropped_count > 0:
            logger.warning(
                "Dropped %d catalog rows with empty title/content (%.1f%% of %d total)",
                dropped_count,
                dropped_count / original_count * 100,
                original_count,
            )

        logger.info("Validated catalog: %d rows (from %d original)", len(df), original_count)

        return df.reset_index(drop=True)

    def records(self) -> list[MovieRecord]:
        """Load the catalog as canonical movie records."""
        df = self.load()
        return [MovieRecord.from_row(row) for row in df.to_dict(orient="records")]
