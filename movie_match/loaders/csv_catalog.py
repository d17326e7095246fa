"""
CSV catalog loader.
Reads the bundled movie list (or any CSV with the same columns).
"""

from pathlib import Path
from typing import Optional

import pandas as pd

from .base import BaseCatalogLoader
import config


class CsvCatalogLoader(BaseCatalogLoader):
    """
    Loader for a movie catalog stored as CSV.

    Expected CSV format:
    - title: Movie title
    - releaseYear: Year of release
    - content: Short description

    ``year``/``release_year`` and ``description`` are accepted as
    alternative column names.
    """

    COLUMN_ALIASES = {
        "year": "releaseYear",
        "release_year": "releaseYear",
        "description": "content",
    }

    def __init__(self, csv_path: Optional[Path] = None):
        """
        Initialize the catalog loader.

        Args:
            csv_path: Path to the CSV file (defaults to config.CATALOG_PATH)
        """
        self.csv_path = Path(csv_path) if csv_path else config.CATALOG_PATH

    @property
    def name(self) -> str:
        return self.csv_path.stem

    def load(self) -> pd.DataFrame:
        """
        Load the catalog CSV and normalize column names.

        Raises:
            FileNotFoundError: If the CSV does not exist
            ValueError: If required columns are missing
        """
        if not self.csv_path.exists():
            raise FileNotFoundError(f"Catalog not found: {self.csv_path}")

        df = pd.read_csv(self.csv_path)

        renames = {
            source: target
            for source, target in self.COLUMN_ALIASES.items()
            if source in df.columns and target not in df.columns
        }
        if renames:
            df = df.rename(columns=renames)

        return self.validate(df)
