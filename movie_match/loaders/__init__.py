"""
Catalog loaders for Movie Match.
"""

from .base import BaseCatalogLoader
from .csv_catalog import CsvCatalogLoader

__all__ = ["BaseCatalogLoader", "CsvCatalogLoader"]
