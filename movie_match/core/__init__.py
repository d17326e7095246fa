"""
Core components for Movie Match.
"""

from .models import MovieRecord
from .repository import MovieRepository, create_supabase_client
from .session import (
    ExplanationTicket,
    SessionController,
    SessionState,
    SubmissionError,
    ViewMode,
)
from .maintenance import MaintenanceReport, backfill_missing_embeddings, seed_if_empty

__all__ = [
    "MovieRecord",
    "MovieRepository",
    "create_supabase_client",
    "ExplanationTicket",
    "SessionController",
    "SessionState",
    "SubmissionError",
    "ViewMode",
    "MaintenanceReport",
    "backfill_missing_embeddings",
    "seed_if_empty",
]
