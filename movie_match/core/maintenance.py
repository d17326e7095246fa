"""
Seed and backfill routines for the remote movie collection.

Both are operator tools, run by hand from the ``movie-match-admin`` command.
Per-row failures are logged and counted; nothing is retried or rolled back,
and running two copies at once can insert or embed the same movie twice.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Iterable, Optional

from movie_match.core.models import MovieRecord

if TYPE_CHECKING:
    from movie_match.core.repository import MovieRepository
    from movie_match.embedders.base import BaseEmbedder

logger = logging.getLogger(__name__)


@dataclass
class MaintenanceReport:
    """Outcome of one maintenance run."""
    operation: str
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None
    processed: int = 0
    failed: int = 0
    skipped: bool = False
    errors: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.failed == 0

    def record_failure(self, label: str, error: Exception) -> None:
        self.failed += 1
        self.errors.append(f"{label}: {error}")

    def finish(self) -> "MaintenanceReport":
        self.completed_at = datetime.now()
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert report to dictionary for serialization."""
        return {
            "operation": self.operation,
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "processed": self.processed,
            "failed": self.failed,
            "skipped": self.skipped,
            "errors": self.errors,
        }


def format_report(report: MaintenanceReport) -> str:
    """Format a maintenance report for display."""
    lines = [f"Operation: {report.operation}"]

    if report.completed_at:
        duration = report.completed_at - report.started_at
        lines.append(f"Duration: {duration.total_seconds():.2f} seconds")

    if report.skipped:
        lines.append("Status: SKIPPED")
    elif report.failed:
        lines.append(f"Status: COMPLETED WITH ERRORS ({report.failed} failed)")
    else:
        lines.append("Status: SUCCESS")

    lines.append(f"Processed: {report.processed}")

    if report.errors:
        lines.append("Errors:")
        for error in report.errors:
            lines.append(f"  - {error}")

    return "\n".join(lines)


def seed_if_empty(
    repository: "MovieRepository",
    embedder: "BaseEmbedder",
    catalog: Iterable[MovieRecord]
) -> MaintenanceReport:
    """
    Populate the collection from the local catalog, but only if it is empty.

    Args:
        repository: Remote collection
        embedder: Backend used to embed each catalog entry
        catalog: Movies to insert

    Returns:
        MaintenanceReport; ``skipped`` is set when rows already existed

    Raises:
        Exception: If the row count itself cannot be read
    """
    report = MaintenanceReport(operation="seed")

    existing = repository.count_movies()
    if existing > 0:
        logger.info("Movies already present (%d rows), skipping seed", existing)
        report.skipped = True
        return report.finish()

    logger.info("Seeding movies...")
    for movie in catalog:
        try:
            record = MovieRecord(
                title=movie.title,
                release_year=movie.release_year,
                description=movie.description,
                embedding=embedder.embed(movie.embedding_text),
            )
            if not record.has_embedding:
                raise ValueError("embedding came back empty")
            repository.insert_movie(record)
        except Exception as e:
            logger.error("Insert failed for %r: %s", movie.title, e)
            report.record_failure(movie.title, e)
            continue
        report.processed += 1

    logger.info("Seeding complete: %d inserted, %d failed", report.processed, report.failed)
    return report.finish()


def backfill_missing_embeddings(
    repository: "MovieRepository",
    embedder: "BaseEmbedder"
) -> MaintenanceReport:
    """
    Compute embeddings for rows that have none.

    Raises:
        Exception: If the rows to backfill cannot be listed
    """
    report = MaintenanceReport(operation="backfill")

    logger.info("Backfilling NULL embeddings...")
    for movie in repository.movies_missing_embeddings():
        try:
            embedding = embedder.embed(movie.embedding_text)
            if not len(embedding):
                raise ValueError("embedding came back empty")
            repository.update_embedding(movie.id, embedding)
        except Exception as e:
            logger.error("Backfill update failed for id=%s: %s", movie.id, e)
            report.record_failure(str(movie.id), e)
            continue
        report.processed += 1

    logger.info("Backfill complete: %d updated, %d failed", report.processed, report.failed)
    return report.finish()
