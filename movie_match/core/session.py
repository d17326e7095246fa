"""
Session controller for the question → match → rationale flow.

Holds all per-user state in an explicit SessionState value and knows nothing
about Streamlit, so the whole interaction can be driven from tests.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from movie_match.core.models import MovieRecord
import config

if TYPE_CHECKING:
    from movie_match.core.repository import MovieRepository
    from movie_match.embedders.base import BaseEmbedder
    from movie_match.explainers.base import BaseExplainer

logger = logging.getLogger(__name__)


class ViewMode(Enum):
    """Which panel is on screen."""
    QUESTIONS = "questions"
    RESULT = "result"


class SubmissionError(Exception):
    """A submission was aborted; the message is shown to the user as-is."""


@dataclass(frozen=True)
class ExplanationTicket:
    """
    Identifies one rationale request.

    Only generation and index take part in equality, so a ticket is still
    usable as a cache key while carrying the movie and query it was issued for.
    """
    generation: int
    index: int
    movie_id: Any = field(default=None, compare=False)
    movie: Optional[MovieRecord] = field(default=None, compare=False, repr=False)
    user_text: str = field(default="", compare=False, repr=False)


@dataclass
class SessionState:
    """Everything one user session needs between reruns."""
    user_text: str = ""
    matches: tuple[MovieRecord, ...] = ()
    current_index: int = 0
    view: ViewMode = ViewMode.QUESTIONS
    loading: bool = False
    error: Optional[str] = None
    notice: Optional[str] = None
    generation: int = 0
    explanations: dict[ExplanationTicket, str] = field(default_factory=dict)


def format_user_text(favorite: str, mood: str, tone: str) -> str:
    """Query text built from the three answers."""
    return f"Favorite: {favorite}. Mood: {mood}. Tone: {tone}."


class SessionController:
    """
    Drives one user's session.

    Responsibilities:
    - Validate answers and run embed → match → fallback
    - Keep current_index inside the match list
    - Issue rationale requests and drop the ones that arrive too late
    """

    def __init__(
        self,
        embedder: "BaseEmbedder",
        repository: "MovieRepository",
        explainer: "BaseExplainer",
        state: Optional[SessionState] = None
    ):
        self.embedder = embedder
        self.repository = repository
        self.explainer = explainer
        self.state = state or SessionState()

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------

    @property
    def has_matches(self) -> bool:
        return len(self.state.matches) > 0

    @property
    def current_movie(self) -> Optional[MovieRecord]:
        if not self.has_matches:
            return None
        return self.state.matches[self.state.current_index]

    @property
    def can_submit(self) -> bool:
        return not self.state.loading

    @property
    def can_advance(self) -> bool:
        return self.has_matches and not self.state.loading

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def submit(self, favorite: str, mood: str, tone: str) -> bool:
        """
        Run a search for a set of answers.

        Args:
            favorite: Answer to the favorite-movie question
            mood: Answer to the new-or-classic question
            tone: Answer to the fun-or-serious question

        Returns:
            True if the session moved to the result view
        """
        if not self.can_submit:
            logger.debug("Submit ignored: a search is already running")
            return False

        answers = [(a or "").strip() for a in (favorite, mood, tone)]
        if not all(answers):
            self.state.error = config.MSG_MISSING_ANSWERS
            return False

        self.state.loading = True
        self.state.error = None
        self.state.notice = None

        try:
            user_text = format_user_text(*answers)
            matches, notice = self._find_matches(user_text)
        except SubmissionError as e:
            self.state.error = str(e)
            return False
        except Exception as e:
            logger.exception("Search failed")
            self.state.error = str(e) or repr(e)
            return False
        finally:
            self.state.loading = False

        self.state.user_text = user_text
        self.state.matches = tuple(matches)
        self.state.current_index = 0
        self.state.notice = notice
        self.state.generation += 1
        self.state.explanations.clear()
        self.state.view = ViewMode.RESULT
        return True

    def restart(self) -> None:
        """Back to the questions; the last matches are kept."""
        self.state.view = ViewMode.QUESTIONS
        self.state.error = None
        self.state.notice = None

    def next_match(self) -> Optional[MovieRecord]:
        """
        Advance to the next match, wrapping around.

        The new record's rationale is dropped so it gets asked for again.
        """
        if not self.can_advance:
            return None

        self.state.current_index = (self.state.current_index + 1) % len(self.state.matches)
        self.state.explanations.pop(self._ticket_key(), None)
        return self.current_movie

    def _find_matches(self, user_text: str) -> tuple[list[MovieRecord], Optional[str]]:
        embedding = self.embedder.embed(user_text)
        if not len(embedding):
            raise SubmissionError(config.MSG_NO_EMBEDDING)

        matches = self.repository.match_movies(embedding, count=config.MATCH_COUNT)
        if matches:
            return matches, None

        fallback = self.repository.sample_movies(limit=config.FALLBACK_COUNT)
        if fallback:
            logger.info("No ranked matches, falling back to %d sampled movies", len(fallback))
            return fallback, config.MSG_FALLBACK_NOTICE

        raise SubmissionError(config.MSG_NO_MATCHES)

    # -------------------------------------------------------------------------
    # Rationales
    # -------------------------------------------------------------------------

    def _ticket_key(self) -> ExplanationTicket:
        return ExplanationTicket(self.state.generation, self.state.current_index)

    def request_explanation(self) -> Optional[ExplanationTicket]:
        """Tag the record currently on screen; None when there is nothing to explain."""
        movie = self.current_movie
        if movie is None:
            return None
        return ExplanationTicket(
            generation=self.state.generation,
            index=self.state.current_index,
            movie_id=movie.id,
            movie=movie,
            user_text=self.state.user_text,
        )

    def is_current(self, ticket: ExplanationTicket) -> bool:
        return (
            ticket.generation == self.state.generation
            and ticket.index == self.state.current_index
            and self.has_matches
        )

    def explanation_for(self, ticket: Optional[ExplanationTicket]) -> Optional[str]:
        """Stored rationale for a ticket, or None if it has not arrived yet."""
        if ticket is None:
            return None
        return self.state.explanations.get(ticket)

    def apply_explanation(self, ticket: ExplanationTicket, text: str) -> bool:
        """
        Store a rationale if its ticket still points at the record on screen.

        Returns:
            False when the ticket is stale and the text was discarded
        """
        if not self.is_current(ticket):
            logger.debug("Discarding stale explanation for %s", ticket)
            return False
        self.state.explanations[ticket] = text or ""
        return True

    def fetch_explanation(self, ticket: ExplanationTicket) -> bool:
        """
        Ask the completion backend for a ticket's rationale and apply it.

        Failures are logged and turn into an empty rationale.
        """
        try:
            text = self.explainer.explain(ticket.user_text, ticket.movie)
        except Exception:
            logger.exception("Explanation failed for %r", ticket.movie.title if ticket.movie else None)
            text = ""
        return self.apply_explanation(ticket, text)
