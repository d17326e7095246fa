"""
Base class for rationale generators.
"""

from abc import ABC, abstractmethod

from movie_match.core.models import MovieRecord


class BaseExplainer(ABC):
    """
    Abstract base class for backends that explain why a movie fits a user.
    """

    @abstractmethod
    def explain(self, user_text: str, movie: MovieRecord) -> str:
        """
        Produce a one-to-two sentence rationale.

        Args:
            user_text: Formatted summary of the user's answers
            movie: Candidate movie

        Returns:
            Rationale text, or "" if the backend returned nothing
        """
        pass

    @staticmethod
    def build_prompt(user_text: str, movie: MovieRecord) -> str:
        """User message shared by all backends."""
        return f"User: {user_text}\nMovie: {movie.display_title}"


# Registry for available explainers
_EXPLAINER_REGISTRY: dict[str, type[BaseExplainer]] = {}


def register_explainer(name: str):
    """Decorator to register an explainer class."""
    def decorator(cls: type[BaseExplainer]):
        _EXPLAINER_REGISTRY[name] = cls
        return cls
    return decorator


def get_explainer(name: str, **kwargs) -> BaseExplainer:
    """
    Get an explainer instance by name.

    Raises:
        ValueError: If explainer name not found
    """
    if name not in _EXPLAINER_REGISTRY:
        available = list(_EXPLAINER_REGISTRY.keys())
        raise ValueError(f"Unknown explainer '{name}'. Available: {available}")

    return _EXPLAINER_REGISTRY[name](**kwargs)
