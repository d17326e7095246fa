"""
Base class for embedding backends.
Defines the interface all embedders must implement.
"""

from abc import ABC, abstractmethod


class BaseEmbedder(ABC):
    """
    Abstract base class for text embedding backends.

    All embedders must:
    - Turn one text into a flat list of floats (empty when the backend gave nothing)
    - Report their embedding dimension
    - Provide a unique name
    """

    @abstractmethod
    def embed(self, text: str) -> list[float]:
        """
        Embed a single text into a vector.

        Callers are expected to pass non-empty text.

        Args:
            text: Text to embed

        Returns:
            List of floats, or an empty list if no vector came back
        """
        pass

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Return the dimensionality of the embeddings."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this embedder."""
        pass


# Registry for available embedders
_EMBEDDER_REGISTRY: dict[str, type[BaseEmbedder]] = {}


def register_embedder(name: str):
    """
    Decorator to register an embedder class.

    Usage:
        @register_embedder("openai")
        class OpenAIEmbedder(BaseEmbedder):
            ...
    """
    def decorator(cls: type[BaseEmbedder]):
        _EMBEDDER_REGISTRY[name] = cls
        return cls
    return decorator


def get_embedder(name: str, **kwargs) -> BaseEmbedder:
    """
    Get an embedder instance by name.

    Args:
        name: Registered embedder name
        **kwargs: Arguments passed to embedder constructor

    Returns:
        Embedder instance

    Raises:
        ValueError: If embedder name not found
    """
    if name not in _EMBEDDER_REGISTRY:
        raise ValueError(f"Unknown embedder '{name}'. Available: {list_embedders()}")

    return _EMBEDDER_REGISTRY[name](**kwargs)


def list_embedders() -> list[str]:
    """Return list of registered embedder names."""
    return list(_EMBEDDER_REGISTRY.keys())
