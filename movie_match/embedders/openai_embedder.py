"""
OpenAI embedding backend.
Uses text-embedding-3-small, the same model the stored movie vectors were built with.
"""

import logging
import os
from typing import Any, Optional

import numpy as np
from openai import OpenAI

from .base import BaseEmbedder, register_embedder
import config

logger = logging.getLogger(__name__)


@register_embedder("openai")
class OpenAIEmbedder(BaseEmbedder):
    """
    OpenAI embedding backend.

    One request per call, no retries: the caller decides what a failure
    means for the user.
    """

    def __init__(
        self,
        model: str = config.OPENAI_EMBEDDING_MODEL,
        api_key: Optional[str] = None,
        client: Optional[Any] = None
    ):
        """
        Initialize the OpenAI embedder.

        Args:
            model: OpenAI model name (default: text-embedding-3-small)
            api_key: Optional API key (defaults to OPENAI_API_KEY env var)
            client: Optional pre-built OpenAI client
        """
        self.model = model

        if client is None:
            api_key = api_key or os.getenv(config.ENV_OPENAI_API_KEY)
            if not api_key:
                raise ValueError(
                    "OpenAI API key not found. "
                    "Set OPENAI_API_KEY in .env file or pass api_key parameter."
                )
            client = OpenAI(api_key=api_key)

        self.client = client
        self._dimension = config.OPENAI_EMBEDDING_DIM

    @property
    def name(self) -> str:
        return f"openai_{self.model}"

    @property
    def dimension(self) -> int:
        return self._dimension

    def embed(self, text: str) -> list[float]:
        """
        Embed text with the OpenAI embeddings endpoint.

        Args:
            text: Text to embed

        Returns:
            First vector of the response as floats, or [] if there was none
        """
        response = self.client.embeddings.create(model=self.model, input=text)

        data = getattr(response, "data", None) or []
        if not data:
            logger.warning("Embedding response for model %s had no data", self.model)
            return []

        vector = getattr(data[0], "embedding", None) or []
        return np.asarray(vector, dtype=np.float64).tolist()
