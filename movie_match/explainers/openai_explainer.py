"""
OpenAI chat backend for match rationales.
"""

import os
from typing import Any, Optional

from openai import OpenAI

from movie_match.core.models import MovieRecord
from .base import BaseExplainer, register_explainer
import config


@register_explainer("openai")
class OpenAIExplainer(BaseExplainer):
    """
    Asks a chat model for a short, friendly reason to watch a movie.

    Output is capped at EXPLAIN_MAX_TOKENS so the reply stays at a sentence or two.
    """

    def __init__(
        self,
        model: str = config.OPENAI_CHAT_MODEL,
        temperature: float = config.EXPLAIN_TEMPERATURE,
        max_tokens: int = config.EXPLAIN_MAX_TOKENS,
        api_key: Optional[str] = None,
        client: Optional[Any] = None
    ):
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

        if client is None:
            api_key = api_key or os.getenv(config.ENV_OPENAI_API_KEY)
            if not api_key:
                raise ValueError(
                    "OpenAI API key not found. "
                    "Set OPENAI_API_KEY in .env file or pass api_key parameter."
                )
            client = OpenAI(api_key=api_key)

        self.client = client

    def explain(self, user_text: str, movie: MovieRecord) -> str:
        chat = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": config.EXPLAIN_SYSTEM_PROMPT},
                {"role": "user", "content": self.build_prompt(user_text, movie)},
            ],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

        choices = getattr(chat, "choices", None) or []
        if not choices:
            return ""
        return (choices[0].message.content or "").strip()
