"""
Rationale backends for Movie Match.
"""

from .base import BaseExplainer, get_explainer, register_explainer
from .openai_explainer import OpenAIExplainer

__all__ = ["BaseExplainer", "OpenAIExplainer", "get_explainer", "register_explainer"]
