"""
Movie Match Configuration
Central configuration for paths, models, remote store names, and UI strings.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables (.env is optional)
load_dotenv()

# Project paths
PROJECT_ROOT = Path(__file__).parent
DATA_DIR = PROJECT_ROOT / "data"
CATALOG_PATH = DATA_DIR / "movies.csv"

# Embedding settings
DEFAULT_EMBEDDER = "openai"
OPENAI_EMBEDDING_MODEL = "text-embedding-3-small"
OPENAI_EMBEDDING_DIM = 1536

# Explanation settings
DEFAULT_EXPLAINER = "openai"
OPENAI_CHAT_MODEL = "gpt-4o-mini"
EXPLAIN_TEMPERATURE = 0.7
EXPLAIN_MAX_TOKENS = 60
EXPLAIN_SYSTEM_PROMPT = "You are a short, friendly movie recommender."

# Remote store (Supabase)
SUPABASE_TABLE = "movies"
SUPABASE_MATCH_RPC = "match_movies"
MATCH_COUNT = 5
FALLBACK_COUNT = 5

# Environment variable names
ENV_OPENAI_API_KEY = "OPENAI_API_KEY"
ENV_SUPABASE_URL = "SUPABASE_URL"
ENV_SUPABASE_KEY = "SUPABASE_KEY"

# Logging
LOG_LEVEL = os.getenv("MOVIE_MATCH_LOG_LEVEL", "INFO").upper()

# Questions shown on the entry panel: (state key, label, placeholder)
QUESTIONS = [
    ("favorite", "What's your favorite movie and why?", "e.g. Interstellar, the sense of wonder"),
    ("mood", "Are you in the mood for something new or a classic?", "e.g. something new"),
    ("tone", "Do you wanna have fun or do you want something serious?", "e.g. lighthearted"),
]

# User-facing messages
MSG_MISSING_ANSWERS = "Please answer all questions."
MSG_NO_EMBEDDING = "Could not create an embedding for your answers."
MSG_NO_MATCHES = "No matches found."
MSG_FALLBACK_NOTICE = "No perfect matches — showing similar picks:"
RATIONALE_PLACEHOLDER = "Thinking…"
