"""
Configuration constants for the application.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).resolve().parent.parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

# OpenAI API Key for personalized recommendations
# IMPORTANT: Do NOT hardcode keys in code or commit them to git.
# Set OPENAI_API_KEY in your environment (or hosting provider env vars).
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
OPENAI_TIMEOUT = float(os.getenv("OPENAI_TIMEOUT", "12"))

# Department leaderboard size when the client does not ask for one
LEADERBOARD_LIMIT = int(os.getenv("LEADERBOARD_LIMIT", "10"))

# Shown instead of AI suggestions whenever the recommendation call fails
FALLBACK_RECOMMENDATION = (
    "We had trouble generating suggestions. "
    "Try to use public transport more often to reduce your emissions."
)
