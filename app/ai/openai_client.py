"""
Unified OpenAI client.

All modules that need OpenAI should import from here:
    from app.ai.openai_client import get_client, key_present, key_fingerprint, get_last_error

This ensures:
- The API key is read ONCE and stripped of whitespace.
- A single client instance is reused.
- The last failure is kept for the diagnostics endpoint.
"""
import openai

from app.core.config import OPENAI_API_KEY, OPENAI_TIMEOUT

_KEY: str = OPENAI_API_KEY.strip()

# Track last error for diagnostics
_last_error: str | None = None

# Lazily-created singleton
_client = None


def key_present() -> bool:
    return bool(_KEY)


def key_fingerprint() -> str:
    """Return masked key for safe logging: sk-xxxx...1234"""
    if not _KEY:
        return "(not set)"
    if len(_KEY) <= 10:
        return _KEY[:2] + "***"
    return _KEY[:6] + "..." + _KEY[-4:]


def get_client():
    """
    Return the shared OpenAI client, or None if no key is configured.
    """
    global _client
    if not _KEY:
        return None
    if _client is None:
        _client = openai.OpenAI(api_key=_KEY, timeout=OPENAI_TIMEOUT)
    return _client


def set_last_error(msg: str):
    global _last_error
    _last_error = msg


def get_last_error() -> str | None:
    return _last_error


def log_startup():
    """Print one-time startup diagnostics."""
    print(f"[AI] OPENAI_API_KEY present: {key_present()}", flush=True)
    print(f"[AI] key fingerprint: {key_fingerprint()}", flush=True)
