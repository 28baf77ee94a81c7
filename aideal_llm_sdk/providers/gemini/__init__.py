"""Google Gemini adapter."""

from .adapter import DEFAULT_GEMINI_MODEL, GeminiProvider

__all__ = ["GeminiProvider", "DEFAULT_GEMINI_MODEL"]
