"""xAI Grok adapter (OpenAI-compatible endpoint)."""

from .adapter import DEFAULT_GROK_BASE_URL, DEFAULT_GROK_MODEL, GrokProvider

__all__ = ["GrokProvider", "DEFAULT_GROK_MODEL", "DEFAULT_GROK_BASE_URL"]
