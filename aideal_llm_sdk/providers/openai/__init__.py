"""OpenAI GPT adapter."""

from .adapter import DEFAULT_GPT_MODEL, GPTProvider

__all__ = ["GPTProvider", "DEFAULT_GPT_MODEL"]
