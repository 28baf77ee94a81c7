"""Anthropic Claude adapter."""

from .adapter import DEFAULT_CLAUDE_MODEL, ClaudeProvider

__all__ = ["ClaudeProvider", "DEFAULT_CLAUDE_MODEL"]
