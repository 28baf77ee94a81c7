"""Provider routing: task dispatch, GPT fallback and multi-provider fan-out."""

from .router import AIRouter, FALLBACK_MISSING_CREDENTIALS, coerce_options

__all__ = ["AIRouter", "FALLBACK_MISSING_CREDENTIALS", "coerce_options"]
