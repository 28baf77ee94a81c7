"""
Provider Adapters Layer

This layer contains all AI vendor-specific implementations.
Each provider adapter translates between the router's unified interface
and the vendor's specific API requirements.

The concrete adapters live in their own subpackages (``openai``,
``anthropic``, ``xai``, ``gemini``) and are imported from there.
"""

from .base import (
    EmptyResponseError,
    InvalidRequestError,
    ProviderAdapter,
    ProviderConfigurationError,
    ProviderError,
    RouterError,
    UnknownProviderError,
    UnknownTaskError,
)
from .errors import ErrorCategory, ErrorClassification, ErrorMapper

__all__ = [
    "EmptyResponseError",
    "InvalidRequestError",
    "ProviderAdapter",
    "ProviderConfigurationError",
    "ProviderError",
    "RouterError",
    "UnknownProviderError",
    "UnknownTaskError",
    "ErrorCategory",
    "ErrorClassification",
    "ErrorMapper",
]
