"""Observability layer: structured logging for the router and adapters."""

from .logging import ProviderLogger

__all__ = ["ProviderLogger"]
