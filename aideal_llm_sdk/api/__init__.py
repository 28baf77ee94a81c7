"""
Public API Layer

Module-level functions backed by a default AIRouter built from the
environment. Applications that manage their own router construct
``AIRouter`` directly (or install it with ``set_default_router``).
"""

from .client import (
    generate,
    generate_for_service_task,
    generate_for_task,
    generate_with_ai,
    generate_with_multiple_ais,
    get_default_router,
    get_provider_status,
    set_default_router,
)

__all__ = [
    "generate",
    "generate_for_service_task",
    "generate_for_task",
    "generate_with_ai",
    "generate_with_multiple_ais",
    "get_default_router",
    "get_provider_status",
    "set_default_router",
]
