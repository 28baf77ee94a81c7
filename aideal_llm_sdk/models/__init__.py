"""Data models for the A.IDEAL AI router."""

from .generation import (
    GenerationOptions,
    MessageRole,
    ProviderType,
    SYSTEM_LEVEL_ROLES,
    TaskType,
    UnifiedMessage,
    UnifiedResponse,
)

__all__ = [
    "GenerationOptions",
    "MessageRole",
    "ProviderType",
    "SYSTEM_LEVEL_ROLES",
    "TaskType",
    "UnifiedMessage",
    "UnifiedResponse",
]
