"""Configuration module for the AI router."""

from .settings import ProviderClients, RouterSettings, build_clients
from .tasks import (
    CLAUDE_SETTINGS,
    GEMINI_SETTINGS,
    GPT_SETTINGS,
    GROK_SETTINGS,
    SERVICE_TASK_MAPPING,
    TASK_PROVIDER_MAPPING,
    AISettings,
    ServiceTaskSettings,
    get_optimal_settings,
    get_service_task_settings,
    provider_for_task,
    resolve_provider,
    resolve_task,
)

__all__ = [
    "ProviderClients",
    "RouterSettings",
    "build_clients",
    "CLAUDE_SETTINGS",
    "GEMINI_SETTINGS",
    "GPT_SETTINGS",
    "GROK_SETTINGS",
    "SERVICE_TASK_MAPPING",
    "TASK_PROVIDER_MAPPING",
    "AISettings",
    "ServiceTaskSettings",
    "get_optimal_settings",
    "get_service_task_settings",
    "provider_for_task",
    "resolve_provider",
    "resolve_task",
]
