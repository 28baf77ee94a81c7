"""
A.IDEAL LLM SDK - Multi-provider AI router.

This package provides a unified interface over four AI providers:
- OpenAI (GPT models)
- Anthropic (Claude models)
- xAI (Grok models)
- Google (Gemini models)

Features:
- Task-based routing to the provider best suited for the work
- Automatic fallback to GPT when a provider has no credential
- JSON mode across providers, with markdown-fence stripping for Claude
- Concurrent multi-provider comparison
- Prompt templates and prompt-engineering helpers
"""

__version__ = "0.1.0"

from .api.client import (
    generate,
    generate_for_service_task,
    generate_for_task,
    generate_with_ai,
    generate_with_multiple_ais,
    get_default_router,
    get_provider_status,
    set_default_router,
)
from .config import (
    ProviderClients,
    RouterSettings,
    SERVICE_TASK_MAPPING,
    TASK_PROVIDER_MAPPING,
    build_clients,
    get_optimal_settings,
    get_service_task_settings,
)
from .core.normalization import extract_json_payload
from .core.routing import AIRouter
from .models.generation import (
    GenerationOptions,
    MessageRole,
    ProviderType,
    TaskType,
    UnifiedMessage,
    UnifiedResponse,
)
from .providers.base import (
    EmptyResponseError,
    InvalidRequestError,
    ProviderConfigurationError,
    ProviderError,
    RouterError,
    UnknownProviderError,
    UnknownTaskError,
)

__all__ = [
    # Module-level API
    "generate",
    "generate_for_service_task",
    "generate_for_task",
    "generate_with_ai",
    "generate_with_multiple_ais",
    "get_default_router",
    "get_provider_status",
    "set_default_router",

    # Router and configuration
    "AIRouter",
    "ProviderClients",
    "RouterSettings",
    "build_clients",
    "SERVICE_TASK_MAPPING",
    "TASK_PROVIDER_MAPPING",
    "get_optimal_settings",
    "get_service_task_settings",

    # Models
    "GenerationOptions",
    "MessageRole",
    "ProviderType",
    "TaskType",
    "UnifiedMessage",
    "UnifiedResponse",

    # Utilities
    "extract_json_payload",

    # Errors
    "EmptyResponseError",
    "InvalidRequestError",
    "ProviderConfigurationError",
    "ProviderError",
    "RouterError",
    "UnknownProviderError",
    "UnknownTaskError",
]
