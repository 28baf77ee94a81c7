"""
Task tables: which provider serves a task, and tuned sampling per task.

Three read-only tables live here:

- ``TASK_PROVIDER_MAPPING``: logical TaskType -> preferred provider
- ``*_SETTINGS``: per-provider temperature / max_tokens presets
- ``SERVICE_TASK_MAPPING``: application-level service task -> provider + preset
"""

from types import MappingProxyType
from typing import Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from ..models.generation import GenerationOptions, ProviderType, TaskType
from ..providers.base import UnknownProviderError, UnknownTaskError


class AISettings(BaseModel):
    """Tuned sampling settings for one kind of work."""

    model_config = ConfigDict(frozen=True)

    temperature: float
    max_tokens: int

    def to_options(self) -> GenerationOptions:
        return GenerationOptions(temperature=self.temperature, max_tokens=self.max_tokens)


class ServiceTask(BaseModel):
    model_config = ConfigDict(frozen=True)

    provider: ProviderType
    task_type: str


class ServiceTaskSettings(BaseModel):
    """Resolved service task: the provider to call and its tuned settings."""

    model_config = ConfigDict(frozen=True)

    provider: ProviderType
    settings: AISettings


TASK_PROVIDER_MAPPING: Mapping[TaskType, ProviderType] = MappingProxyType({
    # GPT: creative prompt and question generation
    TaskType.PROMPT_GENERATION: ProviderType.GPT,
    TaskType.QUESTION_GENERATION: ProviderType.GPT,

    # Claude: analysis, optimization, code and long-form learning content
    TaskType.PROMPT_ANALYSIS: ProviderType.CLAUDE,
    TaskType.PROMPT_OPTIMIZATION: ProviderType.CLAUDE,
    TaskType.CODE_GENERATION: ProviderType.CLAUDE,
    TaskType.LEARNING_CONTENT: ProviderType.CLAUDE,

    # Grok: trend-aware suggestions
    TaskType.TREND_ANALYSIS: ProviderType.GROK,
    TaskType.REAL_TIME_SUGGESTIONS: ProviderType.GROK,
})


def _presets(**entries) -> Mapping[str, AISettings]:
    return MappingProxyType({
        name: AISettings(temperature=temperature, max_tokens=max_tokens)
        for name, (temperature, max_tokens) in entries.items()
    })


CLAUDE_SETTINGS = _presets(
    creative_writing=(1.0, 8192),
    storytelling=(0.9, 8192),
    brainstorming=(0.95, 4096),
    prompt_analysis=(0.7, 6144),
    content_analysis=(0.6, 6144),
    learning_content=(0.8, 8192),
    code_generation=(0.3, 8192),
    code_review=(0.4, 6144),
    json_output=(0.5, 4096),
    data_extraction=(0.2, 4096),
    default=(1.0, 8192),
)

GPT_SETTINGS = _presets(
    creative_writing=(1.0, 4096),
    prompt_generation=(1.0, 4096),
    question_generation=(1.0, 2048),
    content_generation=(0.7, 4096),
    summarization=(0.5, 2048),
    classification=(0.0, 1024),
    json_output=(0.5, 4096),
    default=(1.0, 4096),
)

GROK_SETTINGS = _presets(
    trend_analysis=(0.8, 3072),
    real_time_info=(0.7, 3072),
    social_media=(0.9, 2048),
    default=(0.8, 3072),
)

GEMINI_SETTINGS = _presets(
    default=(1.0, 8192),
)

PROVIDER_SETTINGS: Mapping[ProviderType, Mapping[str, AISettings]] = MappingProxyType({
    ProviderType.GPT: GPT_SETTINGS,
    ProviderType.CLAUDE: CLAUDE_SETTINGS,
    ProviderType.GROK: GROK_SETTINGS,
    ProviderType.GEMINI: GEMINI_SETTINGS,
})


def _service(provider: ProviderType, task_type: str) -> ServiceTask:
    return ServiceTask(provider=provider, task_type=task_type)


SERVICE_TASK_MAPPING: Mapping[str, ServiceTask] = MappingProxyType({
    # Prompt builder
    "GENERATE_QUESTIONS": _service(ProviderType.GPT, "question_generation"),
    "GENERATE_PROMPT": _service(ProviderType.GPT, "prompt_generation"),
    "ANALYZE_PROMPT": _service(ProviderType.CLAUDE, "prompt_analysis"),
    "REFINE_PROMPT": _service(ProviderType.GPT, "prompt_generation"),
    "CHAT_REFINE": _service(ProviderType.GPT, "content_generation"),

    # Learning
    "GENERATE_CURRICULUM": _service(ProviderType.CLAUDE, "learning_content"),
    "GENERATE_LEARNING_CONTENT": _service(ProviderType.CLAUDE, "learning_content"),
    "ANALYZE_PROGRESS": _service(ProviderType.CLAUDE, "content_analysis"),

    # Challenges
    "CHAT_GENERAL": _service(ProviderType.GPT, "content_generation"),
    "LEARNING_CHAT": _service(ProviderType.GPT, "content_generation"),
    "CODE_REVIEW": _service(ProviderType.CLAUDE, "code_review"),
    "CODE_GENERATION": _service(ProviderType.CLAUDE, "code_generation"),

    # Trends
    "TREND_ANALYSIS": _service(ProviderType.GROK, "trend_analysis"),
    "LATEST_TOOLS": _service(ProviderType.GROK, "real_time_info"),
})


def resolve_provider(provider: Union[ProviderType, str]) -> ProviderType:
    """Parse a provider identifier; anything outside ProviderType raises."""
    if isinstance(provider, ProviderType):
        return provider
    if isinstance(provider, str):
        try:
            return ProviderType(provider.strip().lower())
        except ValueError:
            pass
    raise UnknownProviderError(provider)


def resolve_task(task_type: Union[TaskType, str]) -> TaskType:
    """Parse a TaskType from the enum, its value or its (case-insensitive) name."""
    if isinstance(task_type, TaskType):
        return task_type
    if isinstance(task_type, str):
        key = task_type.strip()
        if key.upper() in TaskType.__members__:
            return TaskType[key.upper()]
        try:
            return TaskType(key.lower())
        except ValueError:
            pass
    raise UnknownTaskError(task_type, known=[t.name for t in TaskType])


def provider_for_task(task_type: Union[TaskType, str]) -> ProviderType:
    return TASK_PROVIDER_MAPPING[resolve_task(task_type)]


def get_optimal_settings(provider: Union[ProviderType, str],
                         task_type: Optional[str] = None) -> AISettings:
    """
    Tuned settings for a provider and kind of work.

    Unknown or missing ``task_type`` returns the provider's ``default`` preset.
    """
    settings = PROVIDER_SETTINGS[resolve_provider(provider)]
    if not task_type:
        return settings["default"]
    return settings.get(task_type, settings["default"])


def get_service_task_settings(task_name: str) -> ServiceTaskSettings:
    """Resolve a service task name (e.g. ``GENERATE_QUESTIONS``) to provider + settings."""
    key = task_name.strip().upper() if isinstance(task_name, str) else task_name
    task = SERVICE_TASK_MAPPING.get(key)
    if task is None:
        raise UnknownTaskError(task_name, known=list(SERVICE_TASK_MAPPING))
    return ServiceTaskSettings(
        provider=task.provider,
        settings=get_optimal_settings(task.provider, task.task_type),
    )
