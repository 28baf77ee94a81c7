from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProviderType(str, Enum):
    """Supported AI providers."""
    GPT = "gpt"
    CLAUDE = "claude"
    GROK = "grok"
    GEMINI = "gemini"


class MessageRole(str, Enum):
    """Message roles accepted by the router."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    DEVELOPER = "developer"


SYSTEM_LEVEL_ROLES = frozenset({MessageRole.SYSTEM, MessageRole.DEVELOPER})


class UnifiedMessage(BaseModel):
    """Provider-agnostic chat message."""

    model_config = ConfigDict(frozen=True)

    role: MessageRole
    content: str

    @property
    def is_system_level(self) -> bool:
        return self.role in SYSTEM_LEVEL_ROLES


class GenerationOptions(BaseModel):
    """
    Caller options for a single generation.

    Every field is optional; each provider adapter applies its own defaults
    (for example Claude and Gemini default to an 8192 token output budget,
    while GPT always samples at temperature 1).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    temperature: Optional[float] = Field(None, ge=0.0, le=2.0, description="Sampling temperature")
    json_mode: bool = Field(False, alias="jsonMode", description="Request or emulate raw JSON output")
    max_tokens: Optional[int] = Field(None, ge=1, alias="maxTokens", description="Output length cap")
    model: Optional[str] = Field(None, description="Model override (honoured by the GPT adapter)")

    def merged_with(self, overrides: "GenerationOptions") -> "GenerationOptions":
        """Return a copy where every field explicitly set on ``overrides`` wins."""
        data = self.model_dump()
        data.update(overrides.model_dump(exclude_unset=True))
        return GenerationOptions(**data)


class UnifiedResponse(BaseModel):
    """Normalized response envelope returned for every provider."""

    content: str
    # Raw identifier only on placeholders for names outside ProviderType
    provider: Union[ProviderType, str] = Field(union_mode="left_to_right")
    model: str
    finish_reason: Optional[str] = None
    usage: Dict[str, Any] = Field(default_factory=dict)

    # Set when the requested provider was replaced by GPT
    requested_provider: Optional[ProviderType] = None
    fallback_reason: Optional[str] = None

    # Only populated on fan-out placeholders
    error: Optional[str] = None
    error_category: Optional[str] = None

    @field_validator("content", mode="before")
    def _content_is_text(cls, v):
        if v is None:
            return ""
        return v

    @property
    def fell_back(self) -> bool:
        """True when the request was served by the GPT fallback."""
        return self.fallback_reason is not None

    @property
    def failed(self) -> bool:
        """True for fan-out placeholders produced from a provider failure."""
        return self.model == "error"

    @property
    def provider_name(self) -> str:
        return self.provider.value if isinstance(self.provider, ProviderType) else self.provider

    @classmethod
    def failure(cls, provider: Union[ProviderType, str], error: Exception,
                category: Optional[str] = None) -> "UnifiedResponse":
        """Build the inert placeholder used by multi-provider fan-out."""
        return cls(
            content="",
            provider=provider,
            model="error",
            error=str(error) or type(error).__name__,
            error_category=category,
        )


class TaskType(str, Enum):
    """Logical tasks that the router maps onto a preferred provider."""
    PROMPT_GENERATION = "prompt_generation"
    QUESTION_GENERATION = "question_generation"
    PROMPT_ANALYSIS = "prompt_analysis"
    PROMPT_OPTIMIZATION = "prompt_optimization"
    CODE_GENERATION = "code_generation"
    LEARNING_CONTENT = "learning_content"
    TREND_ANALYSIS = "trend_analysis"
    REAL_TIME_SUGGESTIONS = "real_time_suggestions"
