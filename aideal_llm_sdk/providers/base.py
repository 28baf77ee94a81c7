"""
Base Provider Adapter Interface

This module defines the abstract base class for all AI provider adapters and
the error types shared by adapters and the router. Every vendor adapter
inherits from ProviderAdapter so the router can treat them interchangeably.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..models.generation import GenerationOptions, ProviderType, UnifiedMessage, UnifiedResponse


class ProviderAdapter(ABC):
    """
    Abstract base class for AI provider adapters.

    The adapter is responsible for:
    - Translating unified messages to the vendor's message format
    - Applying vendor defaults and quirks (fixed temperature, JSON emulation)
    - Making exactly one API call to the vendor
    - Normalizing the answer into a UnifiedResponse

    Provider adapters should NOT contain:
    - Task routing
    - Fallback between providers
    """

    provider: ProviderType

    def __init__(self, client: Optional[Any], default_model: str):
        """
        Args:
            client: Pre-built vendor SDK client, or None when no credential
                is configured for this vendor.
            default_model: Model used when the caller gives no override.
        """
        self._client = client
        self.default_model = default_model

    @property
    def client(self) -> Any:
        """The injected vendor client; raises if the vendor is not configured."""
        if self._client is None:
            raise ProviderConfigurationError(
                f"{self.provider.value} API key not configured",
                provider=self.provider.value,
            )
        return self._client

    def is_available(self) -> bool:
        """Check if the provider has a configured client."""
        return self._client is not None

    def resolve_model(self, options: GenerationOptions) -> str:
        """Model to call; only adapters that honour overrides change this."""
        return self.default_model

    @abstractmethod
    async def generate(
        self,
        messages: List[UnifiedMessage],
        options: GenerationOptions
    ) -> UnifiedResponse:
        """
        Generate a completion from the provider.

        Args:
            messages: Validated conversation, at least one user message
            options: Caller options (temperature, json_mode, max_tokens, model)

        Returns:
            UnifiedResponse with non-empty content

        Raises:
            EmptyResponseError: The vendor returned no usable text
            Exception: Transport/SDK errors are re-raised unchanged
        """
        pass


class RouterError(Exception):
    """Base exception for router errors."""
    pass


class InvalidRequestError(RouterError, ValueError):
    """Raised when messages or options do not satisfy the request contract."""
    pass


class UnknownProviderError(InvalidRequestError):
    """Raised for a provider identifier outside the supported set."""

    def __init__(self, provider: Any):
        self.provider = provider
        supported = ", ".join(p.value for p in ProviderType)
        super().__init__(f"Unknown AI provider: {provider!r} (supported: {supported})")


class UnknownTaskError(InvalidRequestError, KeyError):
    """Raised for a task identifier missing from the task tables."""

    def __init__(self, task: Any, known: Optional[List[str]] = None):
        self.task = task
        self.known = known or []
        message = f"Unknown task type: {task!r}"
        if self.known:
            message += f" (known: {', '.join(self.known)})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class ProviderError(RouterError):
    """
    Base exception for provider-bound errors raised by the router itself.

    Vendor SDK exceptions are never wrapped in this type; they reach the
    caller unchanged.

    Attributes:
        provider: Provider name
        status_code: HTTP status code if applicable
        finish_reason: Vendor completion/finish reason if reported
    """

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: Optional[int] = None,
        finish_reason: Optional[str] = None
    ):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
        self.finish_reason = finish_reason


class ProviderConfigurationError(ProviderError):
    """Raised when a provider with no fallback has no credential."""
    pass


class EmptyResponseError(ProviderError):
    """Raised when a vendor call succeeded but produced no usable text."""

    def __init__(self, provider: str, model: str, finish_reason: Optional[str] = None,
                 detail: str = "empty content"):
        self.model = model
        message = (
            f"{provider} returned {detail} (model={model}, "
            f"finish_reason={finish_reason or 'unknown'})"
        )
        super().__init__(message, provider=provider, finish_reason=finish_reason)
