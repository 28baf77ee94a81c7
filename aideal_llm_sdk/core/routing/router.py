import asyncio
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from ...config.settings import ProviderClients, RouterSettings, build_clients
from ...config.tasks import get_service_task_settings, provider_for_task, resolve_provider
from ...models.generation import (
    GenerationOptions,
    ProviderType,
    TaskType,
    UnifiedMessage,
    UnifiedResponse,
)
from ...observability.logging import ProviderLogger
from ...providers.anthropic.adapter import ClaudeProvider
from ...providers.base import InvalidRequestError, ProviderAdapter, RouterError
from ...providers.errors import ErrorMapper
from ...providers.gemini.adapter import GeminiProvider
from ...providers.openai.adapter import GPTProvider
from ...providers.xai.adapter import GrokProvider
from ..normalization.messages import MessageInput, validate_messages

logger = ProviderLogger("router")

FALLBACK_MISSING_CREDENTIALS = "missing_credentials"

# Provider that serves requests for unconfigured vendors
FALLBACK_PROVIDER = ProviderType.GPT

ADAPTER_CLASSES = {
    ProviderType.GPT: GPTProvider,
    ProviderType.CLAUDE: ClaudeProvider,
    ProviderType.GROK: GrokProvider,
    ProviderType.GEMINI: GeminiProvider,
}

OptionsInput = Union[GenerationOptions, Dict[str, Any], None]
MessagesInput = Union[str, Sequence[MessageInput]]


def coerce_options(options: OptionsInput) -> GenerationOptions:
    """Accept GenerationOptions, a (camelCase or snake_case) dict, or None."""
    if options is None:
        return GenerationOptions()
    if isinstance(options, GenerationOptions):
        return options
    if isinstance(options, dict):
        try:
            return GenerationOptions.model_validate(options)
        except ValidationError as e:
            raise InvalidRequestError(f"Invalid generation options: {e}") from e
    raise InvalidRequestError(f"Invalid generation options type: {type(options).__name__}")


class AIRouter:
    """
    Routes generation requests to the AI providers.

    One adapter per ProviderType. A request for a provider whose client is
    not configured is served by GPT and marked with ``requested_provider``
    and ``fallback_reason`` on the response.
    """

    def __init__(self,
                 clients: Optional[ProviderClients] = None,
                 settings: Optional[RouterSettings] = None,
                 adapters: Optional[Mapping[ProviderType, ProviderAdapter]] = None):
        """
        Args:
            clients: Pre-built vendor clients (see ``build_clients``)
            settings: Default models per provider; defaults when omitted
            adapters: Explicit adapter table, replaces ``clients``/``settings``
        """
        if adapters is None:
            clients = clients or ProviderClients()
            models = (settings or RouterSettings()).default_models()
            adapters = {
                provider: adapter_cls(clients.for_provider(provider), models[provider])
                for provider, adapter_cls in ADAPTER_CLASSES.items()
            }

        missing = [p.value for p in ProviderType if p not in adapters]
        if missing:
            raise RouterError(f"No adapter registered for provider(s): {', '.join(missing)}")

        self.providers: Dict[ProviderType, ProviderAdapter] = dict(adapters)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AIRouter":
        """Read settings from the environment, build the clients once, return a router."""
        settings = RouterSettings.from_env(env)
        return cls(clients=build_clients(settings), settings=settings)

    def get_provider_status(self) -> Dict[str, bool]:
        """Configured/available flag per provider."""
        return {p.value: self.providers[p].is_available() for p in ProviderType}

    async def generate_with_ai(self,
                               provider: Union[ProviderType, str],
                               messages: MessagesInput,
                               options: OptionsInput = None) -> UnifiedResponse:
        """
        Generate a completion with one provider.

        Args:
            provider: ProviderType or its string value
            messages: Conversation; must contain at least one user message
            options: GenerationOptions, dict or None

        Returns:
            UnifiedResponse with non-empty content

        Raises:
            UnknownProviderError: provider outside the supported set
            InvalidRequestError: empty messages or no user message
            ProviderConfigurationError: GPT itself has no credential
            EmptyResponseError: the vendor returned no content
        """
        provider = resolve_provider(provider)
        validated: List[UnifiedMessage] = validate_messages(messages)
        opts = coerce_options(options)

        adapter = self.providers[provider]
        if provider != FALLBACK_PROVIDER and not adapter.is_available():
            logger.warning(
                f"{provider.value} API not configured, falling back to {FALLBACK_PROVIDER.value}",
                requested=provider.value
            )
            response = await self.providers[FALLBACK_PROVIDER].generate(validated, opts)
            return response.model_copy(update={
                "requested_provider": provider,
                "fallback_reason": FALLBACK_MISSING_CREDENTIALS,
            })

        return await adapter.generate(validated, opts)

    async def generate_for_task(self,
                                task_type: Union[TaskType, str],
                                messages: MessagesInput,
                                options: OptionsInput = None) -> UnifiedResponse:
        """Generate with the provider the task table assigns to ``task_type``."""
        provider = provider_for_task(task_type)
        logger.debug("Routing task", task_type=str(task_type), target=provider.value)
        return await self.generate_with_ai(provider, messages, options)

    async def generate_for_service_task(self,
                                        task_name: str,
                                        messages: MessagesInput,
                                        options: OptionsInput = None) -> UnifiedResponse:
        """
        Generate for an application service task with its tuned settings.

        Options set explicitly by the caller override the tuned temperature
        and max_tokens.
        """
        resolved = get_service_task_settings(task_name)
        opts = resolved.settings.to_options().merged_with(coerce_options(options))
        return await self.generate_with_ai(resolved.provider, messages, opts)

    async def generate_with_multiple_ais(self,
                                         providers: Sequence[Union[ProviderType, str]],
                                         messages: MessagesInput,
                                         options: OptionsInput = None) -> List[UnifiedResponse]:
        """
        Run the same request against several providers concurrently.

        Each failure, including an unknown provider name, is isolated into a
        placeholder response (``model="error"``, empty content) in its slot;
        output order matches ``providers``. A placeholder for an unknown name
        carries that name as ``provider``.
        """
        async def _run(requested: Union[ProviderType, str]) -> UnifiedResponse:
            provider: Union[ProviderType, str] = getattr(requested, "value", str(requested))
            try:
                provider = resolve_provider(requested)
                return await self.generate_with_ai(provider, messages, options)
            except Exception as e:
                category = ErrorMapper.categorize(e)
                placeholder = UnifiedResponse.failure(provider, e, category)
                logger.warning(
                    "Provider failed during multi-provider generation",
                    target=placeholder.provider_name,
                    error_type=type(e).__name__,
                    error_category=category
                )
                return placeholder

        return list(await asyncio.gather(*(_run(p) for p in providers)))
