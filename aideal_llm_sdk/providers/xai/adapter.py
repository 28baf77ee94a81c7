from typing import Any, Dict, List

from openai import AsyncOpenAI

from ..base import EmptyResponseError, ProviderAdapter
from ...models.generation import GenerationOptions, ProviderType, UnifiedMessage, UnifiedResponse
from ...core.normalization.messages import to_openai_messages
from ...core.normalization.usage import normalize_usage
from ...observability.logging import ProviderLogger

logger = ProviderLogger("grok")

DEFAULT_GROK_MODEL = "grok-3"
DEFAULT_GROK_BASE_URL = "https://api.x.ai/v1"
GROK_DEFAULT_TEMPERATURE = 1


class GrokProvider(ProviderAdapter):
    """xAI Grok provider, reached through xAI's OpenAI-compatible endpoint."""

    provider = ProviderType.GROK

    def __init__(self, client: AsyncOpenAI = None, default_model: str = DEFAULT_GROK_MODEL):
        super().__init__(client, default_model)

    def _build_payload(self, model: str, messages: List[Dict[str, str]],
                       options: GenerationOptions) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": model,
            "messages": messages,
            "temperature": (
                options.temperature if options.temperature is not None else GROK_DEFAULT_TEMPERATURE
            ),
        }
        if options.max_tokens is not None:
            payload["max_tokens"] = options.max_tokens
        if options.json_mode:
            payload["response_format"] = {"type": "json_object"}
        return payload

    async def generate(self,
                       messages: List[UnifiedMessage],
                       options: GenerationOptions) -> UnifiedResponse:
        """Generate text using the xAI chat completions endpoint."""
        model = self.resolve_model(options)

        with logger.track_request("generate", model) as request_info:
            formatted_messages = to_openai_messages(messages)
            payload = self._build_payload(model, formatted_messages, options)

            logger.log_request_shape(
                model,
                request_info['request_id'],
                formatted_messages,
                max_tokens=options.max_tokens,
                temperature=payload["temperature"],
                json_mode=options.json_mode
            )

            completion = await self.client.chat.completions.create(**payload)

            choices = getattr(completion, "choices", None) or []
            finish_reason = getattr(choices[0], "finish_reason", None) if choices else None
            content = (getattr(choices[0].message, "content", None) or "") if choices else ""
            usage = normalize_usage(getattr(completion, "usage", None), self.provider)

            logger.log_response_shape(
                model,
                request_info['request_id'],
                content,
                finish_reason=finish_reason,
                usage=usage
            )

            if not content.strip():
                raise EmptyResponseError(self.provider.value, model, finish_reason=finish_reason)

            return UnifiedResponse(
                content=content,
                provider=self.provider,
                model=model,
                finish_reason=finish_reason,
                usage=usage
            )
