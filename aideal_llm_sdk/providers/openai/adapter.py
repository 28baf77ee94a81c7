from typing import List

from openai import AsyncOpenAI

from ..base import EmptyResponseError, ProviderAdapter
from ...models.generation import GenerationOptions, ProviderType, UnifiedMessage, UnifiedResponse
from ...core.normalization.messages import to_openai_messages
from ...core.normalization.usage import normalize_usage
from ...observability.logging import ProviderLogger
from .payloads import build_chat_completion_payload

logger = ProviderLogger("gpt")

DEFAULT_GPT_MODEL = "gpt-5.1-2025-11-13"


class GPTProvider(ProviderAdapter):
    """OpenAI GPT provider over the Chat Completions API."""

    provider = ProviderType.GPT

    def __init__(self, client: AsyncOpenAI = None, default_model: str = DEFAULT_GPT_MODEL):
        super().__init__(client, default_model)

    def resolve_model(self, options: GenerationOptions) -> str:
        return options.model or self.default_model

    async def generate(self,
                       messages: List[UnifiedMessage],
                       options: GenerationOptions) -> UnifiedResponse:
        """Generate text using OpenAI Chat Completions."""
        model = self.resolve_model(options)

        with logger.track_request("generate", model) as request_info:
            formatted_messages = to_openai_messages(messages)
            payload = build_chat_completion_payload(model, formatted_messages, options)

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
            if not choices:
                raise EmptyResponseError(self.provider.value, model, detail="no choices")

            choice = choices[0]
            finish_reason = getattr(choice, "finish_reason", None)
            content = getattr(choice.message, "content", None) or ""
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
