from typing import List

from anthropic import AsyncAnthropic

from ..base import EmptyResponseError, ProviderAdapter
from ...models.generation import GenerationOptions, ProviderType, UnifiedMessage, UnifiedResponse
from ...core.normalization.json_extraction import extract_json_payload
from ...core.normalization.usage import normalize_usage
from ...observability.logging import ProviderLogger
from .parsers import extract_text_from_messages_response
from .payloads import build_messages_payload

logger = ProviderLogger("claude")

DEFAULT_CLAUDE_MODEL = "claude-sonnet-4-5-20250929"


class ClaudeProvider(ProviderAdapter):
    """Anthropic Claude provider over the Messages API."""

    provider = ProviderType.CLAUDE

    def __init__(self, client: AsyncAnthropic = None, default_model: str = DEFAULT_CLAUDE_MODEL):
        super().__init__(client, default_model)

    async def generate(self,
                       messages: List[UnifiedMessage],
                       options: GenerationOptions) -> UnifiedResponse:
        """Generate text using the Anthropic Messages API.

        JSON mode is emulated through prompt instructions; the answer is then
        passed through ``extract_json_payload`` to strip markdown fences.
        """
        model = self.resolve_model(options)

        with logger.track_request("generate", model) as request_info:
            params = build_messages_payload(model, messages, options)

            logger.log_request_shape(
                model,
                request_info['request_id'],
                params["messages"],
                max_tokens=params["max_tokens"],
                temperature=params["temperature"],
                json_mode=options.json_mode
            )

            response = await self.client.messages.create(**params)

            text_content = extract_text_from_messages_response(response)
            stop_reason = getattr(response, "stop_reason", None)
            usage = normalize_usage(getattr(response, "usage", None), self.provider)

            logger.log_response_shape(
                model,
                request_info['request_id'],
                text_content,
                finish_reason=stop_reason,
                usage=usage
            )

            if not text_content.strip():
                raise EmptyResponseError(self.provider.value, model, finish_reason=stop_reason)

            if options.json_mode:
                extracted = extract_json_payload(text_content)
                if extracted != text_content:
                    logger.debug(
                        "Extracted JSON payload from response",
                        model=model,
                        request_id=request_info['request_id'],
                        original_length=len(text_content),
                        extracted_length=len(extracted)
                    )
                text_content = extracted

            return UnifiedResponse(
                content=text_content,
                provider=self.provider,
                model=model,
                finish_reason=stop_reason,
                usage=usage
            )
