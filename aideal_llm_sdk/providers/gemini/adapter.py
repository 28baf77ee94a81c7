from typing import List

from google import genai

from ..base import EmptyResponseError, ProviderAdapter
from ...models.generation import GenerationOptions, ProviderType, UnifiedMessage, UnifiedResponse
from ...core.normalization.usage import normalize_usage
from ...observability.logging import ProviderLogger
from .payloads import build_generate_content_request, finish_reason_name

logger = ProviderLogger("gemini")

DEFAULT_GEMINI_MODEL = "gemini-2.0-flash-exp"


class GeminiProvider(ProviderAdapter):
    """Google Gemini provider using the google-genai async client."""

    provider = ProviderType.GEMINI

    def __init__(self, client: genai.Client = None, default_model: str = DEFAULT_GEMINI_MODEL):
        super().__init__(client, default_model)

    async def generate(self,
                       messages: List[UnifiedMessage],
                       options: GenerationOptions) -> UnifiedResponse:
        """Generate text using Gemini ``generate_content``."""
        model = self.resolve_model(options)

        with logger.track_request("generate", model) as request_info:
            contents, config = build_generate_content_request(messages, options)

            logger.log_request_shape(
                model,
                request_info['request_id'],
                contents,
                max_tokens=config.max_output_tokens,
                temperature=config.temperature,
                json_mode=options.json_mode
            )

            response = await self.client.aio.models.generate_content(
                model=model,
                contents=contents,
                config=config
            )

            text_content = getattr(response, "text", None) or ""
            finish_reason = finish_reason_name(response)
            usage = normalize_usage(getattr(response, "usage_metadata", None), self.provider)

            logger.log_response_shape(
                model,
                request_info['request_id'],
                text_content,
                finish_reason=finish_reason,
                usage=usage
            )

            if not text_content.strip():
                raise EmptyResponseError(self.provider.value, model, finish_reason=finish_reason)

            return UnifiedResponse(
                content=text_content,
                provider=self.provider,
                model=model,
                finish_reason=finish_reason,
                usage=usage
            )
