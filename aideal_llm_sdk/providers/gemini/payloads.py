from typing import Any, Dict, List, Optional, Tuple

from google.genai import types

from ...models.generation import GenerationOptions, MessageRole, UnifiedMessage
from ...core.normalization.messages import split_system_messages

GEMINI_DEFAULT_TEMPERATURE = 1.0
GEMINI_DEFAULT_MAX_OUTPUT_TOKENS = 8192

JSON_MIME_TYPE = "application/json"


def to_gemini_contents(conversation: List[UnifiedMessage]) -> List[Dict[str, Any]]:
    """Map user/assistant turns to Gemini contents; assistant becomes ``model``."""
    contents = []
    for msg in conversation:
        role = "user" if msg.role == MessageRole.USER else "model"
        contents.append({"role": role, "parts": [{"text": msg.content}]})
    return contents


def build_generation_config(system_instruction: Optional[str],
                            options: GenerationOptions) -> types.GenerateContentConfig:
    config_kwargs: Dict[str, Any] = {
        "temperature": (
            options.temperature if options.temperature is not None else GEMINI_DEFAULT_TEMPERATURE
        ),
        "max_output_tokens": options.max_tokens or GEMINI_DEFAULT_MAX_OUTPUT_TOKENS,
    }
    if system_instruction:
        config_kwargs["system_instruction"] = system_instruction
    if options.json_mode:
        config_kwargs["response_mime_type"] = JSON_MIME_TYPE
    return types.GenerateContentConfig(**config_kwargs)


def build_generate_content_request(
    messages: List[UnifiedMessage],
    options: GenerationOptions,
) -> Tuple[List[Dict[str, Any]], types.GenerateContentConfig]:
    """Return ``(contents, config)`` for ``client.aio.models.generate_content``."""
    system_instruction, conversation = split_system_messages(messages)
    return to_gemini_contents(conversation), build_generation_config(system_instruction, options)


def finish_reason_name(response: Any) -> Optional[str]:
    """Finish reason of the first candidate as a plain string."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None
    reason = getattr(candidates[0], "finish_reason", None)
    if reason is None:
        return None
    return getattr(reason, "name", None) or str(reason)
