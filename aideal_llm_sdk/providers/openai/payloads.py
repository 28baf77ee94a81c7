from typing import Any, Dict, List

from ...models.generation import GenerationOptions

# GPT-5 models only accept the default sampling temperature
GPT_FIXED_TEMPERATURE = 1

JSON_OBJECT_FORMAT = {"type": "json_object"}


def build_chat_completion_payload(
    model: str,
    messages: List[Dict[str, str]],
    options: GenerationOptions,
) -> Dict[str, Any]:
    """Build the Chat Completions payload for GPT.

    The caller's temperature is ignored and ``max_tokens`` is sent as
    ``max_completion_tokens``, the only length field GPT-5 accepts.
    """
    payload: Dict[str, Any] = {
        "model": model,
        "messages": messages,
        "temperature": GPT_FIXED_TEMPERATURE,
    }
    if options.max_tokens is not None:
        payload["max_completion_tokens"] = options.max_tokens
    if options.json_mode:
        payload["response_format"] = dict(JSON_OBJECT_FORMAT)
    return payload
