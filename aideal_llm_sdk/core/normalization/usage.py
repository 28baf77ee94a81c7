"""
Usage normalization module.

Each vendor reports token usage under different field names. The adapters
pass the raw usage object through ``normalize_usage`` so that every
UnifiedResponse carries the same shape:

    {"prompt_tokens": int, "completion_tokens": int, "total_tokens": int}
"""

from typing import Any, Dict, Optional

from ...models.generation import ProviderType

# Vendor field name candidates, first present wins
_PROMPT_FIELDS = {
    ProviderType.GPT: ("prompt_tokens",),
    ProviderType.GROK: ("prompt_tokens", "input_tokens"),
    ProviderType.CLAUDE: ("input_tokens",),
    ProviderType.GEMINI: ("prompt_token_count",),
}

_COMPLETION_FIELDS = {
    ProviderType.GPT: ("completion_tokens",),
    ProviderType.GROK: ("completion_tokens", "output_tokens"),
    ProviderType.CLAUDE: ("output_tokens",),
    ProviderType.GEMINI: ("candidates_token_count",),
}

_TOTAL_FIELDS = {
    ProviderType.GPT: ("total_tokens",),
    ProviderType.GROK: ("total_tokens",),
    ProviderType.CLAUDE: (),
    ProviderType.GEMINI: ("total_token_count",),
}


def usage_to_dict(usage: Any) -> Optional[Dict[str, Any]]:
    """Turn an SDK usage object (pydantic model, dict or plain object) into a dict."""
    if usage is None:
        return None
    if isinstance(usage, dict):
        return usage
    if hasattr(usage, "model_dump"):
        dumped = usage.model_dump()
        if isinstance(dumped, dict):
            return dumped
    if hasattr(usage, "__dict__"):
        return {k: v for k, v in vars(usage).items() if not k.startswith("_")}
    return None


def _first_int(data: Dict[str, Any], fields) -> int:
    for field in fields:
        value = data.get(field)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return int(value)
    return 0


def normalize_usage(usage_data: Any, provider: ProviderType) -> Dict[str, int]:
    """
    Normalize usage data into the standard SDK format.

    Args:
        usage_data: Raw usage from the vendor SDK (object, dict or None)
        provider: Provider that produced it

    Returns:
        Dict with prompt/completion/total token counts; zeros when unknown
    """
    data = usage_to_dict(usage_data) or {}

    prompt_tokens = _first_int(data, _PROMPT_FIELDS[provider])
    completion_tokens = _first_int(data, _COMPLETION_FIELDS[provider])
    total_tokens = _first_int(data, _TOTAL_FIELDS[provider])

    if total_tokens == 0:
        total_tokens = prompt_tokens + completion_tokens

    return {
        "prompt_tokens": prompt_tokens,
        "completion_tokens": completion_tokens,
        "total_tokens": total_tokens,
    }
