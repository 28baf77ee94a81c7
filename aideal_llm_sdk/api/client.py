"""Module-level entry points over a lazily built default router."""

from typing import Dict, List, Optional, Sequence, Union

from ..core.routing.router import AIRouter, MessagesInput, OptionsInput
from ..models.generation import ProviderType, TaskType, UnifiedResponse

_default_router: Optional[AIRouter] = None


def get_default_router() -> AIRouter:
    """Return the process-wide router, building it from the environment on first use."""
    global _default_router
    if _default_router is None:
        _default_router = AIRouter.from_env()
    return _default_router


def set_default_router(router: Optional[AIRouter]) -> None:
    """Replace the default router (``None`` rebuilds it from the environment on next use)."""
    global _default_router
    _default_router = router


async def generate_with_ai(provider: Union[ProviderType, str],
                           messages: MessagesInput,
                           options: OptionsInput = None) -> UnifiedResponse:
    return await get_default_router().generate_with_ai(provider, messages, options)


async def generate_for_task(task_type: Union[TaskType, str],
                            messages: MessagesInput,
                            options: OptionsInput = None) -> UnifiedResponse:
    return await get_default_router().generate_for_task(task_type, messages, options)


async def generate_for_service_task(task_name: str,
                                    messages: MessagesInput,
                                    options: OptionsInput = None) -> UnifiedResponse:
    return await get_default_router().generate_for_service_task(task_name, messages, options)


async def generate_with_multiple_ais(providers: Sequence[Union[ProviderType, str]],
                                     messages: MessagesInput,
                                     options: OptionsInput = None) -> List[UnifiedResponse]:
    return await get_default_router().generate_with_multiple_ais(providers, messages, options)


def get_provider_status() -> Dict[str, bool]:
    return get_default_router().get_provider_status()


# Convenience function for quick usage
async def generate(prompt: str,
                   provider: Union[ProviderType, str] = ProviderType.GPT,
                   temperature: Optional[float] = None,
                   max_tokens: Optional[int] = None,
                   json_mode: bool = False) -> str:
    """Quick generation function that returns just the text."""
    options = {"json_mode": json_mode}
    if temperature is not None:
        options["temperature"] = temperature
    if max_tokens is not None:
        options["max_tokens"] = max_tokens
    response = await generate_with_ai(provider, prompt, options)
    return response.content
