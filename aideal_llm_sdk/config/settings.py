"""
Environment-driven router settings and vendor client construction.

Clients are built once from ``RouterSettings`` and handed to the router as a
frozen ``ProviderClients`` record; a vendor without a credential gets
``None`` and the router falls back to GPT for it.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence

from anthropic import AsyncAnthropic
from dotenv import load_dotenv
from google import genai
from openai import AsyncOpenAI
from pydantic import BaseModel, ConfigDict

from ..models.generation import ProviderType
from ..observability.logging import ProviderLogger
from ..providers.anthropic.adapter import DEFAULT_CLAUDE_MODEL
from ..providers.gemini.adapter import DEFAULT_GEMINI_MODEL
from ..providers.openai.adapter import DEFAULT_GPT_MODEL
from ..providers.xai.adapter import DEFAULT_GROK_BASE_URL, DEFAULT_GROK_MODEL

logger = ProviderLogger("config")

DEFAULT_TIMEOUT_SECONDS = 60.0


def _first_env(env: Mapping[str, str], names: Sequence[str]) -> Optional[str]:
    """First non-empty value among ``names``; empty strings count as absent."""
    for name in names:
        value = env.get(name)
        if value and value.strip():
            return value.strip()
    return None


class RouterSettings(BaseModel):
    """Credentials, default models and timeouts for every vendor."""

    model_config = ConfigDict(frozen=True)

    openai_api_key: Optional[str] = None
    openai_model: str = DEFAULT_GPT_MODEL
    request_timeout: float = DEFAULT_TIMEOUT_SECONDS

    claude_api_key: Optional[str] = None
    claude_model: str = DEFAULT_CLAUDE_MODEL

    grok_api_key: Optional[str] = None
    grok_model: str = DEFAULT_GROK_MODEL
    grok_base_url: str = DEFAULT_GROK_BASE_URL

    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_GEMINI_MODEL

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None,
                 load_dotenv_file: bool = True) -> "RouterSettings":
        """
        Read settings from environment variables.

        Args:
            env: Mapping to read instead of ``os.environ`` (tests)
            load_dotenv_file: Load a ``.env`` file first when reading os.environ
        """
        if env is None:
            if load_dotenv_file:
                load_dotenv()
            env = os.environ

        raw_timeout = _first_env(env, ["OPENAI_TIMEOUT"])
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_SECONDS
        except ValueError:
            logger.warning(f"Invalid OPENAI_TIMEOUT {raw_timeout!r}, using {DEFAULT_TIMEOUT_SECONDS}")
            timeout = DEFAULT_TIMEOUT_SECONDS
        if timeout <= 0:
            timeout = DEFAULT_TIMEOUT_SECONDS

        return cls(
            openai_api_key=_first_env(env, ["OPENAI_API_KEY"]),
            openai_model=_first_env(env, ["OPENAI_MODEL"]) or DEFAULT_GPT_MODEL,
            request_timeout=timeout,
            claude_api_key=_first_env(env, ["CLAUDE_API_KEY", "ANTHROPIC_API_KEY"]),
            claude_model=_first_env(env, ["CLAUDE_MODEL"]) or DEFAULT_CLAUDE_MODEL,
            grok_api_key=_first_env(env, ["GROK_API_KEY", "XAI_API_KEY"]),
            grok_model=_first_env(env, ["GROK_MODEL"]) or DEFAULT_GROK_MODEL,
            grok_base_url=_first_env(env, ["GROK_BASE_URL"]) or DEFAULT_GROK_BASE_URL,
            gemini_api_key=_first_env(env, ["GEMINI_API_KEY", "GOOGLE_API_KEY"]),
            gemini_model=_first_env(env, ["GEMINI_MODEL"]) or DEFAULT_GEMINI_MODEL,
        )

    def default_models(self) -> Dict[ProviderType, str]:
        return {
            ProviderType.GPT: self.openai_model,
            ProviderType.CLAUDE: self.claude_model,
            ProviderType.GROK: self.grok_model,
            ProviderType.GEMINI: self.gemini_model,
        }


@dataclass(frozen=True)
class ProviderClients:
    """Vendor SDK clients, one per provider; ``None`` when not configured."""

    gpt: Optional[Any] = None
    claude: Optional[Any] = None
    grok: Optional[Any] = None
    gemini: Optional[Any] = None

    def for_provider(self, provider: ProviderType) -> Optional[Any]:
        return getattr(self, provider.value)

    def configured(self) -> Dict[str, bool]:
        return {p.value: self.for_provider(p) is not None for p in ProviderType}


def build_clients(settings: RouterSettings) -> ProviderClients:
    """Instantiate a vendor client for every provider that has a credential."""
    gpt = None
    if settings.openai_api_key:
        gpt = AsyncOpenAI(api_key=settings.openai_api_key, timeout=settings.request_timeout)

    claude = None
    if settings.claude_api_key:
        claude = AsyncAnthropic(api_key=settings.claude_api_key, timeout=settings.request_timeout)

    grok = None
    if settings.grok_api_key:
        grok = AsyncOpenAI(
            api_key=settings.grok_api_key,
            base_url=settings.grok_base_url,
            timeout=settings.request_timeout
        )

    gemini = None
    if settings.gemini_api_key:
        gemini = genai.Client(api_key=settings.gemini_api_key)

    clients = ProviderClients(gpt=gpt, claude=claude, grok=grok, gemini=gemini)
    logger.info("Provider clients built", configured=",".join(
        name for name, ok in clients.configured().items() if ok
    ) or "none")
    return clients
