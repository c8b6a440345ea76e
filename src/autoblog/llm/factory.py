from __future__ import annotations

from typing import Optional

from autoblog import config

from ._retry import RetryConfig
from .base import ProviderConfig, TextProvider
from .bigmodel_client import BigModelLLM
from .errors import LLMError
from .fallback import FallbackOrchestrator
from .gemini_client import GeminiLLM

_ALIASES = {"glm": "bigmodel", "zhipu": "bigmodel", "google": "gemini"}


def build_llm(*, provider: str, model: Optional[str] = None) -> TextProvider:
    """Factory for provider clients.

    Providers:
    - gemini
    - bigmodel (aliases: glm, zhipu)
    """

    p = provider.lower().strip()
    p = _ALIASES.get(p, p)
    if p == "gemini":
        return GeminiLLM(
            ProviderConfig(
                name="gemini",
                model=model or config.GEMINI_MODEL,
                api_key_env=config.GEMINI_API_KEY_ENV,
                timeout_s=config.LLM_TIMEOUT_S,
                temperature=config.LLM_TEMPERATURE,
                max_output_tokens=config.LLM_MAX_OUTPUT_TOKENS,
                base_url=config.GEMINI_BASE_URL,
            )
        )
    if p == "bigmodel":
        return BigModelLLM(
            ProviderConfig(
                name="bigmodel",
                model=model or config.BIGMODEL_MODEL,
                api_key_env=config.BIGMODEL_API_KEY_ENV,
                timeout_s=config.LLM_TIMEOUT_S,
                temperature=config.LLM_TEMPERATURE,
                max_output_tokens=config.LLM_MAX_OUTPUT_TOKENS,
                base_url=config.BIGMODEL_BASE_URL,
            )
        )

    raise LLMError(f"Unknown LLM provider: {provider}")


def build_orchestrator(
    *, primary: Optional[str] = None, secondary: Optional[str] = None
) -> FallbackOrchestrator:
    primary_name = primary or config.PRIMARY_PROVIDER
    secondary_name = secondary or config.SECONDARY_PROVIDER
    return FallbackOrchestrator(
        primary=build_llm(provider=primary_name),
        secondary=build_llm(provider=secondary_name),
        retry=RetryConfig(
            max_retries=config.LLM_MAX_RETRIES,
            base_delay_s=config.LLM_RETRY_BASE_DELAY_S,
        ),
    )
