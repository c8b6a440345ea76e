"""LLM provider adapters and primary/secondary fallback orchestration.

Design goals:
- Keep provider-specific transports (requests, openai SDK) isolated.
- Provide a small, stable "prompt in, text out" interface.
- Always hand callers a uniform GenerationResult, never a provider exception.
"""

from ._retry import RetryConfig
from .errors import LLMError, ProviderError
from .factory import build_llm, build_orchestrator
from .fallback import FallbackOrchestrator, generate_content
from .types import GenerationResult, Source

__all__ = [
    "FallbackOrchestrator",
    "GenerationResult",
    "LLMError",
    "ProviderError",
    "RetryConfig",
    "Source",
    "build_llm",
    "build_orchestrator",
    "generate_content",
]
