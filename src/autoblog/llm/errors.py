from __future__ import annotations

from typing import Optional


class LLMError(RuntimeError):
    pass


class ProviderError(LLMError):
    """A single provider call failed."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(message)
        self.provider = provider


class MissingAPIKeyError(ProviderError):
    """The env var holding the provider's API key is unset."""


class ProviderHTTPError(ProviderError):
    def __init__(
        self, provider: str, status_code: Optional[int], response_body: str = ""
    ) -> None:
        body = (response_body or "").strip()[:300]
        super().__init__(provider, f"HTTP {status_code}: {body}".strip())
        self.status_code = status_code
        self.response_body = body


class ProviderResponseError(ProviderError):
    """The provider answered, but the body did not have the expected shape."""
