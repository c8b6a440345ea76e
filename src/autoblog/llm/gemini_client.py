from __future__ import annotations

import os
from typing import Any, Optional

import requests

from autoblog import config as config_mod
from autoblog import logger as logger_mod

from .base import ProviderConfig, TextProvider
from .errors import (
    MissingAPIKeyError,
    ProviderError,
    ProviderHTTPError,
    ProviderResponseError,
)

log = logger_mod.get_logger()


class GeminiLLM(TextProvider):
    """Google Gemini `generateContent` over plain HTTP."""

    def __init__(
        self, config: ProviderConfig, session: Optional[requests.Session] = None
    ) -> None:
        self._cfg = config
        self.name = config.name
        self._base_url = (config.base_url or config_mod.GEMINI_BASE_URL).rstrip("/")
        self._http = session or requests

    @property
    def url(self) -> str:
        return f"{self._base_url}/models/{self._cfg.model}:generateContent"

    def _payload(self, prompt: str) -> dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self._cfg.temperature,
                "maxOutputTokens": self._cfg.max_output_tokens,
            },
        }

    def generate_text(self, prompt: str) -> str:
        api_key = os.getenv(self._cfg.api_key_env)
        if not api_key:
            raise MissingAPIKeyError(self.name, f"{self._cfg.api_key_env} not set")

        log.debug(f"POST {self.url} (model={self._cfg.model}, prompt_chars={len(prompt)})")
        try:
            resp = self._http.post(
                self.url,
                json=self._payload(prompt),
                headers={"Content-Type": "application/json", "x-goog-api-key": api_key},
                timeout=self._cfg.timeout_s,
            )
        except requests.exceptions.RequestException as e:
            message = str(e).replace(api_key, "***")
            raise ProviderError(self.name, f"Request failed: {message}") from e

        if not resp.ok:
            raise ProviderHTTPError(
                self.name, resp.status_code, (resp.text or "").replace(api_key, "***")
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise ProviderResponseError(self.name, "Gemini returned invalid JSON") from e

        return extract_gemini_text(data, provider=self.name)


def extract_gemini_text(data: Any, *, provider: str = "gemini") -> str:
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        text = None
    if not isinstance(text, str) or not text:
        raise ProviderResponseError(provider, "Invalid Gemini response format")
    return text
