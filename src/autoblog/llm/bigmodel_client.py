from __future__ import annotations

import os
from typing import Any, Optional

import openai
from openai import OpenAI

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

SYSTEM_PROMPT = "You are a helpful assistant. Reply in Markdown format."


class BigModelLLM(TextProvider):
    """BigModel (Zhipu GLM) client via its OpenAI-compatible chat endpoint.

    The OpenAI client is built lazily on first use so a missing API key is a
    failed call rather than a construction error.
    """

    def __init__(self, config: ProviderConfig, client: Optional[Any] = None) -> None:
        self._cfg = config
        self.name = config.name
        self._client = client

    def _get_client(self) -> Any:
        if self._client is not None:
            return self._client

        api_key = os.getenv(self._cfg.api_key_env)
        if not api_key:
            raise MissingAPIKeyError(self.name, f"{self._cfg.api_key_env} not set")

        self._client = OpenAI(
            api_key=api_key,
            base_url=self._cfg.base_url or config_mod.BIGMODEL_BASE_URL,
            timeout=self._cfg.timeout_s,
            max_retries=0,
        )
        return self._client

    def generate_text(self, prompt: str) -> str:
        client = self._get_client()
        log.debug(f"chat.completions.create (model={self._cfg.model}, prompt_chars={len(prompt)})")
        try:
            resp = client.chat.completions.create(
                model=self._cfg.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self._cfg.temperature,
                max_tokens=self._cfg.max_output_tokens,
            )
        except openai.APIStatusError as e:
            raise ProviderHTTPError(self.name, e.status_code, str(e.message)) from e
        except openai.OpenAIError as e:
            raise ProviderError(self.name, f"Request failed: {e}") from e

        return extract_chat_text(resp, provider=self.name)


def extract_chat_text(resp: Any, *, provider: str = "bigmodel") -> str:
    try:
        text = resp.choices[0].message.content
    except (AttributeError, IndexError, TypeError):
        text = None
    if not isinstance(text, str) or not text.strip():
        raise ProviderResponseError(provider, "Invalid BigModel response format")
    return text
