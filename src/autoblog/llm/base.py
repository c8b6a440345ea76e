from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class ProviderConfig:
    name: str
    model: str
    api_key_env: str
    timeout_s: float = 60.0
    temperature: float = 0.7
    max_output_tokens: int = 8192
    base_url: Optional[str] = None


class TextProvider(Protocol):
    """Small interface for "prompt in, text out" generation.

    Implementations raise on any failure (transport, status, body shape);
    callers treat every exception as a failed attempt.
    """

    name: str

    def generate_text(self, prompt: str) -> str:
        raise NotImplementedError
